"""
Season Simulator - the single entry point of the engine.

Pipeline:
    bracket formation -> bracket stages -> top pool -> semifinal cuts -> finale
"""
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence, Tuple
import logging

from allstars_sim.core.protocols import RandomSource
from allstars_sim.core.rng import NumpyRandomSource
from allstars_sim.exceptions import ConfigurationError, ConfigurationMismatch
from .brackets import EPISODES_PER_BRACKET, form_brackets, run_bracket
from .finale import SEMIFINAL_CUTS, eliminate_semifinalists, run_finale
from .records import BracketResult, EpisodeRecord, SeasonMeta, SeasonResult

logger = logging.getLogger(__name__)

SEASON_FORMAT = "All Stars 10 (custom)"
DEFAULT_BRACKET_COUNT = 3
DEFAULT_BRACKET_SIZE = 6
TOP_PER_BRACKET = 3
MIN_BRACKET_SIZE = 3


def competitor_name(competitor: Any) -> str:
    """Accept a name string, a mapping with "name", or an object with ``.name``."""
    if isinstance(competitor, str):
        return competitor
    if isinstance(competitor, dict):
        return competitor["name"]
    return competitor.name


def validate_layout(count: int, bracket_count: int, bracket_size: int) -> None:
    """Raise before any draws if the layout cannot hold ``count`` competitors."""
    if bracket_count < 1:
        raise ConfigurationError(f"bracket_count must be at least 1 (got {bracket_count})")
    if bracket_size < MIN_BRACKET_SIZE:
        raise ConfigurationError(
            f"bracket_size must be at least {MIN_BRACKET_SIZE} (got {bracket_size})"
        )
    expected = bracket_count * bracket_size
    if count != expected:
        raise ConfigurationMismatch(expected=expected, actual=count)


def build_top_pool(brackets: Sequence[BracketResult], per_bracket: int = TOP_PER_BRACKET) -> Tuple[str, ...]:
    """Top standings of every bracket, in bracket order."""
    pool: List[str] = []
    for bracket in brackets:
        pool.extend(bracket.top(per_bracket))
    return tuple(pool)


def run_bracket_stages(
    groups: Sequence[Sequence[str]],
    rng: RandomSource,
    bracket_rngs: Optional[Sequence[RandomSource]] = None,
    max_workers: Optional[int] = None,
) -> Tuple[BracketResult, ...]:
    """
    Run every bracket, 1..N.
    
    With ``bracket_rngs`` each bracket draws from its own stream, which
    also allows running them on a thread pool. Without it all brackets
    share ``rng`` and run strictly in order.
    """
    if bracket_rngs is None:
        if max_workers is not None and max_workers > 1:
            raise ConfigurationError("Parallel brackets need one random source per bracket")
        return tuple(
            run_bracket(index, group, rng, EPISODES_PER_BRACKET)
            for index, group in enumerate(groups, start=1)
        )
    
    if len(bracket_rngs) != len(groups):
        raise ConfigurationError(
            f"Expected {len(groups)} bracket random sources (got {len(bracket_rngs)})"
        )
    
    jobs = list(zip(range(1, len(groups) + 1), groups, bracket_rngs))
    if max_workers is None or max_workers <= 1:
        return tuple(run_bracket(index, group, source) for index, group, source in jobs)
    
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(run_bracket, index, group, source) for index, group, source in jobs]
        return tuple(future.result() for future in futures)


def simulate_season(
    competitors: Sequence[Any],
    rng: Optional[RandomSource] = None,
    bracket_count: int = DEFAULT_BRACKET_COUNT,
    bracket_size: int = DEFAULT_BRACKET_SIZE,
    bracket_rngs: Optional[Sequence[RandomSource]] = None,
    max_workers: Optional[int] = None,
) -> SeasonResult:
    """
    Simulate one full season.
    
    Args:
        competitors: Names, or records exposing a name, bracket_count * bracket_size long
        rng: Source of uniform draws (default: unseeded NumpyRandomSource)
        bracket_count: Number of brackets
        bracket_size: Competitors per bracket
        bracket_rngs: Optional independent source per bracket
        max_workers: Thread pool size for brackets (needs bracket_rngs)
        
    Returns:
        SeasonResult
        
    Raises:
        ConfigurationMismatch: competitor count does not fill the layout
        ConfigurationError: layout itself is invalid
    """
    names = tuple(competitor_name(c) for c in competitors)
    validate_layout(len(names), bracket_count, bracket_size)
    
    if rng is None:
        rng = NumpyRandomSource()
    
    groups = form_brackets(names, bracket_count)
    logger.debug(f"Formed {len(groups)} brackets of {bracket_size}")
    
    bracket_results = run_bracket_stages(groups, rng, bracket_rngs, max_workers)
    episodes: Tuple[EpisodeRecord, ...] = tuple(
        episode for bracket in bracket_results for episode in bracket.episodes
    )
    
    top_pool = build_top_pool(bracket_results)
    eliminated, finalists = eliminate_semifinalists(top_pool, rng, SEMIFINAL_CUTS)
    finale_rounds, champion = run_finale(finalists, rng)
    
    logger.debug(f"Season complete: {len(episodes)} episodes, champion {champion}")
    
    return SeasonResult(
        meta=SeasonMeta(
            format=SEASON_FORMAT,
            generated_at=datetime.now(timezone.utc).isoformat(),
            bracket_count=bracket_count,
            bracket_size=bracket_size,
        ),
        brackets=bracket_results,
        episodes=episodes,
        top_pool=top_pool,
        semifinal_eliminations=eliminated,
        finalists=finalists,
        finale_rounds=finale_rounds,
        champion=champion,
    )
