"""
Monte Carlo runner - champion odds over many simulated seasons.

One seeded source drives every season in sequence, so a batch is
reproducible from (roster, n_seasons, seed).
"""
from collections import Counter
from typing import Any, Optional, Sequence
import time

import polars as pl

from allstars_sim.core.rng import NumpyRandomSource
from allstars_sim.exceptions import ConfigurationError
from allstars_sim.utils.observability import Logger, MetricsRegistry
from .simulator import (
    DEFAULT_BRACKET_COUNT,
    DEFAULT_BRACKET_SIZE,
    competitor_name,
    simulate_season,
    validate_layout,
)

logger = Logger(__name__)


def simulate_champion_odds(
    competitors: Sequence[Any],
    n_seasons: int = 1000,
    seed: Optional[int] = 42,
    bracket_count: int = DEFAULT_BRACKET_COUNT,
    bracket_size: int = DEFAULT_BRACKET_SIZE,
    metrics: Optional[MetricsRegistry] = None,
) -> pl.DataFrame:
    """
    Simulate ``n_seasons`` seasons and count how far each competitor gets.
    
    Returns:
        DataFrame with columns name, championships, finals, top_pool,
        champion_rate, finalist_rate; sorted by championships desc, name asc.
    """
    names = [competitor_name(c) for c in competitors]
    validate_layout(len(names), bracket_count, bracket_size)
    if n_seasons < 1:
        raise ConfigurationError(f"n_seasons must be positive (got {n_seasons})")
    
    rng = NumpyRandomSource(seed)
    championships: Counter = Counter()
    finals: Counter = Counter()
    top_pool: Counter = Counter()
    
    start = time.perf_counter()
    for _ in range(n_seasons):
        season_start = time.perf_counter()
        result = simulate_season(names, rng, bracket_count, bracket_size)
        championships[result.champion] += 1
        finals.update(result.finalists)
        top_pool.update(result.top_pool)
        
        if metrics is not None:
            metrics.season_duration.observe(time.perf_counter() - season_start)
            metrics.seasons_simulated.labels(mode="monte_carlo").inc()
    
    logger.log_event(
        "monte_carlo_complete",
        n_seasons=n_seasons,
        seed=seed,
        elapsed_s=round(time.perf_counter() - start, 3),
    )
    
    return (
        pl.DataFrame({
            "name": names,
            "championships": [championships[name] for name in names],
            "finals": [finals[name] for name in names],
            "top_pool": [top_pool[name] for name in names],
        })
        .with_columns(
            (pl.col("championships") / n_seasons).alias("champion_rate"),
            (pl.col("finals") / n_seasons).alias("finalist_rate"),
        )
        .sort(["championships", "name"], descending=[True, False])
    )
