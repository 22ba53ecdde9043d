"""
Bracket Formation and Bracket Stage Runner.

Competitors are dealt round-robin into brackets so a pre-ranked list
spreads evenly. Each bracket then plays its episodes and is ranked by
cumulative points.
"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple
import logging

from allstars_sim.core.protocols import RandomSource
from .episode import simulate_episode
from .records import BracketResult, EpisodeRecord, Standing

logger = logging.getLogger(__name__)

EPISODES_PER_BRACKET = 3


def form_brackets(competitors: Sequence[str], bracket_count: int) -> Tuple[Tuple[str, ...], ...]:
    """
    Deal competitors into ``bracket_count`` groups.
    
    Competitor ``i`` goes to bracket ``i % bracket_count``; the count
    check happens before this is called.
    """
    groups: List[List[str]] = [[] for _ in range(bracket_count)]
    for position, name in enumerate(competitors):
        groups[position % bracket_count].append(name)
    return tuple(tuple(group) for group in groups)


def rank_standings(points: Mapping[str, int]) -> Tuple[Standing, ...]:
    """Order by points descending, then name ascending. No ties survive."""
    return tuple(
        Standing(name=name, points=total)
        for name, total in sorted(points.items(), key=lambda item: (-item[1], item[0]))
    )


def run_bracket(
    bracket_index: int,
    competitors: Sequence[str],
    rng: RandomSource,
    episodes: int = EPISODES_PER_BRACKET,
) -> BracketResult:
    """
    Play every episode of one bracket and rank the group.
    
    Args:
        bracket_index: 1-based bracket number
        competitors: The bracket's group
        rng: Source of uniform draws for this bracket
        episodes: Episodes to play
        
    Returns:
        BracketResult with cumulative points, standings and episode records
    """
    group = tuple(competitors)
    totals: Dict[str, int] = {name: 0 for name in group}
    records: List[EpisodeRecord] = []
    
    for episode_in_bracket in range(1, episodes + 1):
        outcome = simulate_episode(group, rng)
        for name in group:
            totals[name] += outcome.points[name]
        
        records.append(EpisodeRecord(
            bracket=bracket_index,
            episode_in_bracket=episode_in_bracket,
            episode_number=(bracket_index - 1) * episodes + episode_in_bracket,
            competitors=group,
            points=outcome.points,
            detail=outcome.detail,
        ))
    
    standings = rank_standings(totals)
    logger.debug(f"Bracket {bracket_index} leader: {standings[0].name} ({standings[0].points} pts)")
    
    return BracketResult(
        bracket=bracket_index,
        competitors=group,
        points=MappingProxyType(totals),
        standings=standings,
        episodes=tuple(records),
    )
