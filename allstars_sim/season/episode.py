"""
Episode Simulator - scores one episode for a bracket's full group.

Point assignment per episode:
- two distinct maxi-challenge winners get +2 each
- one of them wins the lip-sync for +1
- every other competitor gives +1 to anyone in the group but themselves
"""
from types import MappingProxyType
from typing import Dict, List, Sequence, Tuple
import logging

from allstars_sim.core.protocols import RandomSource
from allstars_sim.core.rng import pick_index
from .records import EpisodeDetail, EpisodeOutcome, PeerAward

logger = logging.getLogger(__name__)

CHALLENGE_WIN_POINTS = 2
LIP_SYNC_POINTS = 1
PEER_AWARD_POINTS = 1


def episode_point_total(group_size: int) -> int:
    """Points handed out in one episode: 9 for the default group of six."""
    return (
        2 * CHALLENGE_WIN_POINTS
        + LIP_SYNC_POINTS
        + (group_size - 2) * PEER_AWARD_POINTS
    )


def choose_two_winners(competitors: Sequence[str], rng: RandomSource) -> Tuple[str, str]:
    """Pick two distinct competitors, redrawing the second until it differs."""
    first = pick_index(len(competitors), rng)
    second = pick_index(len(competitors), rng)
    while second == first:
        second = pick_index(len(competitors), rng)
    return competitors[first], competitors[second]


def simulate_episode(competitors: Sequence[str], rng: RandomSource) -> EpisodeOutcome:
    """
    Run one scored episode.
    
    Args:
        competitors: The bracket's group, in bracket order. Callers pass
            the full group (six by default).
        rng: Source of uniform draws
        
    Returns:
        EpisodeOutcome with a delta for every competitor (zeros included)
    """
    points: Dict[str, int] = {name: 0 for name in competitors}
    
    winners = choose_two_winners(competitors, rng)
    for winner in winners:
        points[winner] += CHALLENGE_WIN_POINTS
    
    lip_sync_winner = winners[pick_index(len(winners), rng)]
    points[lip_sync_winner] += LIP_SYNC_POINTS
    
    # Recipients are drawn from all other competitors, winners included
    awards: List[PeerAward] = []
    for giver in competitors:
        if giver in winners:
            continue
        eligible = [name for name in competitors if name != giver]
        recipient = eligible[pick_index(len(eligible), rng)]
        points[recipient] += PEER_AWARD_POINTS
        awards.append(PeerAward(giver=giver, recipient=recipient))
    
    logger.debug(
        f"Episode winners {winners[0]}/{winners[1]}, lip-sync {lip_sync_winner}, "
        f"{len(awards)} peer awards"
    )
    
    return EpisodeOutcome(
        points=MappingProxyType(points),
        detail=EpisodeDetail(
            winners=winners,
            lip_sync_winner=lip_sync_winner,
            peer_awards=tuple(awards),
        ),
    )
