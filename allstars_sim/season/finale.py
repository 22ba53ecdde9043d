"""
Semifinal Elimination and Finale Tournament.

Both stages work on an immutable source tuple plus a working list of
indices into it, materializing a fresh tuple at each stage boundary.
"""
from typing import List, Sequence, Tuple
import logging

from allstars_sim.core.protocols import RandomSource
from allstars_sim.core.rng import pick_index
from .records import FinalePairing

logger = logging.getLogger(__name__)

SEMIFINAL_CUTS = 2
LIP_SYNC_EDGE = 0.5


def eliminate_semifinalists(
    pool: Sequence[str],
    rng: RandomSource,
    cuts: int = SEMIFINAL_CUTS,
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """
    Cut ``cuts`` competitors from the pool at random.
    
    Returns:
        (eliminated in elimination order, finalists in residual order)
    """
    source = tuple(pool)
    remaining: List[int] = list(range(len(source)))
    eliminated: List[int] = []
    
    for _ in range(cuts):
        eliminated.append(remaining.pop(pick_index(len(remaining), rng)))
    
    eliminated_names = tuple(source[i] for i in eliminated)
    logger.debug(f"Semifinal eliminations: {', '.join(eliminated_names)}")
    return eliminated_names, tuple(source[i] for i in remaining)


def shuffle_order(competitors: Sequence[str], rng: RandomSource) -> Tuple[str, ...]:
    """Fisher-Yates permutation, last position down to 1."""
    source = tuple(competitors)
    order = list(range(len(source)))
    for i in range(len(order) - 1, 0, -1):
        j = pick_index(i + 1, rng)
        order[i], order[j] = order[j], order[i]
    return tuple(source[i] for i in order)


def play_round(entrants: Sequence[str], rng: RandomSource) -> Tuple[FinalePairing, ...]:
    """
    Pair consecutive entrants; an unpaired last entrant gets a bye.
    
    Each contest takes one draw: below 0.5 the first of the pair wins.
    """
    pairings: List[FinalePairing] = []
    for i in range(0, len(entrants), 2):
        if i + 1 < len(entrants):
            first, second = entrants[i], entrants[i + 1]
            winner = first if rng() < LIP_SYNC_EDGE else second
            pairings.append(FinalePairing(competitor=first, opponent=second, winner=winner))
        else:
            pairings.append(FinalePairing(competitor=entrants[i], opponent=None, winner=entrants[i]))
    return tuple(pairings)


def run_finale(
    finalists: Sequence[str],
    rng: RandomSource,
) -> Tuple[Tuple[Tuple[FinalePairing, ...], ...], str]:
    """
    Single-elimination lip-sync smackdown.
    
    Args:
        finalists: Non-empty finalist list
        rng: Source of uniform draws
        
    Returns:
        (rounds of pairings, champion)
    """
    entrants = shuffle_order(finalists, rng)
    rounds: List[Tuple[FinalePairing, ...]] = []
    
    while len(entrants) > 1:
        pairings = play_round(entrants, rng)
        rounds.append(pairings)
        entrants = tuple(pairing.winner for pairing in pairings)
        logger.debug(f"Finale round {len(rounds)}: {len(pairings)} pairings, {len(entrants)} advance")
    
    return tuple(rounds), entrants[0]
