"""
Season Mode - All Stars bracket season simulation.

Splits the cast into brackets, scores three episodes per bracket, cuts
the combined top pool in the semifinal and crowns a champion through a
lip-sync smackdown.
"""
from .records import (
    PeerAward,
    EpisodeDetail,
    EpisodeOutcome,
    EpisodeRecord,
    Standing,
    BracketResult,
    FinalePairing,
    SeasonMeta,
    SeasonResult,
)
from .episode import simulate_episode, episode_point_total
from .brackets import form_brackets, rank_standings, run_bracket
from .finale import eliminate_semifinalists, shuffle_order, play_round, run_finale
from .simulator import simulate_season, build_top_pool
from .monte_carlo import simulate_champion_odds

__all__ = [
    "PeerAward",
    "EpisodeDetail",
    "EpisodeOutcome",
    "EpisodeRecord",
    "Standing",
    "BracketResult",
    "FinalePairing",
    "SeasonMeta",
    "SeasonResult",
    "simulate_episode",
    "episode_point_total",
    "form_brackets",
    "rank_standings",
    "run_bracket",
    "eliminate_semifinalists",
    "shuffle_order",
    "play_round",
    "run_finale",
    "simulate_season",
    "build_top_pool",
    "simulate_champion_odds",
]
