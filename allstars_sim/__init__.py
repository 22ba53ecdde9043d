"""
All Stars season simulator.

Usage:
    from allstars_sim import simulate_season, NumpyRandomSource
    
    result = simulate_season(cast, rng=NumpyRandomSource(seed=7))
    result.champion
"""
from .core import NumpyRandomSource, RandomSource, ReplayRandomSource, RecordingRandomSource
from .exceptions import AllStarsError, ConfigurationError, ConfigurationMismatch
from .season import SeasonResult, simulate_champion_odds, simulate_season

__all__ = [
    "simulate_season",
    "simulate_champion_odds",
    "SeasonResult",
    "RandomSource",
    "NumpyRandomSource",
    "ReplayRandomSource",
    "RecordingRandomSource",
    "AllStarsError",
    "ConfigurationError",
    "ConfigurationMismatch",
]

__version__ = "0.1.0"
