"""
Core module - the random-source contract and its implementations.
"""
from .protocols import RandomSource
from .rng import (
    NumpyRandomSource,
    ReplayRandomSource,
    RecordingRandomSource,
    pick_index,
    spawn_random_sources,
)

__all__ = [
    "RandomSource",
    "NumpyRandomSource",
    "ReplayRandomSource",
    "RecordingRandomSource",
    "pick_index",
    "spawn_random_sources",
]
