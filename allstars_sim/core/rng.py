"""
Random sources for season simulation.

Every stage draws through ``pick_index`` so the whole season is a pure
function of (competitor list, ordered sequence of draws).
"""
import math
from typing import Iterable, List, Optional, Sequence

import numpy as np

from allstars_sim.core.protocols import RandomSource
from allstars_sim.exceptions import RandomSourceError, RandomSourceExhausted


def pick_index(size: int, rng: RandomSource) -> int:
    """Draw a uniform index in [0, size) with a single call to ``rng``."""
    return math.floor(rng() * size)


class NumpyRandomSource:
    """
    Default platform source backed by ``numpy.random.default_rng``.
    
    Usage:
        rng = NumpyRandomSource(seed=42)
        rng()  # 0.773956...
    """
    
    def __init__(self, seed: Optional[int] = None, generator: Optional[np.random.Generator] = None):
        self.seed = seed
        self._generator = generator if generator is not None else np.random.default_rng(seed)
    
    def __call__(self) -> float:
        return float(self._generator.random())
    
    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed})"


class ReplayRandomSource:
    """
    Replays a fixed sequence of draws in order.
    
    Two seasons fed the same replay sequence and competitor list produce
    identical results.
    """
    
    def __init__(self, values: Iterable[float]):
        self.values: List[float] = [float(v) for v in values]
        for position, value in enumerate(self.values):
            if not 0.0 <= value < 1.0:
                raise RandomSourceError(
                    f"Replay value {value!r} at position {position} is outside [0, 1)"
                )
        self._cursor = 0
    
    @property
    def draws_consumed(self) -> int:
        return self._cursor
    
    @property
    def remaining(self) -> int:
        return len(self.values) - self._cursor
    
    def __call__(self) -> float:
        if self._cursor >= len(self.values):
            raise RandomSourceExhausted(self._cursor)
        value = self.values[self._cursor]
        self._cursor += 1
        return value


class RecordingRandomSource:
    """Forwards to another source and keeps every value it hands out."""
    
    def __init__(self, inner: RandomSource):
        self.inner = inner
        self.values: List[float] = []
    
    def __call__(self) -> float:
        value = self.inner()
        self.values.append(value)
        return value
    
    def replay(self) -> ReplayRandomSource:
        """Replay source over everything recorded so far."""
        return ReplayRandomSource(self.values)


def spawn_random_sources(seed: Optional[int], count: int) -> Sequence[NumpyRandomSource]:
    """
    Independent streams derived from one seed.
    
    Brackets run concurrently must each own a stream; interleaving draws
    from one shared source is not reproducible.
    """
    children = np.random.SeedSequence(seed).spawn(count)
    return [
        NumpyRandomSource(seed=seed, generator=np.random.default_rng(child))
        for child in children
    ]
