"""
Protocol definitions for the collaborators the season engine consumes.

Using Protocol allows duck typing while still providing type checking support:
``random.random`` or a bound ``numpy.random.Generator.random`` satisfy
``RandomSource`` without any wrapping.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """
    Source of uniform draws for every stage of a season.
    
    Implementations:
    - NumpyRandomSource (default): numpy Generator, optionally seeded
    - ReplayRandomSource: fixed pre-recorded sequence for reproducible runs
    - RecordingRandomSource: wraps another source and keeps every draw
    """
    
    def __call__(self) -> float:
        """
        Draw one value.
        
        Returns:
            Float v with 0 <= v < 1. Each call advances the source.
        """
        ...
