"""
Custom exceptions for the All Stars season simulator.
"""


class AllStarsError(Exception):
    """Base exception for all custom errors."""
    pass


# Configuration Errors
class ConfigurationError(AllStarsError):
    """Raised when the season layout options are invalid."""
    pass


class ConfigurationMismatch(ConfigurationError):
    """Raised when the competitor count does not fill the bracket layout."""
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Season expects exactly {expected} competitors "
            f"(got {actual})"
        )


# Randomness Errors
class RandomSourceError(AllStarsError):
    """Raised when a random source violates the [0, 1) contract."""
    pass


class RandomSourceExhausted(RandomSourceError):
    """Raised when a replayed draw sequence runs out of values."""
    def __init__(self, consumed: int):
        self.consumed = consumed
        super().__init__(f"Replay sequence exhausted after {consumed} draws")


# Input Errors
class RosterError(AllStarsError):
    """Raised when a roster file cannot be read into competitor names."""
    pass
