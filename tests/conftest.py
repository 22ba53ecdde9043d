# tests/conftest.py
import pytest

from allstars_sim.core import ReplayRandomSource

GOLDEN_RATIO_FRACTION = 0.6180339887498949

# Configure pytest
pytest_plugins = []

# Markers for test categorization
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "e2e: marks tests as end-to-end tests")


@pytest.fixture
def queen_names():
    """Eighteen distinct queens, the default 3x6 cast."""
    return [
        "Alyssa", "Bianca", "Chad", "Detox", "Eureka", "Farrah",
        "Gia", "Heidi", "India", "Jujubee", "Katya", "Latrice",
        "Manila", "Naomi", "Ongina", "Pearl", "Raja", "Shea",
    ]


@pytest.fixture
def six_queens():
    """A single bracket's worth of competitors."""
    return ["A", "B", "C", "D", "E", "F"]


@pytest.fixture
def golden_draws():
    """
    Fixed draw sequence: fractional parts of i * 0.618...
    
    Consecutive values are at least 0.38 apart, so a redraw never lands
    on the same index of a group of six.
    """
    return [(i * GOLDEN_RATIO_FRACTION) % 1.0 for i in range(1, 500)]


@pytest.fixture
def replay(golden_draws):
    """Factory for fresh replay sources over the golden sequence."""
    def _make():
        return ReplayRandomSource(golden_draws)
    return _make


@pytest.fixture
def episode_draws():
    """
    Draws for one scripted episode over A..F:
    winners A then B (one rejected redraw), lip-sync B,
    awards C->A, D->F, E->C, F->B.
    """
    return [0.0, 0.0, 0.2, 0.6, 0.0, 0.99, 0.5, 0.3]
