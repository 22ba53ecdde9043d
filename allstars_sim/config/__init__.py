"""
Configuration module with strongly typed settings.

Usage:
    from allstars_sim.config import settings
    
    print(settings.season.bracket_count)
    print(settings.simulation.n_seasons)
"""
from .settings import (
    Settings,
    SeasonSettings,
    SimulationSettings,
    ObservabilitySettings,
)

# Singleton instance - validates on import
settings = Settings()

__all__ = [
    "settings",
    "Settings",
    "SeasonSettings",
    "SimulationSettings",
    "ObservabilitySettings",
]
