"""
Strongly typed configuration using pydantic-settings.

All settings are validated at startup and loaded from:
1. Default values defined here
2. .env file (if present)
3. Environment variables (highest priority)

Environment variable naming:
- SeasonSettings: SEASON_BRACKET_COUNT, SEASON_BRACKET_SIZE, SEASON_SEED, etc.
- SimulationSettings: SIMULATION_N_SEASONS, SIMULATION_SEED
- ObservabilitySettings: ENVIRONMENT, LOG_LEVEL (no prefix)
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class SeasonSettings(BaseSettings):
    """Bracket layout for a single season."""
    
    model_config = SettingsConfigDict(env_prefix="SEASON_")
    
    # Layout
    bracket_count: int = Field(default=3, ge=1, description="Number of brackets")
    bracket_size: int = Field(default=6, ge=3, description="Competitors per bracket")
    
    # Optional seed for the default numpy source
    seed: Optional[int] = Field(default=None, ge=0)
    
    @property
    def expected_competitors(self) -> int:
        """Competitors needed to fill every bracket."""
        return self.bracket_count * self.bracket_size


class SimulationSettings(BaseSettings):
    """Monte Carlo batch settings."""
    
    model_config = SettingsConfigDict(env_prefix="SIMULATION_")
    
    n_seasons: int = Field(default=1000, ge=1, le=1_000_000, description="Seasons per batch")
    seed: int = Field(default=42, ge=0)


class ObservabilitySettings(BaseSettings):
    """Logging and metrics settings."""
    
    model_config = SettingsConfigDict(env_prefix="")  # Direct: ENVIRONMENT, LOG_LEVEL
    
    environment: str = Field(default="development", pattern="^(development|staging|production)$")
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_format: str = Field(default="console", pattern="^(console|json)$")
    enable_metrics: bool = Field(default=True)


class Settings(BaseSettings):
    """
    Root settings aggregating all subsections.
    
    Usage:
        from allstars_sim.config import settings
        
        settings.season.bracket_count
        settings.simulation.n_seasons
        settings.observability.log_level
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    season: SeasonSettings = Field(default_factory=SeasonSettings)
    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
