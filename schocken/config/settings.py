"""
Schocken - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Variables are prefixed with SCHOCKEN_ (e.g. SCHOCKEN_MAX_ROLLS=3); list
values such as SCHOCKEN_PLAYER_NAMES are given as JSON.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Round
    player_names: list[str] = Field(
        default_factory=lambda: ["Player 1", "Player 2", "Player 3", "Player 4"]
    )
    max_rolls: int = 3
    rng_seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "SCHOCKEN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
