"""
Ludo Rules - Application Settings

Loads configuration from environment variables (prefix LUDO_) or a .env
file using Pydantic Settings.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ludo_rules.engine.validators import validate_player_count, validate_seat_indices

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Match
    num_players: int = 4
    human_seats: list[int] = Field(default_factory=lambda: [0])
    dice_seed: int | None = None

    # Headless play
    max_rolls: int = 5000

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LUDO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("num_players")
    @classmethod
    def _check_num_players(cls, value: int) -> int:
        return validate_player_count(value)

    @field_validator("human_seats")
    @classmethod
    def _check_human_seats(cls, value: list[int]) -> list[int]:
        return sorted(validate_seat_indices(value))

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'.")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
