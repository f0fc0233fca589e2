"""Configuration management for pacecalc."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.enums import PaceUnit

logger = logging.getLogger(__name__)


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    # Search up for git root and use .env there
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


# Find env file once at module load
_env_file = find_env_file()


class Settings(BaseSettings):
    """
    Calculator settings loaded from environment variables.

    Every field can be set as PACE_<FIELD_NAME> in the environment or in a
    .env file.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file,
        env_file_encoding="utf-8",
        env_prefix="PACE_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    default_unit: PaceUnit = Field(
        default=PaceUnit.KMH,
        description="Unit assumed by the CLI when --unit is not given",
    )
    normalize_seconds: bool = Field(
        default=False,
        description="Carry seconds that round to 60 into the minutes (4:60 -> 5:00)",
    )
    strict_seconds: bool = Field(
        default=False,
        description="Treat seconds outside 0-59 in the active slot as invalid input",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case (e.g., "debug")."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get calculator settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings (env file: {_env_file})")
    return _settings
