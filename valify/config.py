"""Library configuration via environment variables."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class Settings(BaseSettings):
    """Settings loaded from VALIFY_* environment variables.

    Only logging is configurable; constraint semantics never depend on the environment.
    """

    # Logging
    LOG_LEVEL: str = "warning"
    DEBUG: bool = False

    model_config = {"env_prefix": "VALIFY_", "env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
