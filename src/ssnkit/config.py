"""
ssnkit configuration management using pydantic-settings.

Values are read from SSNKIT_* environment variables or a local .env file.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SSNKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Generation defaults
    min_age_years: int = Field(
        default=0, ge=0, description="Youngest age of generated numbers, in years"
    )
    max_age_years: int = Field(
        default=100, ge=0, description="Oldest age of generated numbers, in years"
    )
    default_pattern: str = Field(
        default="???c",
        description="Pattern for the last four digits of generated numbers",
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the shared random source (unset: OS entropy)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_age_window(self) -> "Settings":
        """Ensure the generation age window is not inverted."""
        if self.min_age_years > self.max_age_years:
            raise ValueError("MIN_AGE_YEARS must not exceed MAX_AGE_YEARS")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()


# Global settings instance
settings = get_settings()
