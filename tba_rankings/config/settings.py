import logging
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Conversion Settings
    default_year: Optional[int] = Field(
        None, description="Season used by the CLI when --year is not given."
    )
    output_indent: int = Field(
        2, ge=0, description="Indent used when writing the rankings JSON."
    )

    # Logging Configuration
    log_level: str = Field(
        DEFAULT_LOG_LEVEL,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if level not in VALID_LOG_LEVELS:
            logging.warning(
                f"Invalid LOG_LEVEL '{v}', falling back to {DEFAULT_LOG_LEVEL}."
            )
            return DEFAULT_LOG_LEVEL
        return level


def load_settings() -> AppSettings:
    """Builds settings from the environment, exiting if they don't validate."""
    try:
        return AppSettings()
    except ValidationError as e:
        logging.error(f"Invalid application settings:\n{e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
