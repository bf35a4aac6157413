"""Application Configuration.

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import Logging


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "TutorBook"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development")

    # Storage
    TUTORBOOK_DATA_FILE: Path = Field(
        default=Path("data") / "tutorbook.json",
        description="JSON file the student list is loaded from and saved to."
    )
    JSON_INDENT: int = Field(
        default=2,
        description="Indentation used when writing the data file."
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Validate LOG_LEVEL is a standard logging level name."""
        level = str(v).upper()
        if level not in Logging.VALID_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(Logging.VALID_LEVELS)}, got '{v}'"
            )
        return level

    @field_validator('JSON_INDENT', mode='after')
    @classmethod
    def validate_json_indent(cls, v):
        """Validate JSON_INDENT is not negative."""
        if v < 0:
            raise ValueError("JSON_INDENT cannot be negative")
        return v


settings = Settings()
