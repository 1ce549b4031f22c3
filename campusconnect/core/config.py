"""
campusconnect/core/config.py

Purpose: Application configuration

- Loads environment variables (and an optional .env file)
- Centralizes the catalogs shown during onboarding
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional, Literal

from campusconnect.utils.constants import (
    DEFAULT_UNIVERSITIES,
    DEFAULT_STUDY_HABIT_OPTIONS,
    DEFAULT_INTEREST_OPTIONS,
    DEFAULT_LIFESTYLE_OPTIONS,
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    List values are read as JSON, e.g. UNIVERSITIES='["IBA Karachi", "LUMS Lahore"]'.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    APP_NAME: str = Field(
        default="CampusConnect",
        description="Product name shown in the welcome and closing banners"
    )

    # Catalogs
    UNIVERSITIES: List[str] = Field(
        default_factory=lambda: list(DEFAULT_UNIVERSITIES),
        description="Ordered list of universities offered in the search step"
    )
    STUDY_HABIT_OPTIONS: List[str] = Field(
        default_factory=lambda: list(DEFAULT_STUDY_HABIT_OPTIONS),
        description="Study habit options (empty list skips the question)"
    )
    INTEREST_OPTIONS: List[str] = Field(
        default_factory=lambda: list(DEFAULT_INTEREST_OPTIONS),
        description="Interest options (empty list skips the question)"
    )
    LIFESTYLE_OPTIONS: List[str] = Field(
        default_factory=lambda: list(DEFAULT_LIFESTYLE_OPTIONS),
        description="Lifestyle options (empty list skips the question)"
    )

    # Validation
    STUDENT_ID_MIN_LENGTH: int = Field(
        default=3,
        description="Minimum number of characters in a student ID"
    )
    MAX_RETRY_ATTEMPTS: Optional[int] = Field(
        default=None,
        description="Maximum rejected answers per question (None = unlimited)"
    )

    # Application
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper()

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


# Global settings instance
settings = Settings()


def validate_settings(config: Optional[Settings] = None) -> bool:
    """
    Validates critical settings on application startup.
    Raises ValueError if any setting is missing or invalid.

    Args:
        config: Settings to check (defaults to the global instance)

    Returns:
        True if the configuration is usable
    """
    config = config or settings
    errors = []

    if not config.UNIVERSITIES:
        errors.append("UNIVERSITIES must contain at least one entry")

    if config.STUDENT_ID_MIN_LENGTH < 1:
        errors.append("STUDENT_ID_MIN_LENGTH must be at least 1")

    if config.MAX_RETRY_ATTEMPTS is not None and config.MAX_RETRY_ATTEMPTS < 1:
        errors.append("MAX_RETRY_ATTEMPTS must be positive when set")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
