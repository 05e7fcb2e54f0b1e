"""HR admin application settings loaded from environment variables."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application-wide settings loaded from environment variables / .env file.

    Statutory rates are NOT configured here; they live in the versioned
    rule table. These are operational defaults only.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Nitaqat defaults ---
    DEFAULT_SECTOR: str = Field(
        default="trading",
        description="Sector key used for Nitaqat classification when none is given.",
    )
    DEFAULT_LANGUAGE: str = Field(
        default="en",
        description="Band label language ('en' or 'ar').",
    )

    # --- Compliance windows ---
    EXPIRY_ALERT_WINDOW_DAYS: int = Field(
        default=90,
        ge=0,
        description="Iqama / contract expiries within this many days raise an alert.",
    )
    DOCUMENT_EXPIRY_WARNING_DAYS: int = Field(
        default=30,
        ge=0,
        description="Documents expiring within this many days are 'Expiring Soon'.",
    )

    # --- Logging ---
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Application log level.",
    )

    # --- Environment ---
    ENVIRONMENT: Environment = Field(
        default=Environment.DEV,
        description="Deployment environment (dev/staging/prod).",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == Environment.PROD


def get_settings() -> Settings:
    """Factory function for dependency injection via FastAPI Depends."""
    return Settings()
