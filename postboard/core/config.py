import logging
from datetime import datetime
from typing import List, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from postboard.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Process configuration read from the environment (and an optional .env file)."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    PORT: int = Field(default=3000, ge=1, le=65535)
    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    HOST: str = "0.0.0.0"

    DATABASE_URL: str = "sqlite+aiosqlite:///database.db"
    DATABASE_ECHO: bool = False

    PROJECT_NAME: str = "Postboard"
    PROJECT_INFO: str = "Create, list and fetch blog posts"
    PROJECT_VERSION: str = "1.0.0"
    TIME_ZONE: str = "UTC"

    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    LOG_FORMAT: Literal["text", "json"] = "text"
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("TIME_ZONE")
    @classmethod
    def check_time_zone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def lower_log_format(cls, v):
        return v.lower() if isinstance(v, str) else v

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def get_now(self) -> datetime:
        """Get the current time in the configured time zone."""
        tz = ZoneInfo(self.TIME_ZONE)
        return datetime.now(tz)


def load_settings(**overrides) -> Settings:
    """Build the settings value, failing fast on malformed input."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        logger.error("Invalid environment variables: %s", e)
        raise ConfigurationError("Invalid environment variables") from e
