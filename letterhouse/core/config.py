"""Core configuration settings for the server."""

from functools import lru_cache
from typing import Optional, Union

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server settings loaded from environment variables."""

    # Development settings
    reload: bool = False

    # API settings
    api_host: str = "localhost"
    api_port: int = 8001
    cors_origins: Union[list[str], str] = ["http://localhost:3000"]

    # Database settings
    database_url: str = "sqlite+aiosqlite:///./letterhouse.db"
    db_echo: bool = False

    # Identity provider settings
    jwt_secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_audience: Optional[str] = None

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Layout settings
    compact_viewport_threshold: int = 768
    compact_scale: float = 0.35

    # Countdown settings
    countdown_interval: float = 1.0

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        """Parse a comma-separated origin list.

        Args:
            value: Value to parse

        Returns:
            Parsed value
        """
        if isinstance(value, str):
            origins = [origin.strip() for origin in value.split(",") if origin.strip()]
            if not origins:
                logger.error(f"Failed to parse cors_origins: {value!r}")
                raise ValueError(f"Invalid CORS_ORIGINS format: {value}")
            return origins
        elif value is None:
            return []

        return value

    class Config:
        env_prefix = "LETTERHOUSE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached server settings instance.

    Returns:
        Settings instance configured for server operations
    """
    return Settings()
