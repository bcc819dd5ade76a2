"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    log_level: str = Field(
        default="info",
        description="Log level for the application and uvicorn: critical, error, warning, info or debug",
    )

    # Static files
    static_dir: str = Field(
        default="public",
        description="Directory holding index.html and other static assets",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard level names."""
        if v.lower() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.lower()

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is a usable TCP port number."""
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @property
    def logging_level(self) -> int:
        """Numeric level for the standard logging module."""
        return logging.getLevelName(self.log_level.upper())
