"""Configuration adapters."""

from whoami_service.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
