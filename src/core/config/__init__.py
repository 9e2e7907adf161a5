"""Configuration loaded once at startup."""

from src.core.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
