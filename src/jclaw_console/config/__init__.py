"""Configuration management for the operator console."""

from jclaw_console.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
