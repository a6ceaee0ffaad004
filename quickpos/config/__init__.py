"""Configuration module."""

from quickpos.config.logging import bind_terminal, configure_logging, get_logger
from quickpos.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "bind_terminal",
    "get_logger",
]
