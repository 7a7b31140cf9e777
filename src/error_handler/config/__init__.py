"""Configuration for the error handler.

Example:
    from error_handler.config import get_settings

    settings = get_settings()
    if settings.handler.enabled:
        ...
"""

from error_handler.config.env_loader import EnvLoader
from error_handler.config.settings import (
    DEFAULT_PREFIX,
    HandlerSettings,
    LogSettings,
    Settings,
    get_settings,
    parse_bool,
    reset_settings,
)

__all__ = [
    "EnvLoader",
    "DEFAULT_PREFIX",
    "HandlerSettings",
    "LogSettings",
    "Settings",
    "get_settings",
    "reset_settings",
    "parse_bool",
]
