"""Dataclass settings for the error handler.

All values come from environment variables sharing one prefix
(default ``ERROR_HANDLER``), optionally seeded from a ``.env`` file:

    ERROR_HANDLER_ENABLED=true
    ERROR_HANDLER_TIMESTAMP_FORMAT=%d-%m-%Y %I:%M:%S
    ERROR_HANDLER_LOG_INTERNAL_MESSAGES=true
    ERROR_HANDLER_LOG_LEVEL=INFO
    ERROR_HANDLER_LOG_JSON=false
    ERROR_HANDLER_LOG_FILE=/var/log/errors.log
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from error_handler.config.env_loader import EnvLoader
from error_handler.exceptions import ConfigurationError
from error_handler.model import DEFAULT_TIMESTAMP_FORMAT

DEFAULT_PREFIX = "ERROR_HANDLER"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_bool(name: str, raw: Optional[str], default: bool) -> bool:
    """Parse a boolean environment value.

    Args:
        name: Variable name, used in the error message
        raw: Raw value, or None when unset
        default: Value returned when unset or blank

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean", details={"value": raw})


@dataclass
class HandlerSettings:
    """Behaviour of the web boundary.

    Attributes:
        enabled: Whether ``register_error_handlers`` installs anything
        timestamp_format: ``strftime`` format of the serialized timestamp
        log_internal_messages: Include the raw exception message in log entries
    """

    enabled: bool = True
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    log_internal_messages: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str], prefix: str = DEFAULT_PREFIX) -> "HandlerSettings":
        """Read handler settings from an environment mapping.

        Args:
            env: Merged environment values
            prefix: Environment variable prefix

        Returns:
            HandlerSettings with unset values left at their defaults

        Raises:
            ConfigurationError: If a boolean value cannot be parsed
        """
        return cls(
            enabled=parse_bool(f"{prefix}_ENABLED", env.get(f"{prefix}_ENABLED"), True),
            timestamp_format=env.get(f"{prefix}_TIMESTAMP_FORMAT") or DEFAULT_TIMESTAMP_FORMAT,
            log_internal_messages=parse_bool(
                f"{prefix}_LOG_INTERNAL_MESSAGES",
                env.get(f"{prefix}_LOG_INTERNAL_MESSAGES"),
                True,
            ),
        )


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Emit JSON lines instead of text
        log_file: Optional file path for log output
    """

    level: str = "INFO"
    json_format: bool = False
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalise the level name and reject unknown levels."""
        self.level = self.level.upper()
        if self.level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level {self.level!r}",
                details={"allowed": list(_LOG_LEVELS)},
            )

    @property
    def level_number(self) -> int:
        """Numeric ``logging`` level matching ``level``."""
        return getattr(logging, self.level)

    @classmethod
    def from_env(cls, env: Mapping[str, str], prefix: str = DEFAULT_PREFIX) -> "LogSettings":
        """Read logging settings from an environment mapping.

        Args:
            env: Merged environment values
            prefix: Environment variable prefix

        Raises:
            ConfigurationError: If the level or the JSON flag is invalid
        """
        return cls(
            level=env.get(f"{prefix}_LOG_LEVEL", "INFO"),
            json_format=parse_bool(f"{prefix}_LOG_JSON", env.get(f"{prefix}_LOG_JSON"), False),
            log_file=env.get(f"{prefix}_LOG_FILE") or None,
        )


@dataclass
class Settings:
    """Complete error handler settings

    Attributes:
        handler: Web boundary behaviour
        log: Logging settings
        prefix: Environment variable prefix used
    """

    handler: HandlerSettings = field(default_factory=HandlerSettings)
    log: LogSettings = field(default_factory=LogSettings)
    prefix: str = DEFAULT_PREFIX

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        env_file: Optional[Union[Path, str]] = None,
        overrides: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """Load settings from a .env file, the OS environment and overrides.

        Args:
            prefix: Environment variable prefix
            env_file: Optional .env path (default: ./.env when present)
            overrides: Highest-precedence values, typically from tests or CLI flags

        Raises:
            ConfigurationError: If a value cannot be parsed
        """
        env = EnvLoader(env_file).load(overrides)
        return cls(
            handler=HandlerSettings.from_env(env, prefix),
            log=LogSettings.from_env(env, prefix),
            prefix=prefix,
        )


# Global settings storage per prefix
_global_settings: Dict[str, Settings] = {}


def get_settings(prefix: str = DEFAULT_PREFIX, reload: bool = False) -> Settings:
    """Get or create the cached settings for a prefix.

    Args:
        prefix: Environment variable prefix
        reload: Re-read the environment even when cached
    """
    if prefix not in _global_settings or reload:
        _global_settings[prefix] = Settings.from_env(prefix=prefix)
    return _global_settings[prefix]


def reset_settings(prefix: Optional[str] = None) -> None:
    """Drop cached settings (primarily for testing)

    Args:
        prefix: Specific prefix to reset, or None to reset all
    """
    if prefix:
        _global_settings.pop(prefix, None)
    else:
        _global_settings.clear()
