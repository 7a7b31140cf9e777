"""
Logging for the error handler web boundary.

Usage:
    from error_handler.logger import get_logger

    logger = get_logger("orders-api")
    register_error_handlers(app, logger=logger)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name ("orders-api" -> "ORDERS_API")
"""

import logging
import os
from typing import Optional

from .default_logger import DefaultLogger
from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    return name.upper().replace("-", "_")


def create_logger(
    name: str = "error-handler",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a StructuredLogger, reading unset options from the environment.

    Args:
        name: Logger name, also used to derive the environment prefix
        level: Logging level (default: {PREFIX}_LOG_LEVEL or INFO)
        log_file: Optional file path (default: {PREFIX}_LOG_FILE)
        json_format: Emit JSON lines (default: {PREFIX}_LOG_JSON == "true")

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_name = os.environ.get(f"{env_prefix}_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_name, logging.INFO)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = "error-handler") -> Logger:
    """Get a logger configured entirely from environment variables."""
    return create_logger(name=name)


__all__ = [
    "Logger",
    "DefaultLogger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "create_logger",
    "get_logger",
]
