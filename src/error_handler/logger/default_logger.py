"""Stream logger for development and tests."""

import sys
import uuid
from datetime import datetime, timezone
from typing import Any, TextIO

from .interface import Logger


class DefaultLogger(Logger):
    """Write one formatted line per entry to a text stream.

    Example:
        logger = DefaultLogger(name="orders-api")
        logger.error("Unhandled failure", status=500, exception="KeyError")
        # 2026-10-18T09:12:01+00:00 [ERROR] [orders-api] [session:1b2c3d4e] Unhandled failure (status=500 exception=KeyError)
    """

    def __init__(
        self,
        name: str = "error-handler",
        output: TextIO = sys.stderr,
        include_timestamp: bool = True,
    ):
        """Initialize the stream logger.

        Args:
            name: Logger name, printed on every line
            output: Stream the lines are written to (default: stderr)
            include_timestamp: Whether lines start with a UTC ISO timestamp
        """
        self._name = name
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._include_timestamp = include_timestamp

    def get_session_id(self) -> str:
        """Get the session ID of this logger instance."""
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        """Build one line: timestamp, level, name, short session ID, message, context."""
        parts = []
        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat())
        parts.extend([f"[{level}]", f"[{self._name}]", f"[session:{self._session_id[:8]}]", message])
        if kwargs:
            parts.append("(" + " ".join(f"{k}={v}" for k, v in kwargs.items()) + ")")
        return " ".join(parts)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        print(self._format_message(level, message, **kwargs), file=self._output, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Args:
            message: The message to log
            **kwargs: Context appended as key=value pairs
        """
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message.

        Args:
            message: The message to log
            **kwargs: Context appended as key=value pairs
        """
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message.

        Args:
            message: The message to log
            **kwargs: Context appended as key=value pairs
        """
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message.

        Args:
            message: The message to log
            **kwargs: Context appended as key=value pairs
        """
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message.

        Args:
            message: The message to log
            **kwargs: Context appended as key=value pairs
        """
        self._log("CRITICAL", message, **kwargs)
