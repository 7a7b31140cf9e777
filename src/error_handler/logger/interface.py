"""Logger interface.

The error handler never logs from its classification core. Logging happens
at the web boundary through an instance of this interface, which callers
inject so the sink stays under application control.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract logging contract.

    Keyword arguments carry structured context (status, code, exception
    type...) that implementations render next to the message.

    Example:
        class ListLogger(Logger):
            def error(self, message: str, **kwargs: Any) -> None:
                self.entries.append(("ERROR", message, kwargs))
            # ... implement the other levels
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Args:
            message: The message to log
            **kwargs: Structured context rendered with the message
        """
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an informational message.

        Args:
            message: The message to log
            **kwargs: Structured context rendered with the message
        """
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning, used for client failures (4xx).

        Args:
            message: The message to log
            **kwargs: Structured context rendered with the message
        """
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error, used for server failures (5xx).

        Args:
            message: The message to log
            **kwargs: Structured context rendered with the message
        """
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message.

        Args:
            message: The message to log
            **kwargs: Structured context rendered with the message
        """
        pass

    @abstractmethod
    def get_session_id(self) -> str:
        """Return the identifier shared by all entries of this logger instance."""
        pass
