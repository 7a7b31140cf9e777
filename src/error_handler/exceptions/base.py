"""Exception classes for the error handler library.

Every exception carries structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for diagnostics

Two families live here. ``EncodingError`` and ``ConfigurationError`` are
raised by the library itself. The remaining classes are raised by
application code so the web boundary can recognise them and turn them
into the matching failure category.
"""

from http import HTTPStatus
from typing import Any, Dict, Mapping, Optional, Union


class ErrorHandlerError(Exception):
    """Base exception for all error handler errors.

    Attributes:
        code: Machine-readable error code (e.g., "ENCODING_ERROR")
        message: Human-readable error message
        details: Optional additional context
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for diagnostic logging.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class EncodingError(ErrorHandlerError):
    """Raised when a correlation code input cannot be turned into bytes."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="ENCODING_ERROR", message=message, details=details)


class ConfigurationError(ErrorHandlerError):
    """Raised when a settings value cannot be parsed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


class EntityNotFoundError(ErrorHandlerError):
    """A requested entity does not exist.

    The detail is returned to the caller verbatim, so it must come from
    trusted application code and not from raw user input.
    """

    def __init__(self, detail: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="ENTITY_NOT_FOUND", message=detail or "Entity not found", details=details)
        self.detail = detail


class ResponseStatusError(ErrorHandlerError):
    """Fail the request with an explicit HTTP status and optional reason."""

    def __init__(
        self,
        status: Union[HTTPStatus, int],
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status = HTTPStatus(status)
        self.reason = reason
        super().__init__(
            code="RESPONSE_STATUS",
            message=reason or self.status.phrase,
            details=details,
        )


class BadRequestError(ErrorHandlerError):
    """Field-to-message validation failures collected by application code.

    Args:
        errors: Mapping of field name to failure message, in report order
        object_name: Name of the validated object (default: "request")
    """

    def __init__(self, errors: Mapping[str, str], object_name: str = "request"):
        self.errors = dict(errors)
        self.object_name = object_name
        super().__init__(
            code="BAD_REQUEST",
            message="Bad request",
            details={"fields": list(self.errors)},
        )


class DataIntegrityError(ErrorHandlerError):
    """A write was rejected by the data store.

    ``constraint`` names the violated constraint when the root cause is a
    constraint violation; it stays ``None`` for other integrity failures.
    """

    def __init__(self, message: str = "Data integrity violation", constraint: Optional[str] = None):
        self.constraint = constraint
        details = {"constraint": constraint} if constraint else None
        super().__init__(code="DATA_INTEGRITY", message=message, details=details)


class ResponseSerializationError(ErrorHandlerError):
    """A response body could not be written."""

    def __init__(self, message: str = "Response could not be serialized"):
        super().__init__(code="RESPONSE_SERIALIZATION", message=message)
