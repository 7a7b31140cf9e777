"""Serializable API error model.

``ApiError`` is the artifact returned to external callers. It is built once
per failure, rendered with ``to_dict`` and discarded.
"""

from dataclasses import dataclass, field
from datetime import datetime
from http import HTTPStatus
from typing import Any, Dict, Iterable, Optional, Tuple, Union
from uuid import UUID

# dd-MM-yyyy hh:mm:ss (12-hour clock)
DEFAULT_TIMESTAMP_FORMAT = "%d-%m-%Y %I:%M:%S"


def _code_str(code: Optional[UUID]) -> Optional[str]:
    return str(code) if code is not None else None


def _without_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class FieldError:
    """Validation failure of a single field on a named object."""

    object_name: str
    field: str
    rejected_value: Any
    message: str
    code: Optional[UUID] = None

    def to_dict(self) -> Dict[str, Any]:
        return _without_none(
            {
                "object": self.object_name,
                "field": self.field,
                "rejectedValue": self.rejected_value,
                "message": self.message,
                "code": _code_str(self.code),
            }
        )


@dataclass(frozen=True)
class ObjectError:
    """Validation failure that is not attributable to one field."""

    object_name: str
    message: str
    code: Optional[UUID] = None

    def to_dict(self) -> Dict[str, Any]:
        return _without_none(
            {
                "object": self.object_name,
                "message": self.message,
                "code": _code_str(self.code),
            }
        )


SubError = Union[FieldError, ObjectError]


@dataclass(frozen=True)
class ApiError:
    """Structured representation of a classified failure.

    Attributes:
        status: HTTP status (value and canonical reason phrase)
        message: Human-readable summary
        code: Correlation code, ``None`` when it could not be generated
        sub_errors: Individual causes of a multi-cause failure, in report order
        timestamp: Local time of construction
    """

    status: HTTPStatus
    message: str
    code: Optional[UUID] = None
    sub_errors: Tuple[SubError, ...] = ()
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", HTTPStatus(self.status))
        # sub-errors are never shared between errors
        object.__setattr__(self, "sub_errors", tuple(self.sub_errors))

    @classmethod
    def of(
        cls,
        status: Union[HTTPStatus, int],
        message: str,
        code: Optional[UUID] = None,
        sub_errors: Iterable[SubError] = (),
    ) -> "ApiError":
        """Build an ApiError from loose values."""
        return cls(status=HTTPStatus(status), message=message, code=code, sub_errors=tuple(sub_errors))

    def to_dict(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> Dict[str, Any]:
        """Convert to the JSON body shape.

        Absent values are omitted rather than emitted as null, and
        ``subErrors`` is left out entirely when there are none.

        Args:
            timestamp_format: ``strftime`` format for the timestamp

        Returns:
            Dictionary ready for JSON encoding
        """
        body: Dict[str, Any] = {
            "timestamp": self.timestamp.strftime(timestamp_format),
            "status": self.status.value,
            "message": self.message,
        }
        if self.code is not None:
            body["code"] = str(self.code)
        if self.sub_errors:
            body["subErrors"] = [sub_error.to_dict() for sub_error in self.sub_errors]
        return body
