"""Failure descriptions consumed by the classifier.

A ``FailureDescription`` is a closed union of tagged variants. The
collaborator that intercepts a live failure inspects it once and builds
one of these; the classifier never looks at runtime exception types.
"""

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class FieldFailure:
    """One field-level validation failure.

    ``category`` is the violated rule's identifier (e.g. "missing",
    "string_too_short") when the validator reports one.
    """

    object_name: str
    field: str
    rejected_value: Any
    message: str
    category: Optional[str] = None


@dataclass(frozen=True)
class GlobalFailure:
    """One object-level (cross-field) validation failure."""

    object_name: str
    message: str


@dataclass(frozen=True)
class ValidationFailed:
    field_failures: Tuple[FieldFailure, ...] = ()
    global_failures: Tuple[GlobalFailure, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_failures", tuple(self.field_failures))
        object.__setattr__(self, "global_failures", tuple(self.global_failures))


@dataclass(frozen=True)
class MissingParameter:
    name: str


@dataclass(frozen=True)
class TypeMismatch:
    param: str
    value: Any
    expected_type: str


@dataclass(frozen=True)
class MalformedBody:
    pass


@dataclass(frozen=True)
class UnsupportedMediaType:
    pass


@dataclass(frozen=True)
class EntityNotFound:
    detail: Optional[str] = None


@dataclass(frozen=True)
class DataConflict:
    root_cause_is_constraint: bool


@dataclass(frozen=True)
class UnwritableResponse:
    pass


@dataclass(frozen=True)
class NoRouteFound:
    method: str
    url: str


@dataclass(frozen=True)
class ExplicitStatusFailure:
    status: HTTPStatus
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", HTTPStatus(self.status))


@dataclass(frozen=True)
class Unclassified:
    """Fallback for anything unrecognised.

    ``internal_message`` is kept for diagnostics only and never reaches the
    classified error.
    """

    internal_message: Optional[str] = field(default=None, repr=False)


FailureDescription = Union[
    ValidationFailed,
    MissingParameter,
    TypeMismatch,
    MalformedBody,
    UnsupportedMediaType,
    EntityNotFound,
    DataConflict,
    UnwritableResponse,
    NoRouteFound,
    ExplicitStatusFailure,
    Unclassified,
]
