"""Failure classification and validation aggregation.

Usage:
    from error_handler.classify import MissingParameter, classify

    api_error = classify(MissingParameter("user_id"))
    api_error.status   # HTTPStatus.BAD_REQUEST
    api_error.message  # "user_id parameter is missing"
"""

from error_handler.classify.aggregator import aggregate, field_error, object_error
from error_handler.classify.classifier import classify
from error_handler.classify.failures import (
    DataConflict,
    EntityNotFound,
    ExplicitStatusFailure,
    FailureDescription,
    FieldFailure,
    GlobalFailure,
    MalformedBody,
    MissingParameter,
    NoRouteFound,
    TypeMismatch,
    Unclassified,
    UnsupportedMediaType,
    UnwritableResponse,
    ValidationFailed,
)

__all__ = [
    # Operations
    "classify",
    "aggregate",
    "field_error",
    "object_error",
    # Validation inputs
    "FieldFailure",
    "GlobalFailure",
    # Failure descriptions
    "FailureDescription",
    "ValidationFailed",
    "MissingParameter",
    "TypeMismatch",
    "MalformedBody",
    "UnsupportedMediaType",
    "EntityNotFound",
    "DataConflict",
    "UnwritableResponse",
    "NoRouteFound",
    "ExplicitStatusFailure",
    "Unclassified",
]
