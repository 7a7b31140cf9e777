"""Failure classification.

Maps each ``FailureDescription`` variant to an HTTP status and a message,
and stamps the resulting ``ApiError`` with a correlation code derived from
``(str(status), message)``. Dispatch goes through ``_CLASSIFIERS``, a table
keyed by variant type, so every variant has exactly one rule.

Classification is pure: it performs no I/O and does not log.
"""

from http import HTTPStatus
from typing import Callable, Dict, Optional, Type

from error_handler.classify.aggregator import aggregate
from error_handler.classify.failures import (
    DataConflict,
    EntityNotFound,
    ExplicitStatusFailure,
    FailureDescription,
    MalformedBody,
    MissingParameter,
    NoRouteFound,
    TypeMismatch,
    Unclassified,
    UnsupportedMediaType,
    UnwritableResponse,
    ValidationFailed,
)
from error_handler.codes import generate_or_none
from error_handler.model import ApiError

VALIDATION_MESSAGE = "Validation error"
MALFORMED_BODY_MESSAGE = "Malformed JSON request"
CONSTRAINT_CONFLICT_MESSAGE = "Database error"
DATA_INTEGRITY_MESSAGE = "Data integrity violation"
UNWRITABLE_RESPONSE_MESSAGE = "Error writing JSON output"


def _stamped(status: HTTPStatus, message: str) -> ApiError:
    return ApiError(
        status=status,
        message=message,
        code=generate_or_none(str(status.value), message),
    )


def _validation_failed(failure: ValidationFailed) -> ApiError:
    # Codes live on the sub-errors only
    return ApiError(
        status=HTTPStatus.BAD_REQUEST,
        message=VALIDATION_MESSAGE,
        sub_errors=tuple(aggregate(failure.field_failures, failure.global_failures)),
    )


def _missing_parameter(failure: MissingParameter) -> ApiError:
    return _stamped(HTTPStatus.BAD_REQUEST, f"{failure.name} parameter is missing")


def _type_mismatch(failure: TypeMismatch) -> ApiError:
    message = (
        f"The parameter '{failure.param}' of value '{failure.value}' "
        f"could not be converted to type '{failure.expected_type}'"
    )
    return _stamped(HTTPStatus.BAD_REQUEST, message)


def _malformed_body(failure: MalformedBody) -> ApiError:
    return _stamped(HTTPStatus.BAD_REQUEST, MALFORMED_BODY_MESSAGE)


def _unsupported_media_type(failure: UnsupportedMediaType) -> ApiError:
    status = HTTPStatus.UNSUPPORTED_MEDIA_TYPE
    return _stamped(status, status.phrase)


def _entity_not_found(failure: EntityNotFound) -> ApiError:
    if failure.detail is None:
        return ApiError(status=HTTPStatus.NOT_FOUND, message=HTTPStatus.NOT_FOUND.phrase)
    return _stamped(HTTPStatus.NOT_FOUND, failure.detail)


def _data_conflict(failure: DataConflict) -> ApiError:
    if failure.root_cause_is_constraint:
        return _stamped(HTTPStatus.CONFLICT, CONSTRAINT_CONFLICT_MESSAGE)
    return _stamped(HTTPStatus.INTERNAL_SERVER_ERROR, DATA_INTEGRITY_MESSAGE)


def _unwritable_response(failure: UnwritableResponse) -> ApiError:
    return _stamped(HTTPStatus.INTERNAL_SERVER_ERROR, UNWRITABLE_RESPONSE_MESSAGE)


def _no_route_found(failure: NoRouteFound) -> ApiError:
    # 400, not 404
    message = f"Could not find the {failure.method} method for URL {failure.url}"
    return _stamped(HTTPStatus.BAD_REQUEST, message)


def _explicit_status(failure: ExplicitStatusFailure) -> ApiError:
    return _stamped(failure.status, failure.reason or failure.status.phrase)


def _unclassified(failure: Unclassified) -> ApiError:
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    return _stamped(status, status.phrase)


_CLASSIFIERS: Dict[Type, Callable[..., ApiError]] = {
    ValidationFailed: _validation_failed,
    MissingParameter: _missing_parameter,
    TypeMismatch: _type_mismatch,
    MalformedBody: _malformed_body,
    UnsupportedMediaType: _unsupported_media_type,
    EntityNotFound: _entity_not_found,
    DataConflict: _data_conflict,
    UnwritableResponse: _unwritable_response,
    NoRouteFound: _no_route_found,
    ExplicitStatusFailure: _explicit_status,
    Unclassified: _unclassified,
}


def classify(failure: FailureDescription) -> ApiError:
    """Classify a failure description into an ApiError.

    Args:
        failure: One of the ``FailureDescription`` variants

    Returns:
        A new ApiError carrying status, message, code and sub-errors

    Raises:
        TypeError: If ``failure`` is not a known variant
    """
    handler: Optional[Callable[..., ApiError]] = _CLASSIFIERS.get(type(failure))
    if handler is None:
        raise TypeError(f"Unknown failure description: {type(failure).__name__}")
    return handler(failure)
