"""Turn live exceptions into failure descriptions.

This is the only module that inspects runtime exception types. Each
describer handles one exception family; ``describe_exception`` picks the
first whose type matches, falling back to ``Unclassified``.

Applications can put their own describers in front of the defaults, for
example to report an ORM integrity error as a data conflict:

    from sqlalchemy.exc import IntegrityError

    def describe_integrity(exc, request):
        return DataConflict(root_cause_is_constraint=True)

    register_error_handlers(app, describers=[(IntegrityError, describe_integrity)])
"""

import math
from http import HTTPStatus
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Type

import pydantic
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from error_handler.classify import (
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
from error_handler.exceptions import (
    BadRequestError,
    DataIntegrityError,
    EntityNotFoundError,
    ResponseSerializationError,
    ResponseStatusError,
)

Describer = Callable[[Any, Optional[Request]], FailureDescription]

# Request locations whose single-value errors map to parameter categories
PARAMETER_LOCATIONS = frozenset({"query", "path", "header", "cookie"})

_TYPE_ERROR_SUFFIXES = ("_parsing", "_type")
_EXPECTED_TYPES = {
    "bool": "bool",
    "bytes": "bytes",
    "date": "date",
    "datetime": "datetime",
    "decimal": "Decimal",
    "float": "float",
    "int": "int",
    "string": "str",
    "time": "time",
    "timedelta": "timedelta",
    "uuid": "UUID",
}


def _json_safe(value: Any) -> Any:
    """Make a rejected value encodable by a strict JSON encoder.

    Containers are converted recursively; non-finite floats and any
    non-JSON type become their ``str()``.
    """
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else str(value)
    if isinstance(value, dict):
        return {str(key): _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return str(value)


def _expected_type(error_type: str) -> Optional[str]:
    for suffix in _TYPE_ERROR_SUFFIXES:
        if error_type.endswith(suffix):
            base = error_type[: -len(suffix)]
            return _EXPECTED_TYPES.get(base, base)
    return None


def _dotted(parts: Sequence[Any]) -> str:
    return ".".join(str(part) for part in parts)


def _validation_failed(object_name: str, issues: Iterable[dict], strip_root: bool) -> ValidationFailed:
    """Split pydantic error dicts into field and global failures.

    With ``strip_root`` the first location element names the object
    (``("body", "email")`` is field ``email`` of object ``body``).
    """
    field_failures: List[FieldFailure] = []
    global_failures: List[GlobalFailure] = []
    for issue in issues:
        location = tuple(issue.get("loc", ()))
        message = str(issue.get("msg", "Invalid value"))
        name = str(location[0]) if strip_root and location else object_name
        parts = location[1:] if strip_root else location
        if not parts:
            global_failures.append(GlobalFailure(object_name=name, message=message))
            continue
        field_failures.append(
            FieldFailure(
                object_name=name,
                field=_dotted(parts),
                rejected_value=_json_safe(issue.get("input")),
                message=message,
                category=issue.get("type"),
            )
        )
    return ValidationFailed(field_failures=tuple(field_failures), global_failures=tuple(global_failures))


def describe_request_validation(exc: RequestValidationError, request: Optional[Request] = None) -> FailureDescription:
    issues = list(exc.errors())

    if any(issue.get("type") == "json_invalid" for issue in issues):
        return MalformedBody()

    if len(issues) == 1:
        issue = issues[0]
        location = tuple(issue.get("loc", ()))
        error_type = str(issue.get("type", ""))
        if len(location) == 2 and location[0] in PARAMETER_LOCATIONS:
            param = str(location[1])
            if error_type == "missing":
                return MissingParameter(name=param)
            expected = _expected_type(error_type)
            if expected is not None:
                return TypeMismatch(param=param, value=issue.get("input"), expected_type=expected)

    return _validation_failed("request", issues, strip_root=True)


def describe_pydantic_validation(exc: pydantic.ValidationError, request: Optional[Request] = None) -> FailureDescription:
    return _validation_failed(exc.title, exc.errors(), strip_root=False)


def describe_bad_request(exc: BadRequestError, request: Optional[Request] = None) -> FailureDescription:
    field_failures = tuple(
        FieldFailure(object_name=exc.object_name, field=name, rejected_value=None, message=message)
        for name, message in exc.errors.items()
    )
    return ValidationFailed(field_failures=field_failures)


def describe_entity_not_found(exc: EntityNotFoundError, request: Optional[Request] = None) -> FailureDescription:
    return EntityNotFound(detail=exc.detail)


def describe_data_integrity(exc: DataIntegrityError, request: Optional[Request] = None) -> FailureDescription:
    return DataConflict(root_cause_is_constraint=exc.constraint is not None)


def describe_unwritable(exc: Exception, request: Optional[Request] = None) -> FailureDescription:
    return UnwritableResponse()


def describe_response_status(exc: ResponseStatusError, request: Optional[Request] = None) -> FailureDescription:
    return ExplicitStatusFailure(status=exc.status, reason=exc.reason)


def describe_http_exception(exc: StarletteHTTPException, request: Optional[Request] = None) -> FailureDescription:
    try:
        status = HTTPStatus(exc.status_code)
    except ValueError:
        return Unclassified(internal_message=f"Unknown status code {exc.status_code}: {exc.detail}")

    detail = exc.detail if isinstance(exc.detail, str) and exc.detail else None

    # The router only sets "endpoint" in the scope once a route matches
    if status is HTTPStatus.NOT_FOUND and request is not None and request.scope.get("endpoint") is None:
        return NoRouteFound(method=request.method, url=request.url.path)

    if status is HTTPStatus.UNSUPPORTED_MEDIA_TYPE:
        return UnsupportedMediaType()

    return ExplicitStatusFailure(status=status, reason=detail)


DEFAULT_DESCRIBERS: Tuple[Tuple[Type[BaseException], Describer], ...] = (
    (RequestValidationError, describe_request_validation),
    (pydantic.ValidationError, describe_pydantic_validation),
    (BadRequestError, describe_bad_request),
    (EntityNotFoundError, describe_entity_not_found),
    (DataIntegrityError, describe_data_integrity),
    (ResponseSerializationError, describe_unwritable),
    (ResponseValidationError, describe_unwritable),
    (ResponseStatusError, describe_response_status),
    (StarletteHTTPException, describe_http_exception),
)


def describe_exception(
    exc: BaseException,
    request: Optional[Request] = None,
    describers: Optional[Sequence[Tuple[Type[BaseException], Describer]]] = None,
) -> FailureDescription:
    """Describe an exception for classification.

    Args:
        exc: The intercepted exception
        request: The request being served, when available
        describers: Extra ``(exception type, describer)`` pairs tried before
            the defaults

    Returns:
        The failure description of the first matching describer, or
        ``Unclassified`` carrying ``str(exc)`` for diagnostics
    """
    for exc_type, describer in tuple(describers or ()) + DEFAULT_DESCRIBERS:
        if isinstance(exc, exc_type):
            return describer(exc, request)
    return Unclassified(internal_message=str(exc))
