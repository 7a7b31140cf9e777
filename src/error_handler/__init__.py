"""Error Handler Common - structured API errors for Python web services.

This package turns runtime failures into stable, serializable error bodies:
- codes: Deterministic correlation codes
- model: ApiError and its field/object sub-errors
- classify: Failure classification and validation aggregation
- exceptions: Library exceptions and exceptions recognised at the boundary
- logger: Injectable loggers for the web boundary
- config: Typed settings loaded from the environment
- web: FastAPI / Starlette exception handlers
"""

__version__ = "1.0.0"

from error_handler.codes import generate, generate_or_none

from error_handler.model import (
    ApiError,
    FieldError,
    ObjectError,
    SubError,
)

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
    aggregate,
    classify,
)

from error_handler.exceptions import (
    BadRequestError,
    ConfigurationError,
    DataIntegrityError,
    EncodingError,
    EntityNotFoundError,
    ErrorHandlerError,
    ResponseSerializationError,
    ResponseStatusError,
)

from error_handler.logger import (
    DefaultLogger,
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

from error_handler.config import (
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "__version__",
    # Codes
    "generate",
    "generate_or_none",
    # Model
    "ApiError",
    "FieldError",
    "ObjectError",
    "SubError",
    # Classification
    "classify",
    "aggregate",
    "FailureDescription",
    "FieldFailure",
    "GlobalFailure",
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
    # Exceptions
    "ErrorHandlerError",
    "EncodingError",
    "ConfigurationError",
    "EntityNotFoundError",
    "ResponseStatusError",
    "BadRequestError",
    "DataIntegrityError",
    "ResponseSerializationError",
    # Logger
    "Logger",
    "DefaultLogger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Config
    "Settings",
    "get_settings",
    "reset_settings",
]
