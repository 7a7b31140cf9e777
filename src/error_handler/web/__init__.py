"""Web boundary for FastAPI and Starlette applications.

Intercepts exceptions, describes them as failures, classifies them and
returns the ApiError body.
"""

from error_handler.web.describe import (
    DEFAULT_DESCRIBERS,
    Describer,
    describe_exception,
)
from error_handler.web.handlers import (
    HANDLED_EXCEPTIONS,
    ErrorResponder,
    register_error_handlers,
)

__all__ = [
    "Describer",
    "DEFAULT_DESCRIBERS",
    "describe_exception",
    "ErrorResponder",
    "HANDLED_EXCEPTIONS",
    "register_error_handlers",
]
