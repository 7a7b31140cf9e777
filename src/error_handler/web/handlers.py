"""FastAPI / Starlette exception handlers.

``register_error_handlers`` wires an ``ErrorResponder`` into an application
so every failure leaves the service as an ``ApiError`` body:

    from fastapi import FastAPI
    from error_handler.logger import get_logger
    from error_handler.web import register_error_handlers

    app = FastAPI()
    register_error_handlers(app, logger=get_logger("orders-api"))
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

import pydantic
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from error_handler.classify import UnwritableResponse, classify
from error_handler.config import Settings, get_settings
from error_handler.exceptions import ErrorHandlerError
from error_handler.logger import Logger, create_logger
from error_handler.model import ApiError
from error_handler.web.describe import Describer, describe_exception

# Exception types routed to the responder, most specific first
HANDLED_EXCEPTIONS: Tuple[Type[Exception], ...] = (
    RequestValidationError,
    ResponseValidationError,
    pydantic.ValidationError,
    StarletteHTTPException,
    ErrorHandlerError,
    Exception,
)


class ErrorResponder:
    """Describe, classify, log and render intercepted exceptions.

    Args:
        logger: Diagnostic sink for intercepted failures
        settings: Error handler settings
        describers: Extra ``(exception type, describer)`` pairs tried before
            the defaults
    """

    def __init__(
        self,
        logger: Logger,
        settings: Settings,
        describers: Optional[Sequence[Tuple[Type[BaseException], Describer]]] = None,
    ) -> None:
        self.logger = logger
        self.settings = settings
        self.describers = list(describers or ())

    def build(self, exc: BaseException, request: Optional[Request] = None) -> ApiError:
        """Classify an exception without logging or rendering it."""
        return classify(describe_exception(exc, request, self.describers))

    def render(self, api_error: ApiError, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
        """Render an ApiError as a JSON response with its status.

        A body that cannot be encoded is replaced by the unwritable-response
        error.
        """
        body = api_error.to_dict(self.settings.handler.timestamp_format)
        try:
            return JSONResponse(status_code=api_error.status.value, content=body, headers=headers)
        except (TypeError, ValueError) as e:
            self.logger.error("Error body could not be encoded", status=api_error.status.value, reason=str(e))
            fallback = classify(UnwritableResponse())
            return JSONResponse(
                status_code=fallback.status.value,
                content=fallback.to_dict(self.settings.handler.timestamp_format),
            )

    def log(self, request: Optional[Request], exc: BaseException, api_error: ApiError) -> None:
        context: Dict[str, Any] = {
            "status": api_error.status.value,
            "exception": type(exc).__name__,
        }
        if request is not None:
            context["method"] = request.method
            context["path"] = request.url.path
        if api_error.code is not None:
            context["code"] = str(api_error.code)
        if api_error.sub_errors:
            context["sub_errors"] = len(api_error.sub_errors)

        if api_error.status.value >= 500:
            if self.settings.handler.log_internal_messages:
                context["detail"] = str(exc)
            self.logger.error(api_error.message, **context)
        else:
            self.logger.warning(api_error.message, **context)

        if api_error.code is None and not api_error.sub_errors:
            self.logger.debug("Correlation code unavailable", status=api_error.status.value)

    async def __call__(self, request: Request, exc: Exception) -> JSONResponse:
        api_error = self.build(exc, request)
        self.log(request, exc, api_error)
        headers = exc.headers if isinstance(exc, StarletteHTTPException) else None
        return self.render(api_error, headers=headers)


def register_error_handlers(
    app: Any,
    logger: Optional[Logger] = None,
    settings: Optional[Settings] = None,
    describers: Optional[Sequence[Tuple[Type[BaseException], Describer]]] = None,
) -> bool:
    """Attach the error responder to a FastAPI or Starlette app.

    Args:
        app: Application exposing ``add_exception_handler``
        logger: Diagnostic sink (default: a StructuredLogger built from settings)
        settings: Settings (default: ``get_settings()``)
        describers: Extra describers tried before the defaults

    Returns:
        True if handlers were installed, False if disabled by settings
    """
    settings = settings or get_settings()
    if logger is None:
        logger = create_logger(
            name="error-handler",
            level=settings.log.level_number,
            log_file=settings.log.log_file,
            json_format=settings.log.json_format,
        )

    if not settings.handler.enabled:
        logger.info("Error handlers disabled", prefix=settings.prefix)
        return False

    responder = ErrorResponder(logger=logger, settings=settings, describers=describers)
    handled: List[Type[BaseException]] = [exc_type for exc_type, _ in responder.describers]
    handled.extend(HANDLED_EXCEPTIONS)
    for exc_type in handled:
        app.add_exception_handler(exc_type, responder)
    logger.debug("Error handlers registered", handlers=len(handled))
    return True
