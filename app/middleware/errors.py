"""Error handling middleware."""

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR
from starlette.types import ASGIApp

from app.core.exceptions import INTERNAL_ERROR_MESSAGE, PermitLocatorError
from app.core.logging import get_logger

logger = get_logger()

INVALID_BODY_MESSAGE = "Invalid request body"
INVALID_PARAMETERS_MESSAGE = "Invalid request parameters"


def error_response(
    message: str, status_code: int, correlation_id: str | None = None
) -> JSONResponse:
    """Create a ``{"error": message}`` JSON response."""
    response = JSONResponse(
        status_code=status_code,
        content={"error": message},
        media_type="application/json",
    )
    if correlation_id:
        response.headers["X-Request-ID"] = correlation_id
    return response


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request validation failures as client errors."""
    in_body = any(error.get("loc", ("",))[0] == "body" for error in exc.errors())
    message = INVALID_BODY_MESSAGE if in_body else INVALID_PARAMETERS_MESSAGE
    correlation_id = getattr(request.state, "correlation_id", None)
    logger.info(
        "request_invalid",
        path=request.url.path,
        method=request.method,
        errors=len(exc.errors()),
        correlation_id=correlation_id,
    )
    return error_response(message, HTTP_400_BAD_REQUEST, correlation_id)


async def handle_locator_error(
    request: Request, exc: PermitLocatorError
) -> JSONResponse:
    """Render domain errors with their own status and message."""
    correlation_id = getattr(request.state, "correlation_id", None)
    logger.info(
        "request_rejected",
        error_type=exc.__class__.__name__,
        error_message=exc.message,
        status_code=exc.status_code,
        path=request.url.path,
        correlation_id=correlation_id,
    )
    return error_response(exc.message, exc.status_code, correlation_id)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP exceptions (including unknown routes) in the same shape."""
    correlation_id = getattr(request.state, "correlation_id", None)
    return error_response(str(exc.detail), exc.status_code, correlation_id)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that run inside the routing layer."""
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(PermitLocatorError, handle_locator_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware to turn escaped exceptions into consistent error responses."""

    def __init__(self, app: ASGIApp) -> None:
        """
        Initialize middleware.

        Args:
        ----
            app: The ASGI application
        """
        super().__init__(app)

    def _get_error_detail(self, exc: Exception) -> tuple[str, int]:
        """Get the client-facing message and status code for an exception."""
        if isinstance(exc, PermitLocatorError):
            return exc.message, exc.status_code
        if isinstance(exc, StarletteHTTPException):
            return str(exc.detail), exc.status_code
        # Internal details never leave the server
        return INTERNAL_ERROR_MESSAGE, HTTP_500_INTERNAL_SERVER_ERROR

    def _log_error(
        self,
        request: Request,
        exc: Exception,
        status_code: int,
        correlation_id: str | None,
    ) -> None:
        """Log error details."""
        is_fault = status_code >= HTTP_500_INTERNAL_SERVER_ERROR
        log = logger.error if is_fault else logger.info
        log(
            "request_error",
            error_type=exc.__class__.__name__,
            error_message=str(exc),
            status_code=status_code,
            path=request.url.path,
            method=request.method,
            correlation_id=correlation_id,
            exc_info=is_fault,
        )

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """
        Process the request/response cycle and handle errors.

        Args:
        ----
            request: The incoming request
            call_next: The next handler in the middleware chain

        Returns:
        -------
            The response from downstream handlers or error response
        """
        try:
            return await call_next(request)
        except Exception as exc:
            correlation_id = getattr(request.state, "correlation_id", None)
            detail, status_code = self._get_error_detail(exc)

            self._log_error(request, exc, status_code, correlation_id)
            return error_response(detail, status_code, correlation_id)
