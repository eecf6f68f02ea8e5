"""Request ID middleware tying log lines and responses together."""

import re
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from structlog.contextvars import bind_contextvars, clear_contextvars

REQUEST_ID_HEADER = "X-Request-ID"

# Caller-supplied IDs are echoed back, so keep them short and header-safe
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def is_valid_request_id(value: str | None) -> bool:
    """Check whether a caller-supplied request ID can be reused."""
    return bool(value) and _REQUEST_ID_PATTERN.match(value) is not None


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Assign a correlation ID to every request.

    The ID is taken from the ``X-Request-ID`` header when the caller sent a
    usable one, otherwise a UUID4 is generated. It is stored on
    ``request.state``, bound into the structlog context and echoed back on
    the response.
    """

    def _get_correlation_id(self, request: Request) -> str:
        header_value = request.headers.get(REQUEST_ID_HEADER)
        if is_valid_request_id(header_value):
            return str(header_value)
        return str(uuid.uuid4())

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        clear_contextvars()

        correlation_id = self._get_correlation_id(request)
        bind_contextvars(correlation_id=correlation_id)
        request.state.correlation_id = correlation_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = correlation_id
        return response
