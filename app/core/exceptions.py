"""Error taxonomy for the permit office locator.

Errors that reach the HTTP layer carry the status code and the exact message
returned to clients. Provider and store errors never reach it: they are
converted into outcome objects at the boundary that raised them.
"""

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class PermitLocatorError(Exception):
    """Base class for errors rendered as ``{"error": message}`` responses."""

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ClientInputError(PermitLocatorError):
    """A request field is missing or invalid."""

    status_code = HTTP_400_BAD_REQUEST
    message = "Invalid request"


class AddressRequiredError(ClientInputError):
    """The geocode request carried no address."""

    message = "Address is required"


class InvalidRequestError(ClientInputError):
    """The request body or parameters could not be parsed."""

    message = "Invalid request body"


class NotFoundError(PermitLocatorError):
    """The requested resource could not be produced."""

    status_code = HTTP_404_NOT_FOUND
    message = "Not Found"


class GeocodeNotFoundError(NotFoundError):
    """Every geocoding provider came back without a match."""

    message = "Could not geocode address"


class UpstreamProviderError(Exception):
    """A geocoding provider call failed (absorbed by the adapter)."""

    def __init__(self, provider: str, detail: str) -> None:
        self.provider = provider
        self.detail = detail
        super().__init__(f"{provider}: {detail}")


class StoreError(Exception):
    """The permit office store is unreachable or rejected the query."""
