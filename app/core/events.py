"""Application startup and shutdown events."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from prometheus_client import Counter, Histogram

from app.core import db
from app.core.config import settings
from app.core.logging import configure_logging

# Prometheus metrics
REQUESTS_TOTAL = Counter(
    "app_http_requests_total",
    "Total number of HTTP requests",
    labelnames=["method", "path"],
)

RESPONSES_TOTAL = Counter(
    "app_http_responses_total",
    "Total number of HTTP responses",
    labelnames=["status_code"],
)

REQUEST_DURATION_SECONDS = Histogram(
    "app_http_request_duration_seconds",
    "HTTP request duration in seconds",
    labelnames=["method", "path"],
)

GEOCODE_ATTEMPTS_TOTAL = Counter(
    "app_geocode_attempts_total",
    "Geocoding provider attempts by outcome",
    labelnames=["provider", "outcome"],
)

OFFICE_SEARCH_TOTAL = Counter(
    "app_office_search_total",
    "Permit office searches by answering source",
    labelnames=["source"],
)

logger: logging.Logger = logging.getLogger("app.core.events")

App = TypeVar("App", bound=Any)


def create_start_app_handler(app: App) -> Callable[[], Awaitable[None]]:
    """Create function to run on application startup.

    Args:
        app: FastAPI application instance

    Returns:
        Startup event handler
    """

    async def start_app() -> None:
        configure_logging(level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
        logger.info(
            "Starting %s %s (locationiq=%s, google=%s, default_state=%s)",
            settings.app_name,
            settings.version,
            "on" if settings.LOCATIONIQ_ACCESS_TOKEN else "off",
            "on" if settings.GOOGLE_MAPS_API_KEY else "off",
            settings.DEFAULT_STATE,
        )

    return start_app


def create_stop_app_handler(app: App) -> Callable[[], Awaitable[None]]:
    """Create function to run on application shutdown.

    Args:
        app: FastAPI application instance

    Returns:
        Shutdown event handler
    """

    async def stop_app() -> None:
        await db.dispose_engine()
        logger.info("Application shutdown complete")

    return stop_app
