"""API test fixtures."""

from typing import AsyncGenerator, Generator, cast

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from httpx import ASGITransport, AsyncClient, Timeout
from starlette.testclient import TestClient
from starlette.types import ASGIApp

from app.api.v1.router import router as v1_router
from app.core.config import settings
from app.middleware.correlation import CorrelationMiddleware
from app.middleware.errors import ErrorHandlingMiddleware, register_exception_handlers
from app.middleware.metrics import MetricsMiddleware
from app.middleware.security import SecurityHeadersMiddleware

# Default timeout configuration
DEFAULT_TIMEOUT: Timeout = Timeout(
    timeout=5.0,  # Default total timeout
    connect=2.0,  # Connection timeout
    read=5.0,  # Read timeout
    write=5.0,  # Write timeout
    pool=2.0,  # Pool timeout
)


@pytest.fixture(scope="function")
def test_app() -> FastAPI:
    """Get FastAPI test application.

    Built without startup handlers; dependencies are overridden per test.

    Returns:
        FastAPI application for testing
    """
    test_app = FastAPI(title="Permit Office Locator", version="0.1.0")

    # Add middleware in same order as main app
    test_app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:8000"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
        max_age=600,
        allow_credentials=False,
    )
    test_app.add_middleware(SecurityHeadersMiddleware)
    test_app.add_middleware(CorrelationMiddleware)
    test_app.add_middleware(MetricsMiddleware)
    test_app.add_middleware(ErrorHandlingMiddleware)
    register_exception_handlers(test_app)

    test_app.include_router(v1_router, prefix=settings.api_prefix)
    return test_app


@pytest.fixture(scope="function")
def test_app_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    """Get FastAPI test client.

    Args:
        test_app: FastAPI application for testing

    Yields:
        Test client for making synchronous requests
    """
    with TestClient(test_app, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def test_app_async_client(
    test_app: FastAPI,
) -> AsyncGenerator[AsyncClient, None]:
    """Get FastAPI async test client.

    Args:
        test_app: FastAPI application for testing

    Yields:
        Test client for making asynchronous requests
    """
    transport = ASGITransport(app=cast(ASGIApp, test_app))
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True,
        timeout=DEFAULT_TIMEOUT,
    ) as client:
        yield client
