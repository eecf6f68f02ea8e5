"""Test fixture package for the permit office locator.

Contains fixtures for:
- The FastAPI test application and its HTTP clients
- Permit office records, store doubles and geocoding provider doubles
"""

from .api import test_app, test_app_async_client, test_app_client
from .offices import fake_provider, make_office, mock_session, office_repository

__all__ = [
    # API
    "test_app",
    "test_app_async_client",
    "test_app_client",
    # Offices and geocoding
    "fake_provider",
    "make_office",
    "mock_session",
    "office_repository",
]
