"""Test configuration."""

import os
from pathlib import Path
from typing import List

import pytest
from dotenv import load_dotenv
from pytest import Config

# Settings are read at import time, so the test environment must be in place
# before any application module is imported.
os.environ["TESTING"] = "true"

_env_test_file = Path(__file__).parent.parent / ".env.test"
if _env_test_file.exists():
    load_dotenv(_env_test_file, override=True)

from app.core.logging import configure_logging  # noqa: E402

fixture = pytest.fixture


@fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


pytest_plugins: List[str] = [
    "tests.fixtures.api",
    "tests.fixtures.offices",
]


def pytest_configure(config: Config) -> None:
    """Configure pytest.

    Args:
        config: Pytest configuration object
    """
    configure_logging(testing=True)
    config.addinivalue_line("markers", "integration: mark test as an integration test")
