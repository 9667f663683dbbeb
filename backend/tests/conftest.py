"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Every test runs against a freshly configured service container, so the
user store starts empty and ids start at 1.
"""

import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, configure_container, reset_container
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"


def make_settings(**overrides) -> Settings:
    """Build settings with the test secret and any overrides."""
    values = {"jwt_secret": TEST_JWT_SECRET}
    values.update(overrides)
    return Settings(**values)


class FakeClock:
    """Controllable clock for token expiry tests."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture(autouse=True)
def container() -> ServiceContainer:
    """Provide a fresh service container for each test."""
    container = configure_container(make_settings())
    yield container
    reset_container()


@pytest.fixture
def client() -> TestClient:
    """Test client for a freshly created app."""
    return TestClient(create_app())


@pytest.fixture
def auth_token(container: ServiceContainer) -> str:
    """Create a valid auth token for testing."""
    return container.tokens.issue()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def fake_clock() -> FakeClock:
    """Provide a controllable clock."""
    return FakeClock()
