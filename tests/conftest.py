"""
Test configuration and fixtures for the short link service.
This centralizes all test setup, making individual tests clean.
"""

import random
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from main import app
from shortlink_app.config import settings
from shortlink_app.dependencies import get_registry
from shortlink_app.registry import Registry
from shortlink_app.services.link_service import LinkService
from shortlink_app.services.short_code_strategies import RandomShortCodeStrategy


class FakeClock:
    """Controllable time source; call it to read, advance() to move forward."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture(scope="function")
def registry(clock):
    """
    Fresh registry for each test, running on the fake clock.
    Seeded generator so failures are reproducible.
    """
    strategy = RandomShortCodeStrategy(length=6, max_retries=10, rng=random.Random(1234))
    return Registry(short_code_strategy=strategy, clock=clock)


@pytest.fixture
def link_service(registry):
    return LinkService(registry=registry, default_expiration="24h")


@pytest.fixture(scope="function")
def client(registry):
    """
    Create a test client with the registry dependency overridden.
    This is the main fixture that tests will use.
    """
    app.dependency_overrides[get_registry] = lambda: registry

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture
def api_headers():
    return {"X-API-Key": settings.api_key}
