"""API test fixtures — in-process ASGI client with an injectable clock.

Invariants:
    - Every test gets a fresh app built from explicit Settings (no .env lookup)
    - The clock dependency can be pinned through the fixed_clock fixture
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from infra_kata.config import Settings
from infra_kata.infrastructure.clock import get_clock
from infra_kata.main import create_app

FIXED_INSTANT = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_format="text")


@pytest.fixture
def test_app(settings):
    app = create_app(settings)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def fixed_clock(test_app):
    test_app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_INSTANT)
    return FIXED_INSTANT


@pytest.fixture
async def client(test_app):
    transport = ASGITransport(app=test_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
