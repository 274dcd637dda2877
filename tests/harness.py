"""Test harness for unit and E2E tests.

Settings are loaded from environment variables (see tests/conftest.py).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from tube.interface.api.app import create_app
from tube.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no services needed
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_like(unit_env):
            ledger = await unit_env.get(EngagementLedger)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for E2E fixtures yielding a TestClient over a fresh app.

    The client runs the app's lifespan; ``client.portal`` runs coroutines
    on the app's event loop, which is how tests seed data through
    ``client.app.state.dishka_container``.

    Usage:
        e2e_client = create_client_fixture()

        def test_health(e2e_client):
            assert e2e_client.get("/health").status_code == 200
    """

    @pytest.fixture
    def _test_client():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container)

        with TestClient(app) as client:
            yield client
            client.portal.call(container.close)

    return _test_client
