"""Test harness for unit and integration tests.

Integration tests assume a PostgreSQL instance is reachable at DATABASE__URL
with the tables created by ``scripts/init_db.py``.
"""

import pytest_asyncio

from leaf.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Loads settings from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_save_comment(integration_env):
            repo = await integration_env.get(CommentRepository)
            comment = await repo.save(make_comment(...))
            assert comment.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
