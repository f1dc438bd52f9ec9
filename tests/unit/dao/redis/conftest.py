from unittest.mock import MagicMock

import pytest
import redis

from shortcuts.dao.redis.shortcut_redis_dao import HIT_SCRIPT, INSERT_IF_ABSENT_SCRIPT, POP_SCRIPT


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'


@pytest.fixture
def scripts() -> dict[str, MagicMock]:
    """One mock per registered Lua script, keyed by a short name."""
    return {
        'insert': MagicMock(name='insert_if_absent'),
        'hit': MagicMock(name='hit'),
        'pop': MagicMock(name='pop'),
    }


@pytest.fixture
def redis_client(scripts) -> redis.Redis:
    """Mock a Redis client whose register_script() hands out the script mocks."""
    by_source = {
        INSERT_IF_ABSENT_SCRIPT: scripts['insert'],
        HIT_SCRIPT: scripts['hit'],
        POP_SCRIPT: scripts['pop'],
    }
    client = MagicMock(spec=redis.Redis)
    client.connection_pool = MagicMock(
        spec=redis.ConnectionPool,
        connection_kwargs={'host': '203.0.113.1', 'port': 18000, 'db': 5},
    )
    client.ping.return_value = True
    client.register_script.side_effect = lambda source: by_source[source]
    return client
