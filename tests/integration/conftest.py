"""Fixtures for tests that talk to a real Redis server

The server is taken from SHORTCUTS_TEST_REDIS_URL (default: database 15 of the
local Redis at 127.0.0.1:6379). Tests are skipped when it can't be reached.
Every test works in its own key prefix, which is cleared afterwards.
"""

import os
import uuid

import pytest
import redis

from shortcuts import RedisSession, ShortcutStore


TEST_REDIS_URL = os.environ.get('SHORTCUTS_TEST_REDIS_URL', 'redis://127.0.0.1:6379/15')


@pytest.fixture(scope='session')
def redis_client() -> redis.Redis:
    client = redis.Redis.from_url(TEST_REDIS_URL, decode_responses=True, socket_connect_timeout=1)
    try:
        client.ping()
    except redis.exceptions.RedisError as e:
        pytest.skip(f'Redis is not available at {TEST_REDIS_URL}: {e}')
    yield client
    client.close()


@pytest.fixture
def raw_redis_client(redis_client) -> redis.Redis:
    """Client on the same server that returns bytes replies"""
    client = redis.Redis.from_url(TEST_REDIS_URL, decode_responses=False)
    yield client
    client.close()


@pytest.fixture
def app_prefix() -> str:
    return f'shortcuts-test:{uuid.uuid4().hex}'


@pytest.fixture
def store(redis_client, app_prefix) -> ShortcutStore:
    store = ShortcutStore(prefix=app_prefix).connect(RedisSession(redis_client))
    yield store
    store.remove_all()
