import functools
from typing import TypeVar, Any
from collections.abc import Callable

import redis

from shortcuts.dao.exceptions import DataStoreError
from shortcuts.types import ShortcutRecord


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def redis_location(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_errors(method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis errors

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_errors
        ... def clear(self):
        ...     return self.redis.flushdb()
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis command failed at {redis_location(self.redis)}: {e}') from e

    return wrapper


def decode_record(reply: list | None) -> ShortcutRecord | None:
    """Turn a flat HGETALL-style [field, value, ...] script reply into a record

    Replies are decoded to str regardless of the client's decode_responses setting.
    """
    if not reply:
        return None

    values = [item.decode('utf-8') if isinstance(item, bytes) else str(item) for item in reply]
    return dict(zip(values[0::2], values[1::2]))
