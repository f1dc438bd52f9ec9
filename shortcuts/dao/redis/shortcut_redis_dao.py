"""Data Access Object (DAO) implementation for managing shortcuts in Redis

This module provides a Redis-based implementation of ShortcutBaseDAO.

Responsibilities:
    - Insert shortcuts only if their key is still free;
    - Count accesses and stamp the last access time;
    - Delete shortcuts, returning what was deleted;
    - Provide defensive error handling and raise appropriate DAO exceptions.

Storage layout:
    Every shortcut is one Redis hash at '[<prefix>:]<collection>:<key>' with the
    fields key, display_code, metadata (JSON), access_count and, after the first
    lookup, last_accessed_at (ISO 8601).

Classes:
    ShortcutRedisDAO:
        DAO for storing and retrieving ShortcutModel in a Redis datastore.

Example:
    >>> from shortcuts.models import ShortcutModel
    >>> from shortcuts.dao.redis import ShortcutRedisDAO

    >>> dao = ShortcutRedisDAO(redis_url='redis://localhost:6379/0', prefix='app:dev')

    >>> shortcut = ShortcutModel(key='abcd1234', display_code='ABCD-1234', metadata={'foo': 'bar'})
    >>> dao.insert(shortcut)
    <ShortcutRedisDAO>

    >>> dao.hit('abcd1234', accessed_at=datetime.now(UTC))
    ShortcutModel(key='abcd1234', display_code='ABCD-1234', metadata={'foo': 'bar'}, access_count=1, ...)

    >>> dao.pop('abcd1234').access_count
    1
"""

import logging
from datetime import datetime

from beartype import beartype

from shortcuts.models import ShortcutModel
from shortcuts.dao.base import ShortcutBaseDAO
from shortcuts.dao.records import dump_shortcut, load_shortcut
from shortcuts.dao.redis.mixins import RedisClientMixin
from shortcuts.dao.redis.helpers import handle_redis_errors, decode_record
from shortcuts.dao.exceptions import ShortcutAlreadyExistsError
from shortcuts.utils.constants import CLEAR_BATCH_SIZE


logger = logging.getLogger(__name__)


# NOTE: Each script runs atomically on the Redis server. The existence check and
#       the write can't interleave with another client's commands, so two writers
#       racing for the same key can't both succeed, and two concurrent hits can't
#       lose an increment.

# KEYS[1]: record key; ARGV: flat list of field/value pairs
INSERT_IF_ABSENT_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 1 then
    return 0
end
redis.call('HSET', KEYS[1], unpack(ARGV))
return 1
"""

# KEYS[1]: record key; ARGV[1]: last access timestamp
HIT_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 0 then
    return nil
end
redis.call('HINCRBY', KEYS[1], 'access_count', 1)
redis.call('HSET', KEYS[1], 'last_accessed_at', ARGV[1])
return redis.call('HGETALL', KEYS[1])
"""

# KEYS[1]: record key
POP_SCRIPT = """
local record = redis.call('HGETALL', KEYS[1])
if #record == 0 then
    return nil
end
redis.call('DEL', KEYS[1])
return record
"""


class ShortcutRedisDAO(RedisClientMixin, ShortcutBaseDAO):
    """Redis-based Data Access Object (DAO) for managing shortcut records

    This class implements the ShortcutBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (ShortcutKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(shortcut: ShortcutModel, **kwargs) -> ShortcutRedisDAO:
            Insert a shortcut if its key is free.
            Raises ShortcutAlreadyExistsError when a shortcut with the same key exists.
            Raises DataStoreError on Redis failures.

        hit(key: str, accessed_at: datetime, **kwargs) -> ShortcutModel | None:
            Increment the access counter, set the last access time, return the updated record.

        pop(key: str, **kwargs) -> ShortcutModel | None:
            Delete a shortcut and return its last state.

        clear(**kwargs) -> int:
            Delete every shortcut of the collection.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._insert_if_absent = self.redis.register_script(INSERT_IF_ABSENT_SCRIPT)
        self._hit = self.redis.register_script(HIT_SCRIPT)
        self._pop = self.redis.register_script(POP_SCRIPT)

    def __repr__(self) -> str:
        return f'<ShortcutRedisDAO collection={self.keys.collection!r} prefix={self.keys.prefix!r}>'

    @handle_redis_errors
    @beartype
    def insert(self, shortcut: ShortcutModel, **kwargs) -> 'ShortcutRedisDAO':
        """Insert a shortcut into Redis if its key doesn't exist yet

        Args:
            shortcut (ShortcutModel):
                ShortcutModel instance to store.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortcutRedisDAO: self (for method chaining)

        Raises:
            ShortcutAlreadyExistsError:
                If a shortcut with the same key already exists.
            DataStoreError:
                If a Redis error occurs.
        """
        record = dump_shortcut(shortcut)
        fields = [item for pair in record.items() for item in pair]

        inserted = self._insert_if_absent(keys=[self.keys.shortcut_key(shortcut.key)], args=fields)
        if not inserted:
            raise ShortcutAlreadyExistsError(f"Shortcut with key '{shortcut.key}' already exists.")

        logger.debug('Inserted shortcut.', extra={'key': shortcut.key, 'collection': self.keys.collection})
        return self

    @handle_redis_errors
    @beartype
    def hit(self, key: str, accessed_at: datetime, **kwargs) -> ShortcutModel | None:
        """Count an access to a shortcut

        Args:
            key (str):
                Canonical key of the shortcut.
            accessed_at (datetime):
                Time of the access.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortcutModel | None:
                The record after the update, None if the key doesn't exist.

        Raises:
            DataStoreError:
                If a Redis error occurs.
        """
        reply = self._hit(keys=[self.keys.shortcut_key(key)], args=[accessed_at.isoformat()])
        record = decode_record(reply)
        return load_shortcut(record) if record is not None else None

    @handle_redis_errors
    @beartype
    def pop(self, key: str, **kwargs) -> ShortcutModel | None:
        """Delete a shortcut, returning the record as it was before deletion

        Args:
            key (str):
                Canonical key of the shortcut.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortcutModel | None:
                The deleted record, None if the key doesn't exist.

        Raises:
            DataStoreError:
                If a Redis error occurs.
        """
        reply = self._pop(keys=[self.keys.shortcut_key(key)])
        record = decode_record(reply)
        return load_shortcut(record) if record is not None else None

    @handle_redis_errors
    def clear(self, **kwargs) -> int:
        """Delete every shortcut of the collection

        NOTE: keys are collected with SCAN and removed with UNLINK in batches.
              Only keys of the form <namespace><canonical key> are removed.
              Shortcuts inserted while the scan is running may survive.

        Returns:
            int: number of deleted records.

        Raises:
            DataStoreError:
                If a Redis error occurs.
        """
        deleted = 0
        batch = []
        for redis_key in self.redis.scan_iter(match=self.keys.collection_pattern(), count=CLEAR_BATCH_SIZE):
            if not self.keys.owns_key(redis_key):
                continue
            batch.append(redis_key)
            if len(batch) >= CLEAR_BATCH_SIZE:
                deleted += self.redis.unlink(*batch)
                batch = []
        if batch:
            deleted += self.redis.unlink(*batch)

        logger.debug('Cleared collection.', extra={'collection': self.keys.collection, 'deleted': deleted})
        return deleted
