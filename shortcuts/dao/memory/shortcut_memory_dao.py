"""Data Access Object (DAO) implementation keeping shortcuts in process memory

Records are stored serialized (see shortcuts.dao.records), exactly as the Redis
DAO stores them, so metadata never aliases the caller's objects and both
backends accept and return the same values. Every operation runs under the
storage lock, which makes it atomic with respect to other threads.

Classes:
    ShortcutMemoryDAO:
        DAO for storing and retrieving ShortcutModel in a MemoryStorage.

Example:
    >>> from shortcuts.dao.memory import MemoryStorage, ShortcutMemoryDAO
    >>> dao = ShortcutMemoryDAO(storage=MemoryStorage())
    >>> dao.insert(ShortcutModel(key='abcd1234', display_code='ABCD-1234'))
    <ShortcutMemoryDAO collection='shortcuts' prefix=None>
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from beartype import beartype

from shortcuts.models import ShortcutModel
from shortcuts.dao.base import ShortcutBaseDAO, ShortcutKeySchema
from shortcuts.dao.records import dump_shortcut, load_shortcut
from shortcuts.dao.memory.storage import MemoryStorage
from shortcuts.dao.exceptions import ShortcutAlreadyExistsError
from shortcuts.utils.constants import DEFAULT_COLLECTION


logger = logging.getLogger(__name__)


class ShortcutMemoryDAO(ShortcutBaseDAO):
    """In-process Data Access Object (DAO) for managing shortcut records

    Attributes:
        storage (MemoryStorage):
            Records shared with every DAO bound to the same storage.
        keys (ShortcutKeySchema):
            Key schema helper for generating namespaced record keys.
    """

    def __init__(
        self,
        storage: Optional[MemoryStorage] = None,
        collection: Optional[str] = DEFAULT_COLLECTION,
        prefix: Optional[str] = None,
    ):
        self.storage = storage if storage is not None else MemoryStorage()
        self.keys = ShortcutKeySchema(collection=collection or DEFAULT_COLLECTION, prefix=prefix)

    def __repr__(self) -> str:
        return f'<ShortcutMemoryDAO collection={self.keys.collection!r} prefix={self.keys.prefix!r}>'

    @beartype
    def insert(self, shortcut: ShortcutModel, **kwargs) -> 'ShortcutMemoryDAO':
        record = dump_shortcut(shortcut)
        storage_key = self.keys.shortcut_key(shortcut.key)

        with self.storage.lock:
            if storage_key in self.storage.records:
                raise ShortcutAlreadyExistsError(f"Shortcut with key '{shortcut.key}' already exists.")
            self.storage.records[storage_key] = record

        logger.debug('Inserted shortcut.', extra={'key': shortcut.key, 'collection': self.keys.collection})
        return self

    @beartype
    def hit(self, key: str, accessed_at: datetime, **kwargs) -> ShortcutModel | None:
        storage_key = self.keys.shortcut_key(key)

        with self.storage.lock:
            record = self.storage.records.get(storage_key)
            if record is None:
                return None
            shortcut = load_shortcut(record)
            shortcut = replace(shortcut, access_count=shortcut.access_count + 1, last_accessed_at=accessed_at)
            self.storage.records[storage_key] = dump_shortcut(shortcut)

        return shortcut

    @beartype
    def pop(self, key: str, **kwargs) -> ShortcutModel | None:
        with self.storage.lock:
            record = self.storage.records.pop(self.keys.shortcut_key(key), None)

        return load_shortcut(record) if record is not None else None

    def clear(self, **kwargs) -> int:
        with self.storage.lock:
            doomed = [storage_key for storage_key in self.storage.records if self.keys.owns_key(storage_key)]
            for storage_key in doomed:
                del self.storage.records[storage_key]

        logger.debug('Cleared collection.', extra={'collection': self.keys.collection, 'deleted': len(doomed)})
        return len(doomed)
