from shortcuts.models import ShortcutModel
from shortcuts.store import (
    ShortcutStore,
    StoreOptions,
    ConnectionURL,
    RedisSession,
    MemorySession,
    create_store,
)
from shortcuts.dao.memory import MemoryStorage
from shortcuts.dao.exceptions import (
    DAOError,
    NotConnectedError,
    DataStoreError,
    ShortcutAlreadyExistsError,
    RetryExhaustedError,
)
from shortcuts.utils.shortcode import generate_candidate, canonicalize, pretty_print


__all__ = [
    'ShortcutModel',
    'ShortcutStore',
    'StoreOptions',
    'ConnectionURL',
    'RedisSession',
    'MemorySession',
    'MemoryStorage',
    'create_store',
    'DAOError',
    'NotConnectedError',
    'DataStoreError',
    'ShortcutAlreadyExistsError',
    'RetryExhaustedError',
    'generate_candidate',
    'canonicalize',
    'pretty_print',
]
