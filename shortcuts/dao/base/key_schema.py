import re
import functools
from collections.abc import Callable

from shortcuts.utils.constants import DEFAULT_COLLECTION, KEY_SEPARATOR


__all__ = ['ShortcutKeySchema']  # hide internal decorator prefix_key from imports

_GLOB_SPECIAL = re.compile(r'([*?\[\]\\])')
_RECORD_KEY = re.compile(r'[0-9a-z]+')


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}{KEY_SEPARATOR}{key}' if self.prefix is not None else key

    return wrapper


class ShortcutKeySchema:
    """Provide standardized storage keys for shortcut records.

    Records live under '<collection>:<canonical key>'. An optional prefix can be
    provided to namespace all generated keys, e.g. "shortcuts:prod" or "shortcuts:dev".
    """

    def __init__(self, collection: str = DEFAULT_COLLECTION, prefix: str | None = None):
        if not isinstance(collection, str):
            raise TypeError(f'Collection must be of type string (given type: {type(collection)}).')
        if not collection:
            raise ValueError('Collection must be a non-empty string.')
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.collection = collection
        self.prefix = prefix or None

    @prefix_key
    def shortcut_key(self, key: str) -> str:
        return f'{self.collection}{KEY_SEPARATOR}{key}'

    @prefix_key
    def collection_namespace(self) -> str:
        return f'{self.collection}{KEY_SEPARATOR}'

    def collection_pattern(self) -> str:
        """Glob pattern for Redis SCAN; matches may include other namespaces, filter with owns_key()"""
        namespace = _GLOB_SPECIAL.sub(r'\\\1', self.collection_namespace())
        return f'{namespace}*'

    def owns_key(self, storage_key: str | bytes) -> bool:
        """Check whether a storage key is a record of this collection

        Keys of other namespaces can share the collection namespace as a string
        prefix (e.g. 'shortcuts:local:shortcuts:abcd' starts with 'shortcuts:'),
        so the remainder must be a single canonical key.
        """
        if isinstance(storage_key, bytes):
            storage_key = storage_key.decode('utf-8')

        namespace = self.collection_namespace()
        if not storage_key.startswith(namespace):
            return False
        return _RECORD_KEY.fullmatch(storage_key[len(namespace) :]) is not None
