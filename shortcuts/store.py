"""Shortcut store: issue shortcodes for metadata and resolve them back

The store binds to a backend DAO and implements the shortcode insert protocol:

- Caller-supplied shortcode: canonicalize it and attempt a single atomic
  insert-if-absent. A taken shortcode is an expected outcome, reported by
  returning None rather than raising.
- No shortcode: generate a random candidate and attempt the same insert. On a
  collision, try a fresh candidate, at most `max_retries` more times, then raise
  RetryExhaustedError.

Uniqueness never depends on a read before the write: the backend's atomic
insert-if-absent is the only existence check. Lookups and deletes canonicalize
whatever the caller typed before touching the backend.

Classes:
    ConnectionURL, RedisSession, MemorySession:
        Connection targets accepted by ShortcutStore.connect().
    StoreOptions:
        Store configuration, applied on connect.
    ShortcutStore:
        The store itself.

Functions:
    create_store(config: dict | None = None) -> ShortcutStore:
        Build and connect a store from environment configuration.

Example:
    >>> from shortcuts import ShortcutStore, ConnectionURL
    >>> store = ShortcutStore().connect(ConnectionURL('redis://localhost:6379/0'))
    >>> code = store.add(None, {'url': 'https://example.com'})
    >>> code
    'K3ZB-7QXA'
    >>> store.find('k3zb 7qxa').access_count
    1
    >>> store.add('K3ZB-7QXA', {'url': 'https://example.org'}) is None
    True
"""

import logging
import functools
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, assert_never
from collections.abc import Callable

import redis
from beartype import beartype

from shortcuts.models import ShortcutModel
from shortcuts.types import Metadata
from shortcuts.dao.base import ShortcutBaseDAO
from shortcuts.dao.redis import ShortcutRedisDAO
from shortcuts.dao.memory import MemoryStorage, ShortcutMemoryDAO
from shortcuts.dao.exceptions import NotConnectedError, RetryExhaustedError, ShortcutAlreadyExistsError
from shortcuts.utils.config import load_config
from shortcuts.utils.helpers import utcnow
from shortcuts.utils.shortcode import canonicalize, generate_candidate
from shortcuts.utils.constants import DEFAULT_COLLECTION, DEFAULT_MAX_RETRIES


logger = logging.getLogger(__name__)

MEMORY_SCHEME = 'memory://'


@dataclass(frozen=True)
class ConnectionURL:
    """Open a new connection: 'redis://', 'rediss://', 'unix://' or 'memory://'"""

    url: str


@dataclass(frozen=True)
class RedisSession:
    """Reuse an open Redis client; no new connection is made"""

    client: redis.Redis


@dataclass(frozen=True)
class MemorySession:
    """Reuse an existing in-process storage"""

    storage: MemoryStorage


ConnectionTarget = ConnectionURL | RedisSession | MemorySession


# fmt: off
@dataclass(frozen=True)
class StoreOptions:
    collection: str = DEFAULT_COLLECTION        # Collection records are stored in
    prefix: Optional[str] = None                # Namespace prefix for every record key
    max_retries: int = DEFAULT_MAX_RETRIES      # Extra attempts after a generated shortcode collides
    legacy_canonicalization: bool = False       # Replace only the first confusable character
# fmt: on


def require_connection(method: Callable) -> Callable:
    """Decorator: raise NotConnectedError when the store isn't bound to a backend yet"""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self.dao is None:
            raise NotConnectedError('No connection: call connect() first.')
        return method(self, *args, **kwargs)

    return wrapper


class ShortcutStore:
    """Shortcode-to-metadata mapping store

    Attributes:
        options (StoreOptions):
            Configuration used by the next connect().
        dao (ShortcutBaseDAO | None):
            Backend DAO bound by connect(), None before.

    Methods:
        configure(**options) -> ShortcutStore
        connect(target) -> ShortcutStore
        add(code, metadata) -> str | None
        find(code, as_of=None) -> ShortcutModel | None
        remove(code) -> ShortcutModel | None
        remove_all() -> int
        normalize(code) -> str | None

    Raises (every data operation):
        NotConnectedError:
            If called before connect().
        DataStoreError:
            If the backend fails.
    """

    def __init__(
        self,
        collection: str = DEFAULT_COLLECTION,
        prefix: Optional[str] = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        legacy_canonicalization: bool = False,
    ):
        self.options = StoreOptions(
            collection=collection,
            prefix=prefix,
            max_retries=max_retries,
            legacy_canonicalization=legacy_canonicalization,
        )
        self.dao: ShortcutBaseDAO | None = None
        self._bound_options = self.options

    def __repr__(self) -> str:
        return f'<ShortcutStore dao={self.dao!r}>'

    @property
    def connected(self) -> bool:
        return self.dao is not None

    @beartype
    def configure(
        self,
        collection: Optional[str] = None,
        prefix: Optional[str] = None,
        max_retries: Optional[int] = None,
        legacy_canonicalization: Optional[bool] = None,
    ) -> 'ShortcutStore':
        """Change store options; they take effect on the next connect()

        Only the given options change. No I/O is performed.

        Returns:
            ShortcutStore: self (for method chaining)

        Raises:
            ValueError: If max_retries is negative.
        """
        changes = {
            'collection': collection,
            'prefix': prefix,
            'max_retries': max_retries,
            'legacy_canonicalization': legacy_canonicalization,
        }
        if max_retries is not None and max_retries < 0:
            raise ValueError(f'max_retries must be non-negative (given value: {max_retries}).')

        self.options = replace(self.options, **{name: value for name, value in changes.items() if value is not None})
        return self

    @beartype
    def connect(self, target: ConnectionTarget | str) -> 'ShortcutStore':
        """Bind the store to a backend

        Args:
            target (ConnectionURL | RedisSession | MemorySession | str):
                Where to store shortcuts. A plain string is taken as a ConnectionURL.
                ConnectionURL opens a new connection ('memory://' creates a fresh
                in-process storage); sessions are reused as they are.

        Returns:
            ShortcutStore: self (for method chaining)

        Raises:
            DataStoreError:
                If the URL is invalid or the backend is unreachable.

        Example:
            >>> store.connect(RedisSession(redis.Redis()))
            <ShortcutStore dao=<ShortcutRedisDAO collection='shortcuts' prefix=None>>
        """
        options = self.options
        namespace = {'collection': options.collection, 'prefix': options.prefix}

        match target:
            case str():
                return self.connect(ConnectionURL(target))
            case ConnectionURL(url=url) if url.startswith(MEMORY_SCHEME):
                dao = ShortcutMemoryDAO(storage=MemoryStorage(), **namespace)
            case ConnectionURL(url=url):
                dao = ShortcutRedisDAO(redis_url=url, **namespace)
            case RedisSession(client=client):
                dao = ShortcutRedisDAO(redis_client=client, **namespace)
            case MemorySession(storage=storage):
                dao = ShortcutMemoryDAO(storage=storage, **namespace)
            case _:
                assert_never(target)

        self.dao = dao
        self._bound_options = options
        logger.debug('Connected shortcut store.', extra={'dao': repr(dao)})
        return self

    def normalize(self, code: str | None) -> str | None:
        """Canonicalize a shortcode the way this store derives its keys"""
        return canonicalize(code, legacy=self._bound_options.legacy_canonicalization)

    @require_connection
    @beartype
    def add(self, code: str | None, metadata: Metadata = None) -> str | None:
        """Store metadata under a shortcode

        Args:
            code (str | None):
                Shortcode to use. If empty or None, a random one is generated.
            metadata (Metadata):
                JSON-native value to attach to the shortcode (dict with str keys,
                list, str, int, finite float, bool or None).

        Returns:
            str | None:
                The display code that was stored (the generated one if no code
                was given), or None if the given code is already taken.

        Raises:
            ValueError:
                If the given code contains no letters or digits.
            TypeError:
                If the metadata is not JSON-native (find() must return it unchanged).
            RetryExhaustedError:
                If every generated code collided with an existing shortcut.
            NotConnectedError, DataStoreError:
                See ShortcutStore.
        """
        if code:
            key = self.normalize(code)
            if not key:
                raise ValueError(f"Shortcode {code!r} contains no letters or digits.")
            try:
                self._insert(key, code, metadata)
            except ShortcutAlreadyExistsError:
                logger.debug('Shortcode already taken.', extra={'key': key})
                return None
            return code

        attempts = self._bound_options.max_retries + 1
        for attempt in range(1, attempts + 1):
            candidate = generate_candidate()
            try:
                self._insert(canonicalize(candidate), candidate, metadata)
            except ShortcutAlreadyExistsError:
                logger.debug('Generated shortcode collided, retrying.', extra={'key': canonicalize(candidate), 'attempt': attempt})
                continue
            return candidate

        logger.warning('Gave up generating a free shortcode.', extra={'attempts': attempts})
        raise RetryExhaustedError(f'No free shortcode found after {attempts} attempts.')

    def _insert(self, key: str, display_code: str, metadata: Metadata) -> None:
        self.dao.insert(ShortcutModel(key=key, display_code=display_code, metadata=metadata))

    @require_connection
    @beartype
    def find(self, code: str, as_of: Optional[datetime] = None) -> ShortcutModel | None:
        """Resolve a shortcode, counting the access

        The access count increment and the timestamp update are one atomic
        backend operation.

        Args:
            code (str):
                Shortcode in any display form.
            as_of (Optional[datetime]):
                Access time to record. Defaults to now (UTC).

        Returns:
            ShortcutModel | None: The record after the update, or None if not found.
        """
        key = self.normalize(code)
        if not key:
            return None
        return self.dao.hit(key, accessed_at=as_of if as_of is not None else utcnow())

    @require_connection
    @beartype
    def remove(self, code: str) -> ShortcutModel | None:
        """Delete a shortcode

        Returns:
            ShortcutModel | None: The record as it was just before deletion, or None if not found.
        """
        key = self.normalize(code)
        if not key:
            return None
        return self.dao.pop(key)

    @require_connection
    def remove_all(self) -> int:
        """Delete every shortcut in the bound collection (administrative reset)

        Returns:
            int: number of deleted shortcuts.
        """
        return self.dao.clear()


def create_store(config: dict | None = None) -> ShortcutStore:
    """Build a store from configuration and connect it

    Args:
        config (dict | None):
            Settings as returned by load_config(). Loaded from the environment if None.

    Returns:
        ShortcutStore: connected store.

    Example:
        >>> os.environ['SHORTCUTS_URL'] = 'memory://'
        >>> create_store().connected
        True
    """
    config = config if config is not None else load_config()
    store = ShortcutStore(
        collection=config.get('collection', DEFAULT_COLLECTION),
        prefix=config.get('prefix'),
        max_retries=config.get('max_retries', DEFAULT_MAX_RETRIES),
        legacy_canonicalization=config.get('legacy_canonicalization', False),
    )
    return store.connect(ConnectionURL(config['url']))
