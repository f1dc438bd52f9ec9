"""Abstract base class for Shortcut data access objects (DAOs).

This class establishes the contract every shortcut backend implements,
regardless of the underlying storage mechanism (e.g., Redis, in-process memory).

Responsibilities:
    - Provide atomic insert-if-absent, hit (increment + timestamp), pop and clear.
    - Standardize error handling across multiple data store implementations.
    - Keep all correctness-critical concurrency inside the data store: every
      method is a single atomic operation, never a read followed by a write.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortcuts.models import ShortcutModel
        >>> from shortcuts.dao.redis import ShortcutRedisDAO

        >>> dao = ShortcutRedisDAO(redis_url='redis://localhost:6379/0')
        >>> dao.insert(ShortcutModel(key='abcd1234', display_code='ABCD-1234', metadata={'foo': 'bar'}))

        >>> dao.hit('abcd1234', accessed_at=datetime.now(UTC)).access_count
        1

        >>> dao.pop('abcd1234').metadata
        {'foo': 'bar'}
"""

from abc import ABC, abstractmethod
from datetime import datetime

from shortcuts.models import ShortcutModel


class ShortcutBaseDAO(ABC):
    """Interface for Shortcut data access objects (DAOs).

    Methods:
        insert(shortcut: ShortcutModel, **kwargs) -> ShortcutBaseDAO:
            Insert a new ShortcutModel if no record with the same key exists.
            Raises ShortcutAlreadyExistsError if the key already exists.
            Raises DataStoreError on connection or write failure.

        hit(key: str, accessed_at: datetime, **kwargs) -> ShortcutModel | None:
            Increment the access counter and set the last access time.
            Returns the updated record, or None if the key doesn't exist.
            Raises DataStoreError on connection or write failure.

        pop(key: str, **kwargs) -> ShortcutModel | None:
            Delete a record and return it as it was before deletion.
            Returns None if the key doesn't exist.
            Raises DataStoreError on connection or write failure.

        clear(**kwargs) -> int:
            Delete every record in the bound collection.
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortcutRedisDAO or
        ShortcutMemoryDAO) must extend this class and implement all
        abstract methods.
    """

    @abstractmethod
    def insert(self, shortcut: ShortcutModel, **kwargs) -> 'ShortcutBaseDAO':
        """Insert a new ShortcutModel into the data store.

        The existence check and the write are a single atomic operation.

        Args:
            shortcut (ShortcutModel):
                The ShortcutModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortcutBaseDAO: self (for method chaining)

        Raises:
            ShortcutAlreadyExistsError:
                If a ShortcutModel with the same key already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def hit(self, key: str, accessed_at: datetime, **kwargs) -> ShortcutModel | None:
        """Record an access to a shortcut and return the updated record.

        Args:
            key (str):
                Canonical key of the shortcut.

            accessed_at (datetime):
                Time of the access, stored as the record's last access time.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortcutModel | None: The record after the update, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def pop(self, key: str, **kwargs) -> ShortcutModel | None:
        """Delete a shortcut and return the record as it was before deletion.

        Args:
            key (str):
                Canonical key of the shortcut.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortcutModel | None: The deleted record, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def clear(self, **kwargs) -> int:
        """Delete every shortcut in the bound collection.

        Returns:
            int: Number of deleted records.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
