"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    NotConnectedError:
        Raised when a store operation is invoked before the store is connected to a backend.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    ShortcutAlreadyExistsError:
        Raised when attempting to insert a ShortcutModel whose key already exists.

    RetryExhaustedError:
        Raised when every generated shortcode candidate collided with an existing one.

Example:
    >>> from shortcuts.dao.exceptions import NotConnectedError
    >>> raise NotConnectedError('No connection')
    Traceback (most recent call last):
        ...
    shortcuts.dao.exceptions.NotConnectedError: No connection
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class NotConnectedError(DAOError):
    """Exception raised when an operation is invoked before a backend is bound."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass


class ShortcutAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a ShortcutModel that already exists in the data store."""

    pass


class RetryExhaustedError(DAOError):
    """Exception raised when generated shortcodes keep colliding with existing ones."""

    pass
