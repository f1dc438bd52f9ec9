"""Helper utilities

Functions:
    utcnow() -> datetime
        Current time as a timezone-aware UTC datetime
    parse_bool(value) -> bool
        Interpret an environment variable value as a boolean flag
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present

Example:
    >>> from shortcuts.utils.helpers import parse_bool
    >>> parse_bool('yes')
    True
    >>> parse_bool(None)
    False
"""

import os
import functools
from datetime import datetime, UTC
from collections.abc import Callable


TRUTHY = frozenset({'1', 'true', 'yes', 'on'})


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime

    Example:
        >>> utcnow()
        datetime.datetime(2025, 10, 15, 12, 0, 0, tzinfo=datetime.timezone.utc)
    """
    return datetime.now(UTC)


def parse_bool(value: str | None) -> bool:
    """Interpret an environment variable value as a boolean flag ('1', 'true', 'yes', 'on')"""
    return value is not None and value.strip().lower() in TRUTHY


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        KeyError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('SHORTCUTS_URL')
        ... def my_function():
        ...     pass
        >>> my_function()
        KeyError: "Missing required environment variables: 'SHORTCUTS_URL'"
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise KeyError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
