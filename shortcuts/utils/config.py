"""Utility functions for application configuration management.

Store settings are read from environment variables, so the same code runs
unchanged in local development, CI and deployed environments:

    APP_NAME                            application name, used for the key prefix
    APP_ENV                             environment name, 'local' by default
    SHORTCUTS_URL                       backend URL (redis://..., memory://)
    SHORTCUTS_COLLECTION                collection name, 'shortcuts' by default
    SHORTCUTS_PREFIX                    key prefix, '<APP_NAME>:<APP_ENV>' by default
    SHORTCUTS_MAX_RETRIES               retry cap for generated shortcodes, 10 by default
    SHORTCUTS_LEGACY_CANONICALIZATION   replace only the first confusable character

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    running_locally() -> bool
        True when `APP_ENV` is 'local'.

    backend_url() -> str
        Return the backend URL. Only local environments fall back to a default.

    load_config() -> dict
        Return every store setting as a dictionary.

Example:
    >>> from shortcuts.utils.config import load_config
    >>> os.environ['APP_NAME'] = 'shortcuts'
    >>> load_config()
    {'url': 'redis://localhost:6379/0', 'collection': 'shortcuts', 'prefix': 'shortcuts:local', 'max_retries': 10, 'legacy_canonicalization': False}
"""

import os
import logging

from shortcuts.utils.helpers import parse_bool, require_environment
from shortcuts.utils.constants import (
    APP_ENV_ENV,
    APP_NAME_ENV,
    SHORTCUTS_URL_ENV,
    SHORTCUTS_COLLECTION_ENV,
    SHORTCUTS_PREFIX_ENV,
    SHORTCUTS_MAX_RETRIES_ENV,
    SHORTCUTS_LEGACY_CANONICALIZATION_ENV,
    DEFAULT_BACKEND_URL,
    DEFAULT_COLLECTION,
    DEFAULT_MAX_RETRIES,
)


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(APP_NAME_ENV)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'shortcuts'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'shortcuts:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def running_locally() -> bool:
    """Check if the application runs in the local environment"""
    return app_env() == 'local'


@require_environment(SHORTCUTS_URL_ENV)
def _required_backend_url() -> str:
    return os.environ[SHORTCUTS_URL_ENV]


def backend_url() -> str:
    """Return the backend connection URL

    Local environments fall back to a Redis server on localhost. Everywhere
    else `SHORTCUTS_URL` must be set.

    Raises:
        KeyError:
            If `SHORTCUTS_URL` is missing outside the local environment.
    """
    if running_locally():
        return os.environ.get(SHORTCUTS_URL_ENV) or DEFAULT_BACKEND_URL
    return _required_backend_url()


def load_config() -> dict:
    """Load store settings from the environment

    Returns:
        dict: settings with the keys url, collection, prefix, max_retries
              and legacy_canonicalization.

    Raises:
        KeyError:
            If `SHORTCUTS_URL` is missing outside the local environment.
        ValueError:
            If `SHORTCUTS_MAX_RETRIES` is not a non-negative integer.
    """
    raw_retries = os.environ.get(SHORTCUTS_MAX_RETRIES_ENV)
    try:
        max_retries = DEFAULT_MAX_RETRIES if not raw_retries else int(raw_retries)
    except ValueError as e:
        raise ValueError(f'{SHORTCUTS_MAX_RETRIES_ENV} must be an integer (given value: {raw_retries!r}).') from e
    if max_retries < 0:
        raise ValueError(f'{SHORTCUTS_MAX_RETRIES_ENV} must be non-negative (given value: {max_retries}).')

    config = {
        'url': backend_url(),
        'collection': os.environ.get(SHORTCUTS_COLLECTION_ENV) or DEFAULT_COLLECTION,
        'prefix': os.environ.get(SHORTCUTS_PREFIX_ENV) or app_prefix(),
        'max_retries': max_retries,
        'legacy_canonicalization': parse_bool(os.environ.get(SHORTCUTS_LEGACY_CANONICALIZATION_ENV)),
    }
    logger.debug('Loaded store configuration.', extra={'collection': config['collection'], 'prefix': config['prefix']})
    return config
