"""Application-wide logging initialization

Call `initialize_logging()` once at the application boundary (before the store
is created). Library modules only ever use `logging.getLogger(__name__)`.

Logging format (one JSON document per line on stdout):
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "DEBUG",
    "logger": "shortcuts.store",
    "message": "Generated shortcode collided, retrying.",
    "key": "k3zb7qxa"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortcuts.utils.constants import LOG_LEVEL_ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Configure the root logger with the JSON formatter

    Args:
        level (str | None):
            Log level name. Defaults to the `LOG_LEVEL` environment variable, then 'INFO'.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
