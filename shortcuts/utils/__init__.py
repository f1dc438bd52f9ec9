from shortcuts.utils.config import app_env, app_name, app_prefix, backend_url, load_config
from shortcuts.utils.helpers import utcnow, parse_bool, require_environment
from shortcuts.utils.shortcode import generate_candidate, canonicalize, pretty_print, is_canonical
from shortcuts.utils.logging import initialize_logging


__all__ = [
    'generate_candidate',
    'canonicalize',
    'pretty_print',
    'is_canonical',
    'app_env',
    'app_name',
    'app_prefix',
    'backend_url',
    'load_config',
    'utcnow',
    'parse_bool',
    'require_environment',
    'initialize_logging',
]
