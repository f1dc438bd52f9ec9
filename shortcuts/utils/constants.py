# Shortcode alphabet: digits plus lowercase letters, minus the confusables l, o and u
SHORTCODE_ALPHABET = '0123456789abcdefghijkmnpqrstvwxyz'
SHORTCODE_LENGTH = 8
SHORTCODE_GROUP_SIZE = 4
SHORTCODE_SEPARATOR = '-'

# Confusable characters and their canonical replacements
CONFUSABLES = {'o': '0', 'l': '1', 'u': 'v'}

# Store defaults
DEFAULT_COLLECTION = 'shortcuts'
DEFAULT_BACKEND_URL = 'redis://localhost:6379/0'
DEFAULT_MAX_RETRIES = 10  # further attempts after the first generated code collides
KEY_SEPARATOR = ':'

# Redis: keys removed per UNLINK call when clearing a collection
CLEAR_BATCH_SIZE = 500

# Environment variable names
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
LOG_LEVEL_ENV = 'LOG_LEVEL'
SHORTCUTS_URL_ENV = 'SHORTCUTS_URL'
SHORTCUTS_COLLECTION_ENV = 'SHORTCUTS_COLLECTION'
SHORTCUTS_PREFIX_ENV = 'SHORTCUTS_PREFIX'
SHORTCUTS_MAX_RETRIES_ENV = 'SHORTCUTS_MAX_RETRIES'
SHORTCUTS_LEGACY_CANONICALIZATION_ENV = 'SHORTCUTS_LEGACY_CANONICALIZATION'
