from shortcuts.dao.base.key_schema import ShortcutKeySchema
from shortcuts.dao.base.shortcut_base_dao import ShortcutBaseDAO


__all__ = [
    'ShortcutKeySchema',
    'ShortcutBaseDAO',
]
