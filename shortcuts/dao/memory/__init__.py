from shortcuts.dao.memory.storage import MemoryStorage
from shortcuts.dao.memory.shortcut_memory_dao import ShortcutMemoryDAO


__all__ = [
    'MemoryStorage',
    'ShortcutMemoryDAO',
]
