import threading

from shortcuts.types import ShortcutRecord


class MemoryStorage:
    """In-process record storage shared by ShortcutMemoryDAO instances.

    Plays the role of an open connection: DAOs handed the same storage see the
    same records. Callers must hold `lock` for every read-modify-write.
    """

    def __init__(self):
        self.records: dict[str, ShortcutRecord] = {}
        self.lock = threading.Lock()

    def __len__(self) -> int:
        with self.lock:
            return len(self.records)
