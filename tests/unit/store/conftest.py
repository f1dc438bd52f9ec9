import pytest

from shortcuts import ShortcutStore, MemorySession, MemoryStorage


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage) -> ShortcutStore:
    """A store connected to a fresh in-process storage, reset like the reference suite does."""
    _store = ShortcutStore(prefix='testapp:test').connect(MemorySession(storage))
    _store.remove_all()
    return _store
