"""Unit tests for record (de)serialization in records.py.

Test coverage includes:

1. Dumping
   - Every field is stored as a string; last_accessed_at is omitted until set.
   - Non JSON-serializable metadata raises TypeError, and so does metadata JSON
     would give back changed (tuples, non-string dict keys, NaN).

2. Loading
   - Records written by dump_shortcut() load back into equal models.
   - Timezone information survives.
"""

from datetime import datetime, UTC, timedelta, timezone

import pytest

from shortcuts.models import ShortcutModel
from shortcuts.dao.records import dump_metadata, dump_shortcut, load_shortcut


# -------------------------------
# 1. Dumping
# -------------------------------


def test_dump_new_shortcut():
    """Ensure a fresh shortcut dumps to string fields without last_accessed_at."""
    shortcut = ShortcutModel(key='abcd1234', display_code='ABCD-1234', metadata={'foo': 'bar'})

    assert dump_shortcut(shortcut) == {
        'key': 'abcd1234',
        'display_code': 'ABCD-1234',
        'metadata': '{"foo": "bar"}',
        'access_count': '0',
    }


def test_dump_accessed_shortcut():
    """Ensure last_accessed_at is stored as ISO 8601."""
    shortcut = ShortcutModel(
        key='abcd1234',
        display_code='ABCD-1234',
        access_count=7,
        last_accessed_at=datetime(2025, 10, 15, 12, 30, tzinfo=UTC),
    )

    record = dump_shortcut(shortcut)

    assert record['access_count'] == '7'
    assert record['metadata'] == 'null'
    assert record['last_accessed_at'] == '2025-10-15T12:30:00+00:00'


def test_dump_rejects_unserializable_metadata():
    """Ensure metadata must be JSON serializable."""
    shortcut = ShortcutModel(key='test', display_code='TEST', metadata={'when': object()})
    with pytest.raises(TypeError):
        dump_shortcut(shortcut)


@pytest.mark.parametrize(
    'metadata',
    [
        {1: 'a'},
        (1, 2),
        {'nested': [(1, 2)]},
        float('nan'),
        float('inf'),
    ],
)
def test_dump_rejects_metadata_that_would_change(metadata):
    """Ensure metadata that JSON would hand back altered is refused instead of silently converted."""
    with pytest.raises(TypeError):
        dump_metadata(metadata)


def test_dump_metadata_accepts_json_native_values():
    assert dump_metadata({'url': 'https://example.com', 'tags': ['a', 'b'], 'ratio': 0.5}) == (
        '{"url": "https://example.com", "tags": ["a", "b"], "ratio": 0.5}'
    )


# -------------------------------
# 2. Loading
# -------------------------------


@pytest.mark.parametrize(
    'metadata',
    [None, 'plain string', 42, [1, 'two', None], {'nested': {'list': [1, 2], 'flag': True}}],
)
def test_load_dumped_shortcut(metadata):
    """Ensure dumped records load back into an equal model."""
    shortcut = ShortcutModel(
        key='test',
        display_code='TEST',
        metadata=metadata,
        access_count=2,
        last_accessed_at=datetime(2025, 10, 15, 8, 0, tzinfo=timezone(timedelta(hours=2))),
    )
    assert load_shortcut(dump_shortcut(shortcut)) == shortcut


def test_load_record_without_last_access():
    shortcut = load_shortcut({'key': 'test', 'display_code': 'TEST', 'metadata': '{}', 'access_count': '0'})
    assert shortcut.last_accessed_at is None
    assert shortcut.metadata == {}
