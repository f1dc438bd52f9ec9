"""Conversion between ShortcutModel and the flat record stored by backends

Every field is stored as a string so that a record fits a Redis hash as-is:
metadata as JSON, access_count as a decimal integer, last_accessed_at as an
ISO 8601 timestamp (the field is absent until the first lookup).

Functions:
    dump_metadata(metadata: Metadata) -> str
    dump_shortcut(shortcut: ShortcutModel) -> ShortcutRecord
    load_shortcut(record: ShortcutRecord) -> ShortcutModel
"""

import json
from datetime import datetime

from shortcuts.models import ShortcutModel
from shortcuts.types import Metadata, ShortcutRecord


__all__ = ['dump_metadata', 'dump_shortcut', 'load_shortcut']


def dump_metadata(metadata: Metadata) -> str:
    """Serialize metadata to JSON, refusing values JSON can't give back unchanged

    Tuples would come back as lists and non-string dict keys as strings, so
    metadata must be JSON-native: dict with str keys, list, str, int, float
    (finite), bool or None.

    Raises:
        TypeError: If the metadata is not JSON serializable or not JSON-native.
    """
    try:
        text = json.dumps(metadata, allow_nan=False)
    except ValueError as e:
        raise TypeError(f'Metadata is not JSON serializable: {e}') from e

    if json.loads(text) != metadata:
        raise TypeError(f'Metadata must be JSON-native (tuples or non-string dict keys would change): {metadata!r}')
    return text


def dump_shortcut(shortcut: ShortcutModel) -> ShortcutRecord:
    """Serialize a ShortcutModel into a flat string record

    Raises:
        TypeError: If the metadata is not JSON-native (see dump_metadata).
    """
    record = {
        'key': shortcut.key,
        'display_code': shortcut.display_code,
        'metadata': dump_metadata(shortcut.metadata),
        'access_count': str(shortcut.access_count),
    }
    if shortcut.last_accessed_at is not None:
        record['last_accessed_at'] = shortcut.last_accessed_at.isoformat()
    return record


def load_shortcut(record: ShortcutRecord) -> ShortcutModel:
    """Deserialize a flat string record into a ShortcutModel"""
    last_accessed_at = record.get('last_accessed_at')
    return ShortcutModel(
        key=record['key'],
        display_code=record['display_code'],
        metadata=json.loads(record['metadata']),
        access_count=int(record['access_count']),
        last_accessed_at=datetime.fromisoformat(last_accessed_at) if last_accessed_at else None,
    )
