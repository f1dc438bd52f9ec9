from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from shortcuts.types import Metadata


@dataclass(frozen=True)
class ShortcutModel:
    """Represent a shortcode-to-metadata mapping.

    Attributes:
        key (str):
            Canonical shortcode, the primary key of the record.
        display_code (str):
            The shortcode exactly as the caller supplied or was handed it.
            Canonicalizes to `key`.
        metadata (Metadata):
            JSON-like value attached to the shortcode at creation time.
        access_count (int):
            Number of successful lookups.
        last_accessed_at (Optional[datetime]):
            Time of the most recent lookup, None until the first one.

    Example:
        >>> shortcut = ShortcutModel(
        ...     key='abcd1234',
        ...     display_code='ABCD-1234',
        ...     metadata={'url': 'https://example.com'},
        ... )
        >>> shortcut.access_count
        0
        >>> shortcut.last_accessed_at is None
        True
    """

    key: str
    display_code: str
    metadata: Metadata = None
    access_count: int = 0
    last_accessed_at: Optional[datetime] = None
