from typing import Any, TypeAlias


# JSON-like metadata attached to a shortcut
Metadata: TypeAlias = Any

# Raw record fields as stored by a backend (Redis hash / in-process dict)
ShortcutRecord: TypeAlias = dict[str, str]
