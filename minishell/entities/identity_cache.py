"""
Process-scoped cache of resolved owner and group names.
"""

import threading
from enum import Enum
from typing import Optional


class IdentityKind(Enum):
    OWNER = "owner"
    GROUP = "group"


class IdentityCache:
    """
    Mapping from (kind, numeric id) to a display name.

    Entries are added on first lookup and never invalidated; the cache lives as
    long as the process (or until ``clear`` is called).
    """

    def __init__(self):
        self._names: dict[tuple[IdentityKind, int], str] = {}
        self._lock = threading.Lock()

    def get(self, kind: IdentityKind, ident: int) -> Optional[str]:
        return self._names.get((kind, ident))

    def put(self, kind: IdentityKind, ident: int, name: str) -> str:
        """Store a name unless one is already cached, and return the cached value."""
        with self._lock:
            return self._names.setdefault((kind, ident), name)

    def clear(self) -> None:
        with self._lock:
            self._names.clear()

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, key: object) -> bool:
        return key in self._names
