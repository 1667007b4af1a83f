from typing import Iterable

from minishell.entities.directory_entry import DirectoryEntry


def sort_key(name: str) -> str:
    if name in (".", ".."):
        return ""
    return name.removeprefix(".").lower()


def sort_entries(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Order entries case-insensitively, ignoring one leading dot, with ``.``/``..`` first.

    Equal keys keep their enumeration order.
    """
    return sorted(entries, key=lambda entry: sort_key(entry.name))
