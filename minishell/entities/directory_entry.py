"""
Directory entry domain entity.
"""

import os
import stat
from dataclasses import dataclass
from enum import Enum


class FileType(Enum):
    """File type tags, valued by their character in a permission string."""

    REGULAR = "-"
    DIRECTORY = "d"
    SYMLINK = "l"
    CHAR_DEVICE = "c"
    BLOCK_DEVICE = "b"
    SOCKET = "s"
    FIFO = "p"
    UNKNOWN = "?"

    @classmethod
    def from_mode(cls, mode: int) -> "FileType":
        """Classify the S_IFMT bits of a mode."""
        return _FORMAT_TYPES.get(stat.S_IFMT(mode), cls.UNKNOWN)

    @property
    def char(self) -> str:
        return self.value


_FORMAT_TYPES = {
    stat.S_IFREG: FileType.REGULAR,
    stat.S_IFDIR: FileType.DIRECTORY,
    stat.S_IFLNK: FileType.SYMLINK,
    stat.S_IFCHR: FileType.CHAR_DEVICE,
    stat.S_IFBLK: FileType.BLOCK_DEVICE,
    stat.S_IFSOCK: FileType.SOCKET,
    stat.S_IFIFO: FileType.FIFO,
}


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Snapshot of one directory entry's metadata, captured once per listing pass.

    ``blocks`` is the allocation reported by the file system in 512-byte units.
    """

    path: str
    name: str
    file_type: FileType
    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float
    blocks: int

    @classmethod
    def from_stat(cls, path: str, name: str, st: os.stat_result) -> "DirectoryEntry":
        """
        Build an entry from a stat result.

        Args:
            path: Path the metadata was read from
            name: Name to display for the entry
            st: Result of ``os.stat`` or ``os.lstat``

        Returns:
            The captured DirectoryEntry
        """
        return cls(
            path=path,
            name=name,
            file_type=FileType.from_mode(st.st_mode),
            mode=stat.S_IMODE(st.st_mode),
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            mtime=st.st_mtime,
            blocks=getattr(st, "st_blocks", (st.st_size + 511) // 512),
        )

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.file_type is FileType.SYMLINK

    @property
    def is_executable(self) -> bool:
        """True when any of the owner, group or other execute bits is set."""
        return bool(self.mode & 0o111)
