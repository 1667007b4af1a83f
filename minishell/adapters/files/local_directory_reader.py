"""
Local file system adapter for enumerating directories and capturing entry metadata.
"""

import logging
import os

from typing_extensions import override

from minishell.entities.directory_entry import DirectoryEntry
from minishell.exceptions import DirectoryUnreadableError, EntryMetadataUnavailableError
from minishell.ports.files.directory_reader_port import DirectoryReaderPort


def _reason(error: OSError) -> str:
    return error.strerror or str(error)


class LocalDirectoryReader(DirectoryReaderPort):
    """Local file system implementation of the directory reader port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Raises:
            DirectoryUnreadableError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise DirectoryUnreadableError(directory, "No such file or directory")

        if not os.path.isdir(directory):
            raise DirectoryUnreadableError(directory, "Not a directory")

    @override
    def list_names(self, directory: str) -> list[str]:
        self._validate_directory(directory)
        try:
            with os.scandir(directory) as it:
                names = [entry.name for entry in it]
        except OSError as e:
            raise DirectoryUnreadableError(directory, _reason(e))
        self._logger.debug(f"Enumerated {len(names)} entries in {directory}")
        return names

    @override
    def capture(self, directory: str, name: str) -> DirectoryEntry:
        path = os.path.join(directory, name)
        try:
            st = os.lstat(path)
        except OSError as e:
            self._logger.warning(f"Could not read metadata for {path}: {e}")
            raise EntryMetadataUnavailableError(name, _reason(e))
        return DirectoryEntry.from_stat(path, name, st)

    @override
    def capture_directory(self, path: str, display_name: str) -> DirectoryEntry:
        try:
            st = os.stat(path)
        except OSError as e:
            self._logger.warning(f"Could not read metadata for {path}: {e}")
            raise EntryMetadataUnavailableError(display_name, _reason(e))
        return DirectoryEntry.from_stat(path, display_name, st)
