"""
Computation of the ``total`` header line of a long listing.
"""

import logging
import math
import os
from typing import Iterable, Optional

from minishell.entities.directory_entry import DirectoryEntry
from minishell.exceptions import DirectoryUnreadableError, EntryMetadataUnavailableError
from minishell.ports.files.directory_reader_port import DirectoryReaderPort

# st_blocks unit
PHYSICAL_UNIT = 512
# unit of the reported total
REPORT_UNIT = 1024


def reported_blocks(entry: DirectoryEntry) -> float:
    """Convert an entry's 512-byte allocation count into 1024-byte units."""
    return entry.blocks * PHYSICAL_UNIT / REPORT_UNIT


class BlockAccountant:
    """Sums the allocation of a directory's visible contents in 1024-byte units."""

    def __init__(
        self,
        directory_reader: DirectoryReaderPort,
        strict: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the accountant.

        Args:
            directory_reader: Reader used when the accountant scans a directory itself
            strict: Propagate per-entry metadata failures instead of skipping the entry
            logger: Logger instance to use for logging
        """
        self._directory_reader = directory_reader
        self._strict = strict
        self._logger = logger or logging.getLogger(__name__)

    def total_for_entries(
        self,
        entries: Iterable[DirectoryEntry],
        synthesized: Iterable[DirectoryEntry] = (),
    ) -> int:
        """
        Total an already captured snapshot.

        Args:
            entries: Visible entries of the listing
            synthesized: The ``.`` and ``..`` entries, when hidden entries are shown

        Returns:
            The accumulated allocation rounded up to a whole 1024-byte unit
        """
        total = 0.0
        for entry in entries:
            total += reported_blocks(entry)
        for entry in synthesized:
            total += reported_blocks(entry)
        return math.ceil(total)

    def total_blocks(self, directory: str, include_hidden: bool) -> int:
        """
        Scan a directory and total the allocation of the entries a listing would show.

        Args:
            directory: Directory to account for
            include_hidden: Count dot entries, the directory itself and its parent

        Returns:
            Non-negative total in 1024-byte units

        Raises:
            DirectoryUnreadableError: If the directory or its own metadata cannot be read
            EntryMetadataUnavailableError: If an entry cannot be read and the accountant is strict
        """
        entries: list[DirectoryEntry] = []
        for name in self._directory_reader.list_names(directory):
            if name.startswith(".") and not include_hidden:
                continue
            try:
                entries.append(self._directory_reader.capture(directory, name))
            except EntryMetadataUnavailableError as e:
                if self._strict:
                    raise
                self._logger.warning(f"Skipping {name} in block total: {e.reason}")

        synthesized: list[DirectoryEntry] = []
        if include_hidden:
            try:
                synthesized.append(self._directory_reader.capture_directory(directory, "."))
            except EntryMetadataUnavailableError as e:
                raise DirectoryUnreadableError(directory, e.reason)
            try:
                synthesized.append(
                    self._directory_reader.capture_directory(
                        os.path.join(directory, ".."), ".."
                    )
                )
            except EntryMetadataUnavailableError as e:
                self._logger.warning(f"Parent of {directory} not counted: {e.reason}")

        return self.total_for_entries(entries, synthesized)
