"""
Use case for listing a directory the way ``ls`` does with -l, -a and -F.
"""

import logging
import os
from typing import Optional

from minishell.entities.directory_entry import DirectoryEntry
from minishell.entities.listing import ListingRequest, ListingResult
from minishell.exceptions import (
    DirectoryUnreadableError,
    EntryMetadataUnavailableError,
    InvalidTimestampError,
)
from minishell.ports.files.directory_reader_port import DirectoryReaderPort
from minishell.use_cases.listing.block_accountant import BlockAccountant
from minishell.use_cases.listing.entry_formatter import EntryFormatter
from minishell.use_cases.listing.entry_sorter import sort_entries


class ListDirectoryUseCase:
    """Enumerates, filters, sorts, totals and formats one directory listing."""

    def __init__(
        self,
        directory_reader: DirectoryReaderPort,
        block_accountant: BlockAccountant,
        entry_formatter: EntryFormatter,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            directory_reader: Source of names and entry snapshots
            block_accountant: Computes the ``total`` header
            entry_formatter: Renders each row
            logger: Logger instance to use for logging
        """
        self._directory_reader = directory_reader
        self._block_accountant = block_accountant
        self._entry_formatter = entry_formatter
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, request: ListingRequest) -> ListingResult:
        """
        List a directory.

        Entries whose metadata cannot be read, and rows whose timestamp cannot be
        formatted, are left out and reported in ``diagnostics``.

        Args:
            request: Target directory and display flags

        Returns:
            ListingResult with the rendered lines and per-entry diagnostics

        Raises:
            DirectoryUnreadableError: If the directory, or its own metadata, cannot be read
        """
        directory = request.directory
        self._logger.info(f"Listing directory: {directory}")

        names = self._directory_reader.list_names(directory)
        if not request.show_hidden:
            names = [name for name in names if not name.startswith(".")]

        diagnostics: list[str] = []
        entries: list[DirectoryEntry] = []
        for name in names:
            try:
                entries.append(self._directory_reader.capture(directory, name))
            except EntryMetadataUnavailableError as e:
                diagnostics.append(str(e))
        entries = sort_entries(entries)

        synthesized = self._synthesize(directory, diagnostics) if request.show_hidden else []

        lines: list[str] = []
        if request.long_format:
            total = self._block_accountant.total_for_entries(entries, synthesized)
            lines.append(f"total {total}")

        for entry in synthesized + entries:
            try:
                lines.append(self._entry_formatter.format(entry, request))
            except InvalidTimestampError as e:
                self._logger.warning(str(e))
                diagnostics.append(str(e))

        self._logger.info(
            f"Listed {len(entries)} entries with {len(diagnostics)} problems"
        )
        return ListingResult(path=directory, lines=lines, diagnostics=diagnostics)

    def _synthesize(self, directory: str, diagnostics: list[str]) -> list[DirectoryEntry]:
        """Capture ``.`` and ``..``; only a failure on the directory itself is fatal."""
        try:
            dot = self._directory_reader.capture_directory(directory, ".")
        except EntryMetadataUnavailableError as e:
            self._logger.error(f"Cannot read {directory} itself: {e.reason}")
            raise DirectoryUnreadableError(directory, e.reason)

        try:
            dotdot = self._directory_reader.capture_directory(
                os.path.join(directory, ".."), ".."
            )
        except EntryMetadataUnavailableError as e:
            diagnostics.append(str(e))
            return [dot]
        return [dot, dotdot]
