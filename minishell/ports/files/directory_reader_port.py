"""
Directory reader port interface defining the contract for capturing entry metadata.
"""

from abc import ABC, abstractmethod

from minishell.entities.directory_entry import DirectoryEntry


class DirectoryReaderPort(ABC):
    """Port interface for enumerating a directory and capturing entry snapshots."""

    @abstractmethod
    def list_names(self, directory: str) -> list[str]:
        """
        List the entry names of a directory, in enumeration order.

        The names ``.`` and ``..`` are never included.

        Args:
            directory: Path to the directory to enumerate

        Returns:
            List of base names

        Raises:
            DirectoryUnreadableError: If the directory cannot be opened
        """
        pass

    @abstractmethod
    def capture(self, directory: str, name: str) -> DirectoryEntry:
        """
        Capture the metadata of one entry without following symbolic links.

        Args:
            directory: Directory containing the entry
            name: Base name of the entry

        Returns:
            DirectoryEntry snapshot

        Raises:
            EntryMetadataUnavailableError: If the metadata cannot be read
        """
        pass

    @abstractmethod
    def capture_directory(self, path: str, display_name: str) -> DirectoryEntry:
        """
        Capture the metadata of a directory shown under a synthetic name (``.`` or ``..``).

        Args:
            path: Path of the directory
            display_name: Name to show for the entry

        Returns:
            DirectoryEntry snapshot

        Raises:
            EntryMetadataUnavailableError: If the metadata cannot be read
        """
        pass
