"""
File operations port interface used by the shell builtins.
"""

from abc import ABC, abstractmethod


class FileOperationsPort(ABC):
    """Port interface for single-file operations."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a whole file as text.

        Raises:
            FileOperationError: If the file cannot be read
        """
        pass

    @abstractmethod
    def remove(self, path: str, recursive: bool = False) -> None:
        """
        Remove a file, or a directory tree when ``recursive`` is set.

        Raises:
            FileOperationError: If the path is a directory and ``recursive`` is
                not set, or if removal fails
        """
        pass

    @abstractmethod
    def copy(self, source: str, destination: str) -> str:
        """
        Copy a file; an existing directory destination receives the source name.

        Returns:
            The resolved destination path

        Raises:
            FileOperationError: If the source is a directory or copying fails
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> str:
        """
        Rename a file or directory; an existing directory destination receives the source name.

        Returns:
            The resolved destination path

        Raises:
            FileOperationError: If renaming fails
        """
        pass

    @abstractmethod
    def make_directory(self, path: str) -> None:
        """
        Create one directory.

        Raises:
            FileOperationError: If the directory cannot be created
        """
        pass
