"""
Local file system adapter for the single-file operations used by shell builtins.
"""

import logging
import os
import shutil

from typing_extensions import override

from minishell.exceptions import FileOperationError
from minishell.ports.files.file_operations_port import FileOperationsPort


class LocalFileOperations(FileOperationsPort):
    """Thin pass-through to OS file system calls."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _resolve_destination(self, source: str, destination: str) -> str:
        """
        Append the source file name when the destination is an existing directory.

        Raises:
            FileOperationError: If the source has no file name component
        """
        if not os.path.isdir(destination):
            return destination
        name = os.path.basename(os.path.normpath(source))
        if name in ("", ".", ".."):
            raise FileOperationError("Invalid file name")
        return os.path.join(destination, name)

    @override
    def read_text(self, path: str) -> str:
        try:
            with open(path, encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileOperationError(getattr(e, "strerror", None) or str(e))

    @override
    def remove(self, path: str, recursive: bool = False) -> None:
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                if not recursive:
                    raise FileOperationError("is a directory")
                for name in os.listdir(path):
                    self.remove(os.path.join(path, name), recursive)
                os.rmdir(path)
            else:
                os.remove(path)
        except OSError as e:
            raise FileOperationError(e.strerror or str(e))
        self._logger.info(f"Removed {path}")

    @override
    def copy(self, source: str, destination: str) -> str:
        if os.path.isdir(source):
            raise FileOperationError(f"'{source}' is a directory")
        target = self._resolve_destination(source, destination)
        try:
            shutil.copy(source, target)
        except OSError as e:
            raise FileOperationError(e.strerror or str(e))
        self._logger.info(f"Copied {source} to {target}")
        return target

    @override
    def move(self, source: str, destination: str) -> str:
        target = self._resolve_destination(source, destination)
        try:
            os.rename(source, target)
        except OSError as e:
            raise FileOperationError(e.strerror or str(e))
        self._logger.info(f"Moved {source} to {target}")
        return target

    @override
    def make_directory(self, path: str) -> None:
        try:
            os.mkdir(path)
        except OSError as e:
            raise FileOperationError(e.strerror or str(e))
        self._logger.info(f"Created directory {path}")
