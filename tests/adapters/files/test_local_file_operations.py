"""
Tests for the LocalFileOperations adapter.
"""

import os
import stat

import pytest

from minishell.adapters.files.local_file_operations import LocalFileOperations
from minishell.exceptions import FileOperationError


class TestLocalFileOperations:
    """Test cases for the LocalFileOperations adapter."""

    def test_read_text(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        assert ops.read_text(os.path.join(temp_directory, "a.txt")) == "hello"

    def test_read_text_missing(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        with pytest.raises(FileOperationError, match="No such file or directory"):
            ops.read_text(os.path.join(temp_directory, "missing.txt"))

    def test_copy_to_path(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        target = os.path.join(temp_directory, "b.txt")

        assert ops.copy(os.path.join(temp_directory, "a.txt"), target) == target

        with open(target) as f:
            assert f.read() == "hello"
        assert stat.S_IMODE(os.stat(target).st_mode) == 0o644

    def test_copy_into_directory(self, temp_directory, mock_logger):
        """An existing directory destination receives the source file name."""
        ops = LocalFileOperations(mock_logger)
        source = os.path.join(temp_directory, "a.txt")
        subdir = os.path.join(temp_directory, "sub")

        target = ops.copy(source, subdir)

        assert target == os.path.join(subdir, "a.txt")
        assert os.path.isfile(target)
        assert os.path.isfile(source)

    def test_copy_directory_source(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        subdir = os.path.join(temp_directory, "sub")
        with pytest.raises(FileOperationError, match="is a directory"):
            ops.copy(subdir, os.path.join(temp_directory, "other"))

    def test_move_into_directory(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        source = os.path.join(temp_directory, "a.txt")
        subdir = os.path.join(temp_directory, "sub")

        target = ops.move(source, subdir)

        assert target == os.path.join(subdir, "a.txt")
        assert os.path.isfile(target)
        assert not os.path.exists(source)

    def test_move_missing_source(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        with pytest.raises(FileOperationError):
            ops.move(os.path.join(temp_directory, "nope"), os.path.join(temp_directory, "x"))

    def test_remove_file(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        path = os.path.join(temp_directory, "a.txt")
        ops.remove(path)
        assert not os.path.exists(path)

    def test_remove_directory_requires_recursive(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        subdir = os.path.join(temp_directory, "sub")
        with pytest.raises(FileOperationError, match="is a directory"):
            ops.remove(subdir)
        assert os.path.isdir(subdir)

    def test_remove_recursive(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        subdir = os.path.join(temp_directory, "sub")
        os.makedirs(os.path.join(subdir, "deeper"))
        with open(os.path.join(subdir, "deeper", "f"), "w") as f:
            f.write("x")

        ops.remove(subdir, recursive=True)

        assert not os.path.exists(subdir)

    def test_make_directory(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        path = os.path.join(temp_directory, "new")
        ops.make_directory(path)
        assert os.path.isdir(path)

    def test_make_directory_exists(self, temp_directory, mock_logger):
        ops = LocalFileOperations(mock_logger)
        with pytest.raises(FileOperationError, match="File exists"):
            ops.make_directory(os.path.join(temp_directory, "sub"))
