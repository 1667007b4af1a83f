"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from minishell.container import DependencyContainer
from minishell.entities.directory_entry import DirectoryEntry, FileType
from minishell.ports.identity.identity_resolver_port import IdentityResolverPort


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory holding ``a.txt`` (rw-r--r--, 5 bytes) and ``sub/`` (rwxr-xr-x).

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        test_file = os.path.join(temp_dir, "a.txt")
        with open(test_file, "w") as f:
            f.write("hello")
        os.chmod(test_file, 0o644)

        subdir = os.path.join(temp_dir, "sub")
        os.makedirs(subdir)
        os.chmod(subdir, 0o755)

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def identity_resolver():
    """
    Identity resolver answering fixed names, so rows do not depend on the host's databases.

    Returns:
        Mock IdentityResolverPort returning "alice" and "staff"
    """
    resolver = MagicMock(spec=IdentityResolverPort)
    resolver.resolve_owner.return_value = "alice"
    resolver.resolve_group.return_value = "staff"
    return resolver


@pytest.fixture
def make_entry():
    """Factory for DirectoryEntry snapshots with sensible defaults."""

    def _make(name: str, **overrides) -> DirectoryEntry:
        fields = {
            "path": os.path.join("/tmp/listing", name),
            "name": name,
            "file_type": FileType.REGULAR,
            "mode": 0o644,
            "nlink": 1,
            "uid": 1000,
            "gid": 1000,
            "size": 5,
            "mtime": 1700000000.0,
            "blocks": 8,
        }
        fields.update(overrides)
        return DirectoryEntry(**fields)

    return _make


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def in_temp_directory(temp_directory):
    """Run the test with temp_directory as the working directory."""
    previous = os.getcwd()
    os.chdir(temp_directory)
    yield temp_directory
    os.chdir(previous)
