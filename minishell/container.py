"""
Dependency injection container for managing shell dependencies.
"""

import logging

from minishell.adapters.files.local_directory_reader import LocalDirectoryReader
from minishell.adapters.files.local_file_operations import LocalFileOperations
from minishell.adapters.identity.system_identity_resolver import SystemIdentityResolver
from minishell.entities.identity_cache import IdentityCache
from minishell.ports.files.directory_reader_port import DirectoryReaderPort
from minishell.ports.files.file_operations_port import FileOperationsPort
from minishell.ports.identity.identity_resolver_port import IdentityResolverPort
from minishell.use_cases.listing.block_accountant import BlockAccountant
from minishell.use_cases.listing.entry_formatter import EntryFormatter
from minishell.use_cases.listing.list_directory import ListDirectoryUseCase
from minishell.use_cases.shell.shell_commands import ShellCommandsHandler


class DependencyContainer:
    """
    Container for managing shell dependencies using dependency injection.

    The identity cache it hands out is the single process-wide instance.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_identity_cache(self) -> IdentityCache:
        if "identity_cache" not in self._instances:
            self._instances["identity_cache"] = IdentityCache()
        return self._instances["identity_cache"]

    def get_identity_resolver(self) -> IdentityResolverPort:
        """
        Get identity resolver instance, bound to the shared identity cache.

        Returns:
            IdentityResolverPort implementation
        """
        if "identity_resolver" not in self._instances:
            self._instances["identity_resolver"] = SystemIdentityResolver(
                self.get_identity_cache(), self._logger
            )
        return self._instances["identity_resolver"]

    def get_directory_reader(self) -> DirectoryReaderPort:
        """
        Get directory reader adapter instance.

        Returns:
            DirectoryReaderPort implementation
        """
        if "directory_reader" not in self._instances:
            self._instances["directory_reader"] = LocalDirectoryReader(self._logger)
        return self._instances["directory_reader"]

    def get_file_operations(self) -> FileOperationsPort:
        """
        Get file operations adapter instance.

        Returns:
            FileOperationsPort implementation
        """
        if "file_operations" not in self._instances:
            self._instances["file_operations"] = LocalFileOperations(self._logger)
        return self._instances["file_operations"]

    def get_block_accountant(self) -> BlockAccountant:
        if "block_accountant" not in self._instances:
            self._instances["block_accountant"] = BlockAccountant(
                self.get_directory_reader(),
                logger=self._logger,
            )
        return self._instances["block_accountant"]

    def get_entry_formatter(self) -> EntryFormatter:
        if "entry_formatter" not in self._instances:
            self._instances["entry_formatter"] = EntryFormatter(
                self.get_identity_resolver()
            )
        return self._instances["entry_formatter"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_directory_reader(),
                self.get_block_accountant(),
                self.get_entry_formatter(),
                self._logger,
            )
        return self._instances["list_directory_use_case"]

    def get_shell_commands(self) -> ShellCommandsHandler:
        """
        Get the builtin command dispatcher with injected use cases.

        Returns:
            Configured ShellCommandsHandler
        """
        if "shell_commands" not in self._instances:
            self._instances["shell_commands"] = ShellCommandsHandler(
                self.get_list_directory_use_case(),
                self.get_file_operations(),
                self._logger,
            )
        return self._instances["shell_commands"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        cache = self._instances.get("identity_cache")
        if cache is not None:
            cache.clear()
        self._instances.clear()


# Global container instance
container = DependencyContainer()
