"""
Builtin commands of the shell and their dispatch table.
"""

import logging
import os
from typing import Callable, Optional

from minishell.entities.command import Command, CommandResult
from minishell.entities.listing import ListingRequest, ListingResult
from minishell.exceptions import (
    CommandError,
    DirectoryUnreadableError,
    FileOperationError,
    ShellExit,
)
from minishell.ports.files.file_operations_port import FileOperationsPort
from minishell.use_cases.listing.list_directory import ListDirectoryUseCase

COMMAND_NOT_FOUND = 127


def _is_flag(arg: str) -> bool:
    # a lone '-' is an operand
    return arg.startswith("-") and arg != "-"


def render_listing(result: ListingResult) -> CommandResult:
    """Turn a listing into command output; any skipped entry makes the status 1."""
    stdout = "".join(line + "\n" for line in result.lines)
    errors = [f"ls: {d}" for d in result.diagnostics]
    return CommandResult(1 if errors else 0, stdout, errors)


class ShellCommandsHandler:
    """Dispatches a parsed command line to one of the builtins.

    Every builtin returns a CommandResult; ``exit`` raises ShellExit.
    """

    def __init__(
        self,
        list_directory: ListDirectoryUseCase,
        file_operations: FileOperationsPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._list_directory = list_directory
        self._files = file_operations
        self._logger = logger or logging.getLogger(__name__)
        self._builtins: dict[str, Callable[[Command], CommandResult]] = {
            "cd": self._cd,
            "exit": self._exit,
            "echo": self._echo,
            "pwd": self._pwd,
            "cat": self._cat,
            "ls": self._ls,
            "rm": self._rm,
            "cp": self._cp,
            "mv": self._mv,
            "mkdir": self._mkdir,
        }

    def available_commands(self) -> list[str]:
        return sorted(self._builtins)

    def dispatch(self, command: Command) -> CommandResult:
        if command.is_empty():
            return CommandResult()
        handler = self._builtins.get(command.name)
        if handler is None:
            return CommandResult(
                COMMAND_NOT_FOUND, stderr=[f"{command.name}: command not found"]
            )
        self._logger.debug(f"Dispatching {command!r}")
        try:
            return handler(command)
        except CommandError as e:
            return CommandResult(1, stderr=[str(e)])

    def _cd(self, command: Command) -> CommandResult:
        target = command.args[0] if command.args else "/"
        try:
            os.chdir(target)
        except OSError as e:
            raise CommandError(f"cd: {target}: {e.strerror or e}")
        return CommandResult()

    def _exit(self, command: Command) -> CommandResult:
        code = 0
        if command.args:
            try:
                code = int(command.args[0])
            except ValueError:
                raise CommandError(f"exit: {command.args[0]}: numeric argument required")
        raise ShellExit(code)

    def _echo(self, command: Command) -> CommandResult:
        return CommandResult(stdout=" ".join(command.args) + "\n")

    def _pwd(self, command: Command) -> CommandResult:
        return CommandResult(stdout=os.getcwd() + "\n")

    def _cat(self, command: Command) -> CommandResult:
        if not command.args:
            raise CommandError("cat: No file specified")
        chunks: list[str] = []
        errors: list[str] = []
        for filename in command.args:
            try:
                chunks.append(self._files.read_text(filename))
            except FileOperationError as e:
                errors.append(f"cat: {filename}: {e}")
        return CommandResult(1 if errors else 0, "".join(chunks), errors)

    def _ls(self, command: Command) -> CommandResult:
        flags = [arg for arg in command.expand_flags() if _is_flag(arg)]
        operands = [arg for arg in command.args if not _is_flag(arg)]
        try:
            request = ListingRequest.from_flags(
                flags, operands[0] if operands else os.curdir
            )
        except ValueError as e:
            return CommandResult(2, stderr=[f"ls: {e}"])

        try:
            result = self._list_directory.execute(request)
        except DirectoryUnreadableError as e:
            return CommandResult(2, stderr=[f"ls: {e}"])
        return render_listing(result)

    def _rm(self, command: Command) -> CommandResult:
        recursive = False
        paths: list[str] = []
        for arg in command.args:
            if arg == "-r":
                recursive = True
            else:
                paths.append(arg)
        if not paths:
            raise CommandError("rm: missing operand")

        errors: list[str] = []
        for path in paths:
            try:
                self._files.remove(path, recursive)
            except FileOperationError as e:
                errors.append(f"rm: {path}: {e}")
        return CommandResult(1 if errors else 0, stderr=errors)

    def _cp(self, command: Command) -> CommandResult:
        if len(command.args) != 2:
            raise CommandError("cp: wrong number of arguments")
        source, destination = command.args
        try:
            self._files.copy(source, destination)
        except FileOperationError as e:
            raise CommandError(f"cp: {source}: {e}")
        return CommandResult()

    def _mv(self, command: Command) -> CommandResult:
        if len(command.args) != 2:
            raise CommandError("mv: wrong number of arguments")
        source, destination = command.args
        try:
            self._files.move(source, destination)
        except FileOperationError as e:
            raise CommandError(f"mv: {source}: {e}")
        return CommandResult()

    def _mkdir(self, command: Command) -> CommandResult:
        if not command.args:
            raise CommandError("mkdir: missing operand")
        errors: list[str] = []
        for name in command.args:
            try:
                self._files.make_directory(name)
            except FileOperationError as e:
                errors.append(f"mkdir: {name}: {e}")
        return CommandResult(1 if errors else 0, stderr=errors)
