"""
Custom exceptions for the shell and its listing engine.
"""


class BaseShellError(Exception):
    """Base exception class for shell errors."""

    pass


class DirectoryUnreadableError(BaseShellError):
    """Exception raised when a directory cannot be opened for enumeration."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot open directory '{path}': {reason}")


class EntryMetadataUnavailableError(BaseShellError):
    """Exception raised when the metadata of one directory entry cannot be read."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"cannot access '{name}': {reason}")


class InvalidTimestampError(BaseShellError):
    """Exception raised when a modification time has no local calendar representation."""

    def __init__(self, name: str, mtime: float):
        self.name = name
        self.mtime = mtime
        super().__init__(f"cannot format '{name}': invalid timestamp {mtime}")


class FileOperationError(BaseShellError):
    """Exception raised for copy, move, remove and mkdir failures."""

    pass


class CommandError(BaseShellError):
    """Exception raised when a builtin command fails; the message is the diagnostic."""

    pass


class ConfigurationError(BaseShellError):
    """Exception raised for configuration errors."""

    pass


class ShellExit(BaseShellError):
    """Raised by the exit builtin to end the shell loop."""

    def __init__(self, code: int = 0):
        self.code = code
        super().__init__(f"exit {code}")
