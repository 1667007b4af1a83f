from minishell.entities.directory_entry import FileType

# Indexed by a 3-bit read/write/execute pattern.
TRIADS = ("---", "--x", "-w-", "-wx", "r--", "r-x", "rw-", "rwx")


def format_permissions(file_type: FileType, mode: int) -> str:
    """Render a file type and mode as a 10-character string such as ``drwxr-xr-x``.

    Only the owner, group and other triads are rendered; setuid, setgid and
    sticky bits do not change the output.
    """
    return (
        file_type.char
        + TRIADS[(mode >> 6) & 7]
        + TRIADS[(mode >> 3) & 7]
        + TRIADS[mode & 7]
    )
