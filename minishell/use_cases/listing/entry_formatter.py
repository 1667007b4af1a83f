"""
Rendering of one listing row from a captured directory entry.
"""

from datetime import datetime

from minishell.entities.directory_entry import DirectoryEntry
from minishell.entities.listing import ListingRequest
from minishell.exceptions import InvalidTimestampError
from minishell.ports.identity.identity_resolver_port import IdentityResolverPort
from minishell.use_cases.listing.permission_formatter import format_permissions

# Fixed English abbreviations so output does not depend on the locale.
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def classify_suffix(entry: DirectoryEntry) -> str:
    if entry.is_dir:
        return "/"
    if entry.is_symlink:
        return "@"
    if entry.is_executable:
        return "*"
    return ""


def format_mtime(entry: DirectoryEntry) -> str:
    """
    Format the modification time as ``Mon dd HH:MM`` in local time, the day space-padded.

    Raises:
        InvalidTimestampError: If the timestamp is outside the local calendar's range
    """
    try:
        moment = datetime.fromtimestamp(entry.mtime)
    except (OverflowError, OSError, ValueError):
        raise InvalidTimestampError(entry.name, entry.mtime)
    return f"{MONTHS[moment.month - 1]} {moment.day:>2} {moment:%H:%M}"


class EntryFormatter:
    """Composes a bare name or a long-format row for one entry."""

    def __init__(self, identity_resolver: IdentityResolverPort):
        self._identity_resolver = identity_resolver

    def format(self, entry: DirectoryEntry, request: ListingRequest) -> str:
        """
        Render one entry according to the request's flags.

        Args:
            entry: Captured entry
            request: Listing flags; ``classify`` only ever changes the name column

        Returns:
            The display string

        Raises:
            InvalidTimestampError: In long format, if the modification time cannot be shown
        """
        name = entry.name
        if request.classify:
            name += classify_suffix(entry)
        if not request.long_format:
            return name

        perms = format_permissions(entry.file_type, entry.mode)
        owner = self._identity_resolver.resolve_owner(entry.uid)
        group = self._identity_resolver.resolve_group(entry.gid)
        mtime = format_mtime(entry)
        return f"{perms} {entry.nlink:>3} {owner} {group} {entry.size:>6} {mtime} {name}"
