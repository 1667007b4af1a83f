from abc import ABC, abstractmethod


class IdentityResolverPort(ABC):
    """Port for mapping numeric owner and group ids to display names."""

    @abstractmethod
    def resolve_owner(self, uid: int) -> str:
        """Return the user name for ``uid``, or ``str(uid)`` when it cannot be resolved."""
        pass

    @abstractmethod
    def resolve_group(self, gid: int) -> str:
        """Return the group name for ``gid``, or ``str(gid)`` when it cannot be resolved."""
        pass
