import grp
import logging
import pwd
from typing import Callable, Optional

from typing_extensions import override

from minishell.entities.identity_cache import IdentityCache, IdentityKind
from minishell.ports.identity.identity_resolver_port import IdentityResolverPort


class SystemIdentityResolver(IdentityResolverPort):
    """Resolve ids through the OS user and group databases, caching every answer.

    An id the database does not know is displayed as its decimal string.
    """

    def __init__(
        self, cache: IdentityCache, logger: Optional[logging.Logger] = None
    ) -> None:
        self._cache = cache
        self._logger = logger or logging.getLogger(__name__)

    @override
    def resolve_owner(self, uid: int) -> str:
        return self._resolve(IdentityKind.OWNER, uid, lambda i: pwd.getpwuid(i).pw_name)

    @override
    def resolve_group(self, gid: int) -> str:
        return self._resolve(IdentityKind.GROUP, gid, lambda i: grp.getgrgid(i).gr_name)

    def _resolve(
        self, kind: IdentityKind, ident: int, lookup: Callable[[int], str]
    ) -> str:
        cached = self._cache.get(kind, ident)
        if cached is not None:
            return cached
        try:
            name = lookup(ident) or str(ident)
        except (KeyError, OverflowError, OSError) as e:
            self._logger.debug(f"No {kind.value} name for id {ident}: {e}")
            name = str(ident)
        return self._cache.put(kind, ident, name)
