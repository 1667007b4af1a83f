"""minishell package: a small line-oriented shell whose ls builtin reproduces ls -l -a -F.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
