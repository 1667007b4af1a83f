"""Output helpers shared by the console entry points.

Listing rows and command output go to plain stdout; diagnostics go through a
rich console on stderr (red on a terminal, plain text otherwise).
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console

from minishell.entities.command import CommandResult

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def make_error_console() -> Console:
    return Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)


def write_result(
    result: CommandResult, out: TextIO | None = None, err: Console | None = None
) -> int:
    """Write a command's output and diagnostics; return its status."""
    out = out or sys.stdout
    if result.stdout:
        out.write(result.stdout)
        out.flush()
    if result.diagnostics:
        err = err or make_error_console()
        for line in result.diagnostics:
            err.print(line, style="red", markup=False, emoji=False)
    return result.status
