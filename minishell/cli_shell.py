import argparse
import sys
from typing import TextIO

from minishell.config.settings import settings
from minishell.container import container
from minishell.entities.command import Command
from minishell.exceptions import ShellExit
from minishell.utils.output import configure_logging, make_error_console, write_result


def run_line(line: str, out: TextIO | None = None) -> int:
    """Run one command line and return its status; ShellExit propagates."""
    handler = container.get_shell_commands()
    return write_result(handler.dispatch(Command(line)), out, make_error_console())


def repl(stdin: TextIO | None = None, out: TextIO | None = None) -> int:
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    handler = container.get_shell_commands()
    err = make_error_console()
    while True:
        out.write(settings.prompt)
        out.flush()
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            out.write("\n")
            continue
        if not line:
            # Ctrl+D
            out.write("\n")
            return 0
        try:
            write_result(handler.dispatch(Command(line)), out, err)
        except ShellExit as e:
            return e.code


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minishell",
        description="A small line-oriented shell with an ls -l -a -F builtin.",
    )
    parser.add_argument(
        "-c", "--command", default=None, help="Run one command line and exit"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: MINISHELL_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper() if args.log_level else settings.log_level)

    if args.command is not None:
        try:
            return run_line(args.command)
        except ShellExit as e:
            return e.code
    return repl()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
