import argparse

from minishell.config.settings import settings
from minishell.container import container
from minishell.entities.command import CommandResult
from minishell.entities.listing import ListingRequest
from minishell.exceptions import DirectoryUnreadableError
from minishell.use_cases.shell.shell_commands import render_listing
from minishell.utils.output import configure_logging, write_result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minishell-ls",
        description="List a directory with ls -l -a -F semantics.",
    )
    parser.add_argument(
        "-a", dest="show_hidden", action="store_true", help="Include dot entries, . and .."
    )
    parser.add_argument(
        "-l", dest="long_format", action="store_true", help="Long listing format"
    )
    parser.add_argument(
        "-F", dest="classify", action="store_true", help="Append a type indicator to names"
    )
    parser.add_argument("directory", nargs="?", default=".", help="Directory to list")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)

    request = ListingRequest(
        directory=args.directory,
        show_hidden=args.show_hidden,
        long_format=args.long_format,
        classify=args.classify,
    )
    try:
        result = container.get_list_directory_use_case().execute(request)
    except DirectoryUnreadableError as e:
        return write_result(CommandResult(2, stderr=[f"ls: {e}"]))

    return write_result(render_listing(result))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
