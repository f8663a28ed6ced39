"""Command-line interface handler for shwords."""

import sys
import json
import argparse
import shlex
from typing import Iterator, Optional

from rich.console import Console
from rich.cells import cell_len
from rich.markup import escape

from . import shlex_parser

err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: shwords [-h | --help] <command> [<args>]

Commands:
  split [LINE]             Split LINE (or each line of stdin) into words
      -f, --format FMT     Output format: json (default), or lines for one
                           shell-quoted word per line, inputs separated by a blank line
      -m, --max-length N   Reject input lines longer than N characters

  check [LINE]             Exit with status 1 if LINE (or any stdin line) fails to split
      -m, --max-length N   Reject input lines longer than N characters

  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    from . import __version__

    print(__version__)


def input_lines(line: Optional[str]) -> Iterator[str]:
    """Yield the line given on the command line, or every line of stdin."""
    if line is not None:
        yield line
        return
    for raw in sys.stdin:
        yield raw.rstrip("\r\n")


def check_length(line: str, max_length: Optional[int]) -> None:
    """Raise InputTooLong if the line is over the limit."""
    if max_length is not None and len(line) > max_length:
        raise shlex_parser.InputTooLong(len(line), max_length)


def caret_padding(line: str, column: int) -> str:
    """
    Build the text that lines a caret up under a column of the line.

    Tabs are copied so they expand the same way as in the echoed line;
    every other character becomes as many spaces as the cells it occupies.
    """
    return "".join(
        c if c == "\t" else " " * cell_len(c) for c in line[: column - 1]
    )


def report_error(line: str, e: shlex_parser.ShwordsException) -> None:
    """Print an error with the offending line and a caret under its column."""
    err_console.print(f"[red]✗ {escape(str(e))}[/red]")
    if isinstance(e, shlex_parser.ParseError):
        err_console.print(f"  {escape(line)}")
        err_console.print(f"  [dim]{caret_padding(line, e.column)}^[/dim]")


def cmd_split(args: argparse.Namespace) -> None:
    """Execute the split command."""
    failed = False
    first = True
    for line in input_lines(args.line):
        try:
            check_length(line, args.max_length)
            words = shlex_parser.split(line)
        except shlex_parser.ShwordsException as e:
            report_error(line, e)
            failed = True
            continue

        if args.format == "lines":
            if not first:
                print()
            for word in words:
                print(shlex.quote(word))
        else:
            print(json.dumps(words, ensure_ascii=False))
        first = False

    if failed:
        sys.exit(1)


def cmd_check(args: argparse.Namespace) -> None:
    """Execute the check command."""
    failed = False
    for line in input_lines(args.line):
        try:
            check_length(line, args.max_length)
            shlex_parser.split(line)
        except shlex_parser.ShwordsException as e:
            report_error(line, e)
            failed = True

    if failed:
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Shell word splitter", add_help=False)

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser("split", add_help=False)
    split_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for split"
    )
    split_parser.add_argument(
        "-f",
        "--format",
        choices=("json", "lines"),
        default="json",
        help="Output format",
    )
    split_parser.add_argument(
        "-m",
        "--max-length",
        type=int,
        dest="max_length",
        help="Maximum input line length",
    )
    split_parser.add_argument("line", nargs="?", help="Line to split")

    # Check command
    check_parser = subparsers.add_parser("check", add_help=False)
    check_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for check"
    )
    check_parser.add_argument(
        "-m",
        "--max-length",
        type=int,
        dest="max_length",
        help="Maximum input line length",
    )
    check_parser.add_argument("line", nargs="?", help="Line to check")

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    # Parse arguments
    if len(sys.argv) < 2:
        print_usage()
        return

    args = parser.parse_args()

    # Handle global help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    # Execute commands
    if args.command == "split":
        cmd_split(args)
    elif args.command == "check":
        cmd_check(args)
    else:
        print_usage()
