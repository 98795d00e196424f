"""Typer entrypoint for the omegasort CLI."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from core.errors import CheckError, InvalidOptionsError, SortError
from core.options import SortOptions
from core.strategy import PathFlavor, Strategy
from infrastructure.logging_setup import configure_logging
from services.sort_service import OutputMode, SortService

logger = logging.getLogger(__name__)

EXIT_CHECK_FAILED = 1
EXIT_FAILURE = 2
EXIT_INVALID_ARGS = 101

LONG_HELP = """
There are a number of different sorting methods available.

## Text (`--sort text`)

This sorts each line of the file as text without any special parsing. The exact sorting is determined by the `--locale`, `--case-insensitive`, and `--reverse` flags.

## Numbered Text (`--sort numbered-text`)

This assumes that each line of the file starts with a numeric value, optionally followed by non-numeric text.

Lines should not have any leading space before the number. The number can either be an integer (including 0) or a simple float (no scientific notation).

The lines will be sorted numerically first. If two lines have the same number they will be sorted by text as above.

Lines without numbers always sort after lines with numbers.

## Datetime (`--sort datetime-text`)

This sorting method assumes that each line starts with a date or datetime, without any space in it. That means that a string with both a date *and* a time needs to be in a format like "2019-08-27T19:13:16".

Lines without a datetime always sort after lines with one.

## Path (`--sort path`)

Each line is treated as a path. Absolute paths come before relative. Paths are sorted by depth before sorting by the path content, so /z comes before /a/a.

If you pass the `--windows` flag, then paths with drive letters or UNC names are sorted based on that prefix first. Paths with drive letters or UNC names sort before paths without them.

## IP (`--sort ip`)

Each line is an IPv4 or IPv6 address (not a network). IPv4 addresses always sort before IPv6 addresses. Accepts only the `--reverse` and `--unique` flags.

## Network (`--sort network`)

Each line is an IPv4 or IPv6 network in CIDR notation. Networks with the same base address sort with the larger network first (so 1.1.1.0/24 comes before 1.1.1.0/28). IPv4 networks always sort before IPv6 networks.
"""

app = typer.Typer(
    help="Sort files in a variety of ways, or check that they are sorted.",
    add_completion=False,
    rich_markup_mode="markdown",
)


def _version_callback(value: bool) -> None:
    if value:
        from cli import __version__

        typer.echo(f"omegasort {__version__}")
        raise typer.Exit()


def _output_mode(in_place: bool, stdout: bool, check: bool) -> OutputMode:
    chosen = [
        mode
        for mode, flag in (
            (OutputMode.IN_PLACE, in_place),
            (OutputMode.STDOUT, stdout),
            (OutputMode.CHECK, check),
        )
        if flag
    ]
    if len(chosen) > 1:
        raise InvalidOptionsError("only one of --in-place, --stdout, and --check may be given")
    return chosen[0] if chosen else OutputMode.BACKUP


@app.command(epilog=LONG_HELP)
def omegasort(
    file: Path = typer.Argument(..., help="The file to sort.", exists=True, dir_okay=False),
    strategy: Strategy = typer.Option(..., "--sort", "-s", help="The type of sorting to use."),
    locale: Optional[str] = typer.Option(
        None,
        "--locale",
        "-l",
        metavar="CODE",
        help="The locale to use for sorting. If this is not specified the sorting is in codepoint order.",
    ),
    unique: bool = typer.Option(
        False,
        "--unique",
        "-u",
        help="Make the file contents unique, or check that they're unique when used with --check.",
    ),
    comment_prefix: Optional[str] = typer.Option(
        None,
        "--comment-prefix",
        metavar="PREFIX",
        help=(
            "A string that precedes comments. Comments starting with this string are preserved "
            "and come before the same line in the sorted output."
        ),
    ),
    case_insensitive: bool = typer.Option(
        False,
        "--case-insensitive",
        "-c",
        help=(
            "Sort case-insensitively. Many locales always do this, so with a locale you may get "
            "case-insensitive output regardless of this flag."
        ),
    ),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Sort in reverse order."),
    windows: bool = typer.Option(False, "--windows", help="Parse paths as Windows paths for path sort."),
    in_place: bool = typer.Option(
        False, "--in-place", "-i", help="Modify the file in place instead of making a backup."
    ),
    stdout: bool = typer.Option(
        False, "--stdout", help="Print the sorted output to stdout instead of making a new file."
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help=(
            "Check that the file is sorted instead of sorting it. If it is not sorted "
            "(or not unique if --unique is given) the exit status will be 1."
        ),
    ),
    debug: bool = typer.Option(False, "--debug", help="Print debugging info while running."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Sort FILE, or check that it is already sorted."""
    configure_logging(debug)

    options = SortOptions(
        strategy=strategy,
        locale=locale,
        case_insensitive=case_insensitive,
        reverse=reverse,
        unique=unique,
        path_flavor=PathFlavor.WINDOWS if windows else PathFlavor.UNIX,
    )
    try:
        mode = _output_mode(in_place, stdout, check)
        SortService.validate_options(options)
    except InvalidOptionsError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=EXIT_INVALID_ARGS)

    try:
        SortService().run(file, options, mode, comment_prefix)
    except CheckError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=EXIT_CHECK_FAILED)
    except (SortError, OSError, ValueError) as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=EXIT_FAILURE)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
