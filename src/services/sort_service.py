"""
SortService: the bridge between the outer surfaces and the sorter.

Runs one sort or check invocation:
- validates the option combination against the strategy's capabilities
- builds a Sorter
- reads the file, checks or sorts it, and writes the result

The CLI works on files (``run``); the HTTP API works on lists of strings
(``sort_lines`` / ``check_lines``).
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO

from core.errors import HasUnexpectedEmptyLinesError, InvalidOptionsError
from core.options import SortOptions
from core.sortable_line import lines_from_texts
from core.strategy import PathFlavor
from infrastructure.line_io import (
    backup_file,
    format_lines,
    read_line_file,
    replace_file,
    write_lines,
)
from services.sorter import Sorter

logger = logging.getLogger(__name__)


class OutputMode(str, Enum):
    """Where the result of a run goes."""
    BACKUP = "backup"      # rewrite the file, keeping a .bak copy
    IN_PLACE = "in-place"  # rewrite the file without a backup
    STDOUT = "stdout"      # print the sorted lines, leave the file alone
    CHECK = "check"        # only verify the file


@dataclass(frozen=True, slots=True)
class SortOutcome:
    """
    Attributes:
        path:         The file that was processed.
        changed:      Whether the file on disk was rewritten.
        backup_path:  The backup copy, when one was made.
    """
    path: Path
    changed: bool = False
    backup_path: Optional[Path] = None


class SortService:
    """
    Facade that the CLI and the API layer call.
    """

    def __init__(self, stdout: Optional[TextIO] = None) -> None:
        self._stdout = stdout

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    @staticmethod
    def validate_options(options: SortOptions) -> None:
        """Reject options the chosen strategy does not support."""
        if options.locale is not None and not options.strategy.supports_locale:
            raise InvalidOptionsError(
                f"you cannot set a locale when sorting by {options.strategy.value}"
            )
        if options.path_flavor is PathFlavor.WINDOWS and not options.strategy.supports_path_flavor:
            raise InvalidOptionsError(
                f"you cannot pass the --windows flag when sorting {options.strategy.value}"
            )

    def build_sorter(self, options: SortOptions) -> Sorter:
        self.validate_options(options)
        return Sorter.from_options(options)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def run(
        self,
        file_path: str | Path,
        options: SortOptions,
        mode: OutputMode = OutputMode.BACKUP,
        comment_prefix: Optional[str] = None,
    ) -> SortOutcome:
        """
        Check or sort one file.

        Raises a ``CheckError`` when ``mode`` is ``CHECK`` and the file is
        not in order; any other ``SortError`` is an operational failure.
        """
        path = Path(file_path)
        sorter = self.build_sorter(options)
        line_file = read_line_file(path, comment_prefix)

        if mode is OutputMode.CHECK:
            if line_file.has_empty_lines:
                raise HasUnexpectedEmptyLinesError()
            sorter.check(line_file.lines)
            logger.debug("%s is sorted", path)
            return SortOutcome(path)

        sorted_lines = sorter.sort(line_file.lines)

        if mode is OutputMode.STDOUT:
            write_lines(
                sorted_lines,
                line_file.line_ending,
                self._stdout or sys.stdout,
                line_file.trailing_comment,
            )
            return SortOutcome(path)

        # A file with stray empty lines always changes: they are dropped.
        if not line_file.has_empty_lines and sorted_lines == line_file.lines:
            logger.debug("file is already sorted")
            return SortOutcome(path)

        backup_path = backup_file(path) if mode is OutputMode.BACKUP else None
        replace_file(
            path,
            format_lines(sorted_lines, line_file.line_ending, line_file.trailing_comment),
        )
        logger.info("Sorted %d lines in %s", len(sorted_lines), path)
        return SortOutcome(path, changed=True, backup_path=backup_path)

    # ------------------------------------------------------------------
    # In-memory lines
    # ------------------------------------------------------------------

    def sort_lines(self, texts: list[str], options: SortOptions) -> list[str]:
        """Sort raw strings; returns the sorted strings."""
        sorter = self.build_sorter(options)
        return [line.line for line in sorter.sort(lines_from_texts(texts))]

    def check_lines(self, texts: list[str], options: SortOptions) -> bool:
        """Verify raw strings; returns ``True`` or raises a ``CheckError``."""
        sorter = self.build_sorter(options)
        return sorter.check(lines_from_texts(texts))
