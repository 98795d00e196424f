"""
Line file I/O: read a file into SortableLines, write them back.

This is a functional module.  SortService delegates here for the actual
file <-> lines conversion.

Read flow:
    file → bytes (gunzip *.gz) → detect line ending → split → for each line:
        empty?        → skipped, remembered for the next line
        comment?      → collected into the pending Comment block
        anything else → SortableLine(number, text, pending comment)

Write flow:
    for each SortableLine:
        comment block (preceded by an empty line if it was) → line
    → atomic replace of the target, or any text stream (stdout)
"""
from __future__ import annotations

import contextlib
import gzip
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from core.errors import LineEndingError
from core.sortable_line import Comment, SortableLine

logger = logging.getLogger(__name__)

FIRST_CHUNK_SIZE = 2048

# Checked in this order, so CRLF wins over a bare LF inside it.
LINE_ENDINGS = ("\r\n", "\n", "\r")


@dataclass(slots=True)
class LineFile:
    """
    The sortable content of one file.

    Attributes:
        path:              Where the lines were read from.
        lines:             Sortable lines in file order.
        has_empty_lines:   Whether some line was preceded by an empty line
                           that does not belong to a comment block.  Such a
                           file cannot be reproduced exactly after sorting.
        line_ending:       Line terminator detected in the file.
        trailing_comment:  Comment block at the end of the file with no line
                           after it.
    """
    path: Path
    lines: list[SortableLine] = field(default_factory=list)
    has_empty_lines: bool = False
    line_ending: str = "\n"
    trailing_comment: Optional[Comment] = None


# ------------------------------------------------------------------
# File helpers (plain text or gzip)
# ------------------------------------------------------------------

def _is_gz(path: Path) -> bool:
    return path.suffix == ".gz"


def _read_bytes(path: Path) -> bytes:
    data = path.read_bytes()
    if _is_gz(path):
        return gzip.decompress(data)
    return data


def _encode(path: Path, content: str) -> bytes:
    data = content.encode("utf-8")
    if _is_gz(path):
        return gzip.compress(data)
    return data


# ------------------------------------------------------------------
# Parsing
# ------------------------------------------------------------------

def determine_line_ending(data: bytes) -> str:
    """Return the first known line ending found in the head of *data*."""
    head = data[:FIRST_CHUNK_SIZE]
    for line_ending in LINE_ENDINGS:
        if line_ending.encode("ascii") in head:
            return line_ending
    raise LineEndingError(
        f"could not determine line ending from first {FIRST_CHUNK_SIZE} bytes of file"
    )


def lines_from_text(
    text: str,
    line_ending: str,
    comment_prefix: Optional[str] = None,
) -> tuple[list[SortableLine], bool, Optional[Comment]]:
    """
    Split *text* into sortable lines.

    Returns ``(lines, has_empty_lines, trailing_comment)``.
    """
    raw_lines = text.split(line_ending)
    if raw_lines and raw_lines[-1] == "":
        raw_lines.pop()

    lines: list[SortableLine] = []
    comment_lines: list[str] = []
    comment_preceded_by_empty = False
    last_line_was_empty = False
    has_empty_lines = False

    for i, raw in enumerate(raw_lines):
        if not raw:
            last_line_was_empty = True
            continue

        if comment_prefix and raw.strip().startswith(comment_prefix):
            if not comment_lines:
                comment_preceded_by_empty = last_line_was_empty
                last_line_was_empty = False
            comment_lines.append(raw)
            continue

        # The last line was empty and this line is not a comment.
        if last_line_was_empty:
            has_empty_lines = True

        comment = (
            Comment(tuple(comment_lines), comment_preceded_by_empty)
            if comment_lines
            else None
        )
        lines.append(SortableLine(i + 1, raw, comment))
        last_line_was_empty = False
        comment_lines = []

    trailing = (
        Comment(tuple(comment_lines), comment_preceded_by_empty)
        if comment_lines
        else None
    )
    return lines, has_empty_lines, trailing


def read_line_file(
    file_path: str | Path,
    comment_prefix: Optional[str] = None,
) -> LineFile:
    """Read *file_path* into a ``LineFile``."""
    path = Path(file_path)
    data = _read_bytes(path)
    line_ending = determine_line_ending(data)
    lines, has_empty_lines, trailing = lines_from_text(
        data.decode("utf-8"), line_ending, comment_prefix,
    )
    logger.debug(
        "Read %d lines from %s (line ending %r, empty lines: %s)",
        len(lines), path, line_ending, has_empty_lines,
    )
    return LineFile(
        path=path,
        lines=lines,
        has_empty_lines=has_empty_lines,
        line_ending=line_ending,
        trailing_comment=trailing,
    )


# ------------------------------------------------------------------
# Writing
# ------------------------------------------------------------------

def _format_comment(comment: Comment, line_ending: str, is_first: bool) -> str:
    out = []
    # A comment that ends up first in the file loses its leading empty line.
    if comment.is_preceded_by_empty_line and not is_first:
        out.append(line_ending)
    for line in comment.lines:
        out.append(line + line_ending)
    return "".join(out)


def format_lines(
    lines: list[SortableLine],
    line_ending: str,
    trailing_comment: Optional[Comment] = None,
) -> str:
    """Render lines, with their comment blocks, back into file content."""
    out = []
    for i, line in enumerate(lines):
        if line.comment is not None:
            out.append(_format_comment(line.comment, line_ending, i == 0))
        out.append(line.line + line_ending)
    if trailing_comment is not None:
        out.append(_format_comment(trailing_comment, line_ending, not lines))
    return "".join(out)


def write_lines(
    lines: list[SortableLine],
    line_ending: str,
    out: TextIO,
    trailing_comment: Optional[Comment] = None,
) -> None:
    out.write(format_lines(lines, line_ending, trailing_comment))


def backup_file(file_path: str | Path) -> Path:
    """Copy *file_path* to ``<name>.bak`` next to it and return the backup path."""
    path = Path(file_path)
    backup = path.with_name(path.name + ".bak")
    shutil.copy(path, backup)
    logger.debug("Backed up %s to %s", path, backup)
    return backup


def replace_file(file_path: str | Path, content: str) -> None:
    """
    Atomically replace the content of *file_path*.

    The new content goes to a temporary file in the same directory (so the
    final rename never crosses filesystems), which then replaces the target.
    """
    path = Path(file_path)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(_encode(path, content))
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise
    logger.debug("Replaced %s", path)
