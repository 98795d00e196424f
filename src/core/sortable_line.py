"""
SortableLine: the unit the sorter orders.

Each non-empty, non-comment line of a file becomes one SortableLine.  Any
comment block directly above the line travels with it, so comments stay
attached to the line they describe after sorting.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class Comment:
    """
    A block of consecutive comment lines.

    Attributes:
        lines:                      Raw comment lines, in file order.
        is_preceded_by_empty_line:  Whether an empty line came right before
                                    the block.  It is written back before the
                                    block unless the block ends up first in
                                    the output.
    """
    lines: tuple[str, ...] = ()
    is_preceded_by_empty_line: bool = False


@dataclass(frozen=True, slots=True)
class SortableLine:
    """
    Immutable representation of one sortable line.

    Attributes:
        line_number:  1-based position in the source file.  Only used for
                      error reporting, never for ordering.
        line:         The line content, without its line terminator.
        comment:      Comment block attached to this line, if any.
    """
    line_number: int
    line: str
    comment: Optional[Comment] = field(default=None)


def lines_from_texts(texts: list[str]) -> list[SortableLine]:
    """Number raw strings 1-based, in the order given."""
    return [SortableLine(i + 1, text) for i, text in enumerate(texts)]
