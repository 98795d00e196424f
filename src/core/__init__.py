from core.strategy import Strategy, PathFlavor
from core.options import SortOptions
from core.sortable_line import Comment, SortableLine, lines_from_texts
from core.interfaces import Collator, IComparer, Ordering
from core.errors import (
    SortError,
    InvalidOptionsError,
    InvalidLocaleError,
    InvalidAddressError,
    InvalidNetworkError,
    LineEndingError,
    CheckError,
    HasUnexpectedEmptyLinesError,
    NotSortedError,
    NotUniqueError,
)

__all__ = [
    "Strategy",
    "PathFlavor",
    "SortOptions",
    "Comment",
    "SortableLine",
    "lines_from_texts",
    "Collator",
    "IComparer",
    "Ordering",
    "SortError",
    "InvalidOptionsError",
    "InvalidLocaleError",
    "InvalidAddressError",
    "InvalidNetworkError",
    "LineEndingError",
    "CheckError",
    "HasUnexpectedEmptyLinesError",
    "NotSortedError",
    "NotUniqueError",
]
