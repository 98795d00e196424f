"""
Plain text ordering, plus the text fallback every text-based comparer uses.

The fallback is, in order of preference:
  1. the locale collator, if one was configured (it already encodes case
     handling);
  2. lower-cased codepoint order when case-insensitive;
  3. exact codepoint order.
"""
from __future__ import annotations

import logging
from typing import Optional

from core.interfaces import Collator, IComparer, Ordering

logger = logging.getLogger(__name__)


def compare_text(
    collator: Optional[Collator],
    case_insensitive: bool,
    str1: str,
    str2: str,
) -> Ordering:
    if collator is not None:
        return Ordering.from_cmp(collator.compare(str1, str2))
    if case_insensitive:
        return Ordering.of(str1.lower(), str2.lower())
    return Ordering.of(str1, str2)


class TextBasedComparer(IComparer):
    """Base for comparers that fall back to text ordering."""
    __slots__ = ("_collator", "_case_insensitive")

    def __init__(self, collator: Optional[Collator] = None, case_insensitive: bool = False) -> None:
        self._collator = collator
        self._case_insensitive = case_insensitive

    def _compare_text(self, str1: str, str2: str) -> Ordering:
        return compare_text(self._collator, self._case_insensitive, str1, str2)


class TextComparer(TextBasedComparer):
    """Orders whole lines as text."""
    __slots__ = ()

    def compare(self, str1: str, str2: str) -> Ordering:
        return self._compare_text(str1, str2)
