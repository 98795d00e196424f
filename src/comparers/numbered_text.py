"""
Ordering for lines that start with a number.

Line format: ``<number><rest>`` where ``<number>`` is an unsigned integer or
simple decimal (``15``, ``10.1``) and may be missing.  Numbered lines sort
numerically before unnumbered ones; equal numbers fall back to text.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from comparers.text import TextBasedComparer
from core.interfaces import Ordering

logger = logging.getLogger(__name__)

# Matches every string, including the empty one.
_NUMBERED_TEXT_RE = re.compile(
    r"\A"
    r"(?P<number>[0-9]+(?:\.[0-9]+)?)?"
    r"(?P<rest>.*)"
    r"\Z",
    re.DOTALL,
)


def _parse_number(token: str) -> Optional[float]:
    try:
        return float(token)
    except ValueError:
        return None


class NumberedTextComparer(TextBasedComparer):
    """Orders lines by their leading number, then by the rest of the line."""
    __slots__ = ()

    def compare(self, str1: str, str2: str) -> Ordering:
        logger.debug("NumberedTextComparer comparing `%s` <=> `%s`", str1, str2)
        match1 = _NUMBERED_TEXT_RE.match(str1)
        match2 = _NUMBERED_TEXT_RE.match(str2)
        num1 = match1.group("number")
        num2 = match2.group("number")

        if num1 is not None and num2 is not None:
            logger.debug("  Both strings match the number regex: `%s` <=> `%s`", num1, num2)
            if num1 == num2:
                logger.debug("  The numbers are equal, comparing the rest of each string")
                return self._compare_text(match1.group("rest"), match2.group("rest"))

            f1 = _parse_number(num1)
            f2 = _parse_number(num2)
            if f1 is not None and f2 is not None:
                ordering = Ordering.of(f1, f2)
                if ordering is Ordering.EQUAL:
                    # Same number written differently ("1.0" and "1.00").
                    return self._compare_text(match1.group("rest"), match2.group("rest"))
                return ordering
            if f1 is not None:
                logger.debug("  Only the left side has a valid number")
                return Ordering.LESS
            if f2 is not None:
                logger.debug("  Only the right side has a valid number")
                return Ordering.GREATER
            logger.debug("  Neither side has a valid number, comparing the values as strings")
            return self._compare_text(str1, str2)

        if num1 is not None:
            logger.debug("  Only the left side matches the number regex")
            return Ordering.LESS
        if num2 is not None:
            logger.debug("  Only the right side matches the number regex")
            return Ordering.GREATER

        logger.debug("  Neither side matches the number regex, comparing the values as strings")
        return self._compare_text(str1, str2)
