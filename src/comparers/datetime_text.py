"""
Ordering for lines that start with a date or datetime.

The datetime is the leading run of non-whitespace starting with a digit, so
a combined date and time must not contain spaces (``2019-08-27T19:13:16``).
The token must spell out a year, month and day; a time of day is optional.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as dateutil_parser

from comparers.text import TextBasedComparer
from core.interfaces import Ordering

logger = logging.getLogger(__name__)

_DATETIME_TEXT_RE = re.compile(r"\A(?P<datetime>\d\S+)(?:\s|\Z)")

# A token is parsed against both defaults.  If the results differ, some part
# of the date came from a default rather than from the text ("3rd", "42").
_DEFAULT = datetime(1970, 1, 1)
_OTHER_DEFAULT = datetime(1971, 2, 2)


def datetime_from_str(text: str) -> Optional[datetime]:
    """Parse the leading datetime of *text* as an aware UTC datetime."""
    match = _DATETIME_TEXT_RE.match(text)
    if match is None:
        return None
    token = match.group("datetime")
    try:
        dt = dateutil_parser.parse(token, default=_DEFAULT)
        if dt.date() != dateutil_parser.parse(token, default=_OTHER_DEFAULT).date():
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


class DatetimeTextComparer(TextBasedComparer):
    """Orders lines chronologically by their leading datetime."""
    __slots__ = ()

    def compare(self, str1: str, str2: str) -> Ordering:
        logger.debug("DatetimeTextComparer comparing `%s` <=> `%s`", str1, str2)
        dt1 = datetime_from_str(str1)
        dt2 = datetime_from_str(str2)

        if dt1 is not None and dt2 is not None:
            logger.debug("  Both strings start with a datetime: `%s` <=> `%s`", dt1, dt2)
            return Ordering.of(dt1, dt2)
        if dt1 is not None:
            logger.debug("  Only the left side has a valid datetime")
            return Ordering.LESS
        if dt2 is not None:
            logger.debug("  Only the right side has a valid datetime")
            return Ordering.GREATER

        logger.debug("  Neither side has a valid datetime, comparing the values as strings")
        return self._compare_text(str1, str2)
