"""
Core interfaces and abstract base classes for the sorting system.

This module defines the contracts that the strategies implement:
- Ordering: three-way comparison result
- Collator: protocol for locale-aware string comparison
- IComparer: an order relation over line strings
"""
from __future__ import annotations

import abc
from enum import IntEnum
from typing import Any, Protocol


class Ordering(IntEnum):
    """
    Three-way comparison result.

    Values are the classic ``cmp`` results, so an ``Ordering`` can be
    returned straight from a function wrapped in ``functools.cmp_to_key``.
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a: Any, b: Any) -> Ordering:
        """Compare two values with their natural ``<`` / ``>`` order."""
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL

    @classmethod
    def from_cmp(cls, value: int) -> Ordering:
        """Normalize any negative / zero / positive integer."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


class Collator(Protocol):
    """
    Locale-aware string comparison.

    Implementations must be read-only once built, so a single instance can
    be shared by every comparison of a parallel sort.
    """

    def compare(self, source: str, target: str) -> int: ...


class IComparer(abc.ABC):
    """
    An order relation over line strings.

    One comparer instance is built per run and shared across all threads of
    the sort, so implementations hold no per-comparison mutable state.
    """
    __slots__ = ()

    @abc.abstractmethod
    def compare(self, str1: str, str2: str) -> Ordering:
        """
        Order two lines.

        Text-based comparers never raise.  Comparers that parse their input
        (IP addresses, networks) raise a ``SortError`` subclass for lines
        they cannot parse.
        """
        ...

    def is_ordered(self, str1: str, str2: str, reverse: bool) -> bool:
        """
        Report whether the pair ``(str1, str2)`` violates the requested order.

        Without ``reverse`` this is true when ``str1`` sorts strictly after
        ``str2``.  With ``reverse`` it is true whenever ``str1`` does *not*
        sort strictly after ``str2``, which also flags ties.
        """
        ordering = self.compare(str1, str2)
        if reverse:
            return ordering is not Ordering.GREATER
        return ordering is Ordering.GREATER
