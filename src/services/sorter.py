"""
Sorter: applies one comparer to a whole file.

Two operations:
- ``check``: one forward pass that verifies order (and uniqueness) without
  reordering anything.
- ``sort``:  parallel sort, then optional reversal, then optional removal of
  duplicate lines.

Both agree on what "sorted" means: if ``check`` passes, ``sort`` does not
reorder any pair of lines the comparer considers different.
"""
from __future__ import annotations

import heapq
import logging
import math
import os
from concurrent.futures import ThreadPoolExecutor
from functools import cmp_to_key
from threading import Lock
from typing import Iterable, Optional

from core.errors import NotSortedError, NotUniqueError, SortError
from core.interfaces import IComparer, Ordering
from core.options import SortOptions
from core.sortable_line import SortableLine
from core.strategy import PathFlavor, Strategy
from infrastructure.collation import build_collator
from infrastructure.registry import get_handler

logger = logging.getLogger(__name__)

# Below this many lines per chunk the thread overhead is not worth it.
MIN_CHUNK_SIZE = 1024


class _FailureSlot:
    """Holds the comparison failure raised on any sort thread.

    If several comparisons fail only the last one is kept; one failure is
    enough to fail the whole sort.
    """
    __slots__ = ("_lock", "_error")

    def __init__(self) -> None:
        self._lock = Lock()
        self._error: Optional[SortError] = None

    def set(self, error: SortError) -> None:
        with self._lock:
            self._error = error

    def raise_if_set(self) -> None:
        with self._lock:
            error = self._error
        if error is not None:
            raise error


class Sorter:
    """
    Owns the comparer for one run.

    The comparer (and the collator behind it) is read-only once built and
    is shared by every thread of the parallel sort.
    """

    def __init__(
        self,
        strategy: Strategy,
        locale: Optional[str] = None,
        unique: bool = False,
        case_insensitive: bool = False,
        reverse: bool = False,
        path_flavor: PathFlavor = PathFlavor.UNIX,
        workers: Optional[int] = None,
    ) -> None:
        collator = build_collator(locale, case_insensitive) if locale is not None else None
        self._comparer: IComparer = get_handler(strategy).build(
            collator, case_insensitive, path_flavor,
        )
        self._unique = unique
        self._reverse = reverse
        self._workers = max(1, workers or os.cpu_count() or 1)
        logger.debug(
            "Built %s for strategy %s (locale=%s, unique=%s, reverse=%s)",
            type(self._comparer).__name__, strategy.value, locale, unique, reverse,
        )

    @classmethod
    def from_options(cls, options: SortOptions) -> Sorter:
        return cls(
            options.strategy,
            locale=options.locale,
            unique=options.unique,
            case_insensitive=options.case_insensitive,
            reverse=options.reverse,
            path_flavor=options.path_flavor,
            workers=options.workers,
        )

    @property
    def comparer(self) -> IComparer:
        return self._comparer

    # ------------------------------------------------------------------
    # Check
    # ------------------------------------------------------------------

    def check(self, lines: Iterable[SortableLine]) -> bool:
        """
        Verify that *lines* are already in order (and unique if requested).

        Returns ``True`` or raises ``NotSortedError`` / ``NotUniqueError``.
        Uniqueness is exact content equality in the original line order,
        whatever the comparer thinks of the two lines.
        """
        last: Optional[SortableLine] = None
        seen: dict[str, int] = {}

        for line in lines:
            if last is not None and self._comparer.is_ordered(last.line, line.line, self._reverse):
                raise NotSortedError(last.line, line.line)

            if self._unique:
                first_seen = seen.get(line.line)
                if first_seen is not None:
                    raise NotUniqueError(first_seen, line.line_number, line.line)
                seen[line.line] = line.line_number

            last = line

        return True

    # ------------------------------------------------------------------
    # Sort
    # ------------------------------------------------------------------

    def sort(self, lines: Iterable[SortableLine]) -> list[SortableLine]:
        """
        Return *lines* in order.

        Ties keep no particular order.  A comparison failure on any thread
        fails the whole call once the parallel phase is over.
        """
        lines = list(lines)
        failure = _FailureSlot()

        def compare(a: SortableLine, b: SortableLine) -> Ordering:
            try:
                return self._comparer.compare(a.line, b.line)
            except SortError as exc:
                failure.set(exc)
                # Any answer will do, the result is discarded below.
                return Ordering.LESS

        key = cmp_to_key(compare)
        chunks = self._chunks(lines)
        if len(chunks) > 1:
            logger.debug("Sorting %d lines in %d chunks", len(lines), len(chunks))
            with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
                sorted_chunks = list(pool.map(lambda chunk: sorted(chunk, key=key), chunks))
            sorted_lines = list(heapq.merge(*sorted_chunks, key=key))
        else:
            sorted_lines = sorted(lines, key=key)

        failure.raise_if_set()

        if self._reverse:
            sorted_lines.reverse()

        if self._unique:
            sorted_lines = _drop_repeated_lines(sorted_lines)

        return sorted_lines

    def _chunks(self, lines: list[SortableLine]) -> list[list[SortableLine]]:
        count = min(self._workers, math.ceil(len(lines) / MIN_CHUNK_SIZE))
        if count <= 1:
            return [lines]
        size = math.ceil(len(lines) / count)
        return [lines[i:i + size] for i in range(0, len(lines), size)]


def _drop_repeated_lines(lines: list[SortableLine]) -> list[SortableLine]:
    """
    Keep the first line of each distinct content, dropping every later
    repeat wherever it sits, not only repeats next to each other.

    Identical lines always compare equal, so after sorting they sit in the
    same run of ties, usually next to each other.  A tie run can also hold
    distinct lines (``a`` and ``A`` when case-insensitive) between two
    duplicates, which a previous-line check would miss.  Lines that are only
    equal to the comparer are never dropped.

    When no distinct lines interleave with duplicates this gives the same
    result as removing adjacent duplicates.
    """
    deduped: list[SortableLine] = []
    seen: set[str] = set()
    for line in lines:
        if line.line in seen:
            continue
        seen.add(line.line)
        deduped.append(line)
    return deduped
