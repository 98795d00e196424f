"""Shared helpers for comparer and sorter tests."""
from functools import cmp_to_key

from core import IComparer, SortableLine


def sort_with(comparer: IComparer, lines: list[str]) -> list[str]:
    """Sort raw strings with a single-threaded sort driven by *comparer*."""
    return sorted(lines, key=cmp_to_key(comparer.compare))


def numbered(*texts: str) -> list[SortableLine]:
    return [SortableLine(i + 1, text) for i, text in enumerate(texts)]


def contents(lines: list[SortableLine]) -> list[str]:
    return [line.line for line in lines]
