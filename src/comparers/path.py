"""
Ordering for filesystem paths.

Rules, applied in order:
  * absolute paths sort before relative ones;
  * Windows only: paths with a drive letter or UNC prefix sort before paths
    without one, and differing prefixes are compared directly;
  * shallower paths sort before deeper ones regardless of content, so
    ``/z`` comes before ``/a/a``;
  * paths of equal depth are compared component by component as text.

Paths are never normalized: ``.`` and ``..`` are ordinary components and
symlinks are not resolved.
"""
from __future__ import annotations

import logging
import re
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Optional

from comparers.text import TextBasedComparer
from core.interfaces import Collator, Ordering
from core.strategy import PathFlavor

logger = logging.getLogger(__name__)

_SEPARATORS_RE = {
    PathFlavor.UNIX: re.compile(r"/"),
    PathFlavor.WINDOWS: re.compile(r"[\\/]"),
}

_PURE_PATHS: dict[PathFlavor, type[PurePath]] = {
    PathFlavor.UNIX: PurePosixPath,
    PathFlavor.WINDOWS: PureWindowsPath,
}


def path_components(text: str, flavor: PathFlavor) -> tuple[PurePath, list[str]]:
    """
    Split *text* into its components.

    The anchor (drive and/or root, e.g. ``/`` or ``C:\\``) is the first
    component when present.  Separators are dropped, repeated separators
    do not produce empty components.
    """
    pure = _PURE_PATHS[flavor](text)
    anchor = pure.drive + pure.root
    # pathlib only normalizes separators inside the anchor, so the lengths
    # line up with the raw text.
    rest = text[len(pure.drive) + len(pure.root):]
    parts = [p for p in _SEPARATORS_RE[flavor].split(rest) if p]
    if anchor:
        parts.insert(0, anchor)
    return pure, parts


class PathComparer(TextBasedComparer):
    """Orders lines as Unix or Windows paths."""
    __slots__ = ("_flavor",)

    def __init__(
        self,
        collator: Optional[Collator] = None,
        case_insensitive: bool = False,
        flavor: PathFlavor = PathFlavor.UNIX,
    ) -> None:
        super().__init__(collator, case_insensitive)
        self._flavor = flavor

    @property
    def flavor(self) -> PathFlavor:
        return self._flavor

    def compare(self, str1: str, str2: str) -> Ordering:
        logger.debug(
            "PathComparer comparing paths as %s paths: `%s` <=> `%s`",
            self._flavor.value, str1, str2,
        )
        path1, elems1 = path_components(str1, self._flavor)
        path2, elems2 = path_components(str2, self._flavor)

        ordering = self._compare_absolute(path1, path2)
        if ordering is not None:
            return ordering

        if self._flavor is PathFlavor.WINDOWS:
            ordering = self._compare_prefix(path1, path2)
            if ordering is not None:
                return ordering

        return self._compare_components(elems1, elems2)

    @staticmethod
    def _compare_absolute(path1: PurePath, path2: PurePath) -> Optional[Ordering]:
        abs1 = path1.is_absolute()
        abs2 = path2.is_absolute()
        logger.debug("  left side is absolute? %s", abs1)
        logger.debug("  right side is absolute? %s", abs2)
        if abs1 and not abs2:
            return Ordering.LESS
        if abs2 and not abs1:
            return Ordering.GREATER
        return None

    @staticmethod
    def _compare_prefix(path1: PurePath, path2: PurePath) -> Optional[Ordering]:
        pre1 = path1.drive
        pre2 = path2.drive
        if pre1 and pre2:
            logger.debug("  both sides start with a Windows prefix, comparing `%s` <=> `%s`", pre1, pre2)
            if pre1 != pre2:
                return Ordering.of(pre1, pre2)
            return None
        if pre1:
            logger.debug("  only the left side starts with a Windows prefix")
            return Ordering.LESS
        if pre2:
            logger.debug("  only the right side starts with a Windows prefix")
            return Ordering.GREATER
        logger.debug("  neither side starts with a Windows prefix")
        return None

    def _compare_components(self, elems1: list[str], elems2: list[str]) -> Ordering:
        logger.debug("  left side has %d components", len(elems1))
        logger.debug("  right side has %d components", len(elems2))

        if not elems1 or not elems2:
            # An empty path sorts before anything with components.
            return Ordering.of(bool(elems1), bool(elems2))

        if len(elems1) != len(elems2):
            return Ordering.of(len(elems1), len(elems2))

        for i, (elem1, elem2) in enumerate(zip(elems1, elems2)):
            ordering = self._compare_text(elem1, elem2)
            logger.debug("  %d: `%s` <=> `%s`: %s", i, elem1, elem2, ordering.name)
            if ordering is not Ordering.EQUAL:
                return ordering

        logger.debug("  no differences in path found")
        return Ordering.EQUAL
