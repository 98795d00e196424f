"""
SortOptions: the single configuration object for one sort or check run.

Both outer surfaces (the Typer CLI and the FastAPI routes) translate their
arguments into a ``SortOptions`` and hand it to ``SortService``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.strategy import PathFlavor, Strategy


@dataclass(frozen=True, slots=True)
class SortOptions:
    """
    Attributes:
        strategy:          Which ordering to apply.
        locale:            Language tag for locale-aware collation.  ``None``
                           means codepoint order.
        case_insensitive:  Ignore case when comparing text.
        reverse:           Produce (or expect) descending order.
        unique:            Drop (or reject) repeated lines.
        path_flavor:       Path syntax for ``Strategy.PATH``.
        workers:           Threads used by the parallel sort.  ``None`` uses
                           ``os.cpu_count()``.
    """
    strategy: Strategy = Strategy.TEXT
    locale: Optional[str] = None
    case_insensitive: bool = False
    reverse: bool = False
    unique: bool = False
    path_flavor: PathFlavor = PathFlavor.UNIX
    workers: Optional[int] = None
