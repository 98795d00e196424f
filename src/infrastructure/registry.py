"""
Registry: maps Strategy to the handler that builds its comparer.

Adding a new sort strategy requires:
1. Add an enum value to ``Strategy``
2. Write a comparer module under ``comparers/``
3. Add one ``register()`` call in ``registrations.py``

Nothing else needs to change: callers discover handlers through
``get_handler()``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from core.interfaces import Collator, IComparer
from core.strategy import PathFlavor, Strategy

ComparerFactory = Callable[[Optional[Collator], bool, PathFlavor], IComparer]


@dataclass(frozen=True, slots=True)
class StrategyHandler:
    """Everything the system needs to know about one strategy.

    ``build`` receives the collator (``None`` without a locale), the
    case-insensitivity flag and the path flavor; strategies ignore the
    arguments they have no use for.
    """
    description: str
    build: ComparerFactory


_handlers: dict[Strategy, StrategyHandler] = {}


def register(strategy: Strategy, handler: StrategyHandler) -> None:
    """Register a handler for a strategy.  Raises on duplicates."""
    if strategy in _handlers:
        raise ValueError(f"Handler already registered for {strategy!r}")
    _handlers[strategy] = handler


def get_handler(strategy: Strategy) -> StrategyHandler:
    """Look up the handler for a strategy.  Raises on missing."""
    _ensure_registered()
    try:
        return _handlers[strategy]
    except KeyError:
        raise ValueError(
            f"No handler registered for {strategy!r}. "
            f"Did you forget to add a register() call in registrations.py?"
        ) from None


def registered_strategies() -> list[Strategy]:
    """All strategies with a handler, in declaration order."""
    _ensure_registered()
    return [s for s in Strategy if s in _handlers]


def _ensure_registered() -> None:
    import infrastructure.registrations  # noqa: F401  (side-effect: populates the registry)
