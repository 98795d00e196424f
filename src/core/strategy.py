from __future__ import annotations

from enum import Enum


class Strategy(str, Enum):
    """Determines which comparer family orders the lines."""
    TEXT = "text"
    NUMBERED_TEXT = "numbered-text"
    DATETIME_TEXT = "datetime-text"
    PATH = "path"
    IP = "ip"
    NETWORK = "network"

    @property
    def supports_locale(self) -> bool:
        return self not in (Strategy.IP, Strategy.NETWORK)

    @property
    def supports_path_flavor(self) -> bool:
        return self is Strategy.PATH


class PathFlavor(str, Enum):
    """Which path syntax ``Strategy.PATH`` parses lines with."""
    UNIX = "unix"
    WINDOWS = "windows"
