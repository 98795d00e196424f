"""
Base error hierarchy for the sorting system.

All errors raised by comparers, the sorter, and the file layer inherit
from ``SortError`` so callers can catch a single base type.  Verification
failures (the file is readable but not in the requested order) derive from
``CheckError``; surfaces map those to a distinct "check failed" outcome and
every other ``SortError`` to an operational failure.
"""
from __future__ import annotations


class SortError(Exception):
    """Base class for all sorting errors."""


class InvalidOptionsError(SortError):
    """Raised when an option combination is not supported by a strategy."""


class InvalidLocaleError(SortError):
    """Raised when a locale identifier is not a well-formed language tag."""

    def __init__(self, locale_name: str, reason: str) -> None:
        super().__init__(f"'{locale_name}' is not a valid locale: {reason}")
        self.locale_name = locale_name


class InvalidAddressError(SortError):
    """Raised when a line cannot be parsed as an IP address."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"'{text}' is not a valid IP address: {reason}")
        self.text = text


class InvalidNetworkError(SortError):
    """Raised when a line cannot be parsed as a network in CIDR notation."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"'{text}' is not a valid network: {reason}")
        self.text = text


class LineEndingError(SortError):
    """Raised when the line ending of a file cannot be determined."""


class CheckError(SortError):
    """Base class for verification failures reported by ``--check``."""


class HasUnexpectedEmptyLinesError(CheckError):
    """Raised when a file has empty lines that are not part of a comment block."""

    def __init__(self) -> None:
        super().__init__("the given file contains empty lines not preceded by a comment")


class NotSortedError(CheckError):
    """Raised when two adjacent lines are out of order."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(
            f'the given file is not sorted - found "{first}" before "{second}"'
        )
        self.first = first
        self.second = second


class NotUniqueError(CheckError):
    """Raised when the same line content appears twice."""

    def __init__(self, line1: int, line2: int, line: str) -> None:
        super().__init__(
            f"the given file contains non-unique lines at {line1} and {line2} "
            f'containing "{line}"'
        )
        self.line1 = line1
        self.line2 = line2
        self.line = line
