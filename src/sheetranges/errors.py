from __future__ import annotations

"""Project-specific exception hierarchy for sheetranges."""


class SheetRangesError(Exception):
    """Base exception for sheetranges."""


class InvalidArgumentError(SheetRangesError, ValueError):
    """Raised when a supplied value is invalid regardless of the range state."""


class RangeParseError(InvalidArgumentError):
    """Raised when a range string cannot be parsed (also a ValueError for compatibility)."""


class IllegalRangeStateError(SheetRangesError, RuntimeError):
    """Raised when an operation is not allowed for the current bounds of the range."""


class MissingInputError(SheetRangesError, TypeError):
    """Raised when a required input (sheet, grid range, range string) is None."""
