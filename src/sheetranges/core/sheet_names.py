from __future__ import annotations

import re

SHEET_NAME_MAX_LENGTH = 100
_PLAIN_NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")


def is_valid_sheet_name(name: str | None) -> bool:
    """Return True if `name` has between 1 and SHEET_NAME_MAX_LENGTH - 1 characters."""
    return name is not None and 0 < len(name) < SHEET_NAME_MAX_LENGTH


def escape_sheet_name(name: str) -> str:
    """Quote a sheet name for use in a range string when required.

    Alphanumeric names are returned unchanged; anything else is wrapped in
    single quotes with embedded quotes doubled.

    Examples:
        >>> escape_sheet_name("Sheet1")
        'Sheet1'
        >>> escape_sheet_name("Today's data")
        "'Today''s data'"
    """
    if _PLAIN_NAME_PATTERN.fullmatch(name):
        return name
    return "'" + name.replace("'", "''") + "'"


def unescape_sheet_name(token: str) -> str:
    """Reverse `escape_sheet_name` for the sheet part of a range string."""
    if len(token) >= 2 and token.startswith("'") and token.endswith("'"):
        return token[1:-1].replace("''", "'")
    return token
