from __future__ import annotations

import logging
import re
from typing import NamedTuple

from ..errors import MissingInputError, RangeParseError
from .columns import letters_to_column_index
from .context import RangeContext
from .sheet_names import SHEET_NAME_MAX_LENGTH, unescape_sheet_name

logger = logging.getLogger(__name__)

# Sheet names may contain any character, but anything beyond
# alphanumerics must be quoted, with embedded quotes doubled.
_PLAIN_SHEET_NAME = rf"[A-Za-z0-9]{{1,{SHEET_NAME_MAX_LENGTH - 1}}}"
_QUOTED_SHEET_NAME = rf"'(?:''|[^']){{1,{SHEET_NAME_MAX_LENGTH - 1}}}'"
# Matches more than is valid; _check_edge_cases rejects the rest.
_GRID = r"(?:!([A-Z]*)([0-9]*)(?:(:)([A-Z]*)([0-9]*))?)?"
_RANGE_PATTERN = re.compile(rf"({_PLAIN_SHEET_NAME}|{_QUOTED_SHEET_NAME}){_GRID}")


class Coords(NamedTuple):
    """Zero-based coordinates parsed from a range string; None is unspecified."""

    start_column: int | None
    start_row: int | None
    end_column: int | None
    end_row: int | None


def parse_range(range_str: str) -> RangeContext:
    """Parse a range string such as "Sheet1!A1:C10" into a RangeContext.

    Args:
        range_str: Range string. See `RangeContext.to_range` for the accepted forms.

    Returns:
        A new RangeContext holding the sheet name and bounds.

    Raises:
        MissingInputError: If `range_str` is None.
        RangeParseError: If the string is not a valid range.
    """
    if range_str is None:
        raise MissingInputError("range_str cannot be None.")
    match = _RANGE_PATTERN.fullmatch(range_str)
    if match is None:
        raise RangeParseError(f"Not a valid range: {range_str!r}")
    sheet_token, start_letters, start_digits, colon, end_letters, end_digits = (
        match.groups()
    )
    coords = Coords(
        start_column=_column_from_token(start_letters),
        start_row=_row_from_token(start_digits),
        end_column=_column_from_token(end_letters),
        end_row=_row_from_token(end_digits),
    )
    logger.debug("Parsed %r into sheet=%r coords=%s", range_str, sheet_token, coords)
    coords = _order_coords(_check_edge_cases(coords, has_colon=colon is not None))
    return _to_context(unescape_sheet_name(sheet_token), coords)


def _column_from_token(token: str | None) -> int | None:
    if not token:
        return None
    return letters_to_column_index(token) - 1


def _row_from_token(token: str | None) -> int | None:
    if not token:
        return None
    try:
        row = int(token)
    except ValueError as exc:
        raise RangeParseError(f"Row number too long: {len(token)} digits") from exc
    if row <= 0:
        raise RangeParseError(f"Row must be a positive integer >= 1: {token!r}")
    return row - 1


def _check_edge_cases(coords: Coords, *, has_colon: bool) -> Coords:
    """Reject coordinate combinations the pattern lets through.

    Raises:
        RangeParseError: If the combination is not a valid range.
    """
    present = tuple(value is not None for value in coords)
    # "A1:" -> colon with nothing after it.
    if has_colon and coords.end_column is None and coords.end_row is None:
        raise RangeParseError("Colon in range but no second coordinate specified.")
    # "A" or "5" alone.
    if present.count(True) == 1:
        raise RangeParseError("Single-dimension range coords not valid in isolation.")
    # "A:5" or "5:A".
    if present in ((True, False, False, True), (False, True, True, False)):
        raise RangeParseError("Ranges cannot consist of <row>:<col> or <col>:<row>.")
    # "B3" -> the 1x1 range B3:B3.
    if present == (True, True, False, False):
        logger.debug("Expanding single cell %s to a 1x1 range", coords)
        return coords._replace(end_column=coords.start_column, end_row=coords.start_row)
    return coords


def _order_coords(coords: Coords) -> Coords:
    """Swap start and end per axis so that start <= end and an end never stands alone."""
    start_column, end_column = _order_pair(coords.start_column, coords.end_column)
    start_row, end_row = _order_pair(coords.start_row, coords.end_row)
    ordered = Coords(start_column, start_row, end_column, end_row)
    if ordered != coords:
        logger.debug("Reordered coords %s to %s", coords, ordered)
    return ordered


def _order_pair(start: int | None, end: int | None) -> tuple[int | None, int | None]:
    if end is not None and (start is None or end < start):
        return end, start
    return start, end


def _to_context(sheet_name: str, coords: Coords) -> RangeContext:
    context = RangeContext().with_sheet_name(sheet_name)
    if coords.start_column is not None:
        context.with_start_column(coords.start_column)
    if coords.start_row is not None:
        context.with_start_row(coords.start_row)
    if coords.end_column is not None:
        context.with_end_column(coords.end_column)
    if coords.end_row is not None:
        context.with_end_row(coords.end_row)
    return context
