from __future__ import annotations

from collections.abc import Callable
import logging

from .core.columns import column_index_to_letters, letters_to_column_index
from .core.context import RangeContext, RangeShape
from .core.parser import parse_range
from .core.sheet_names import escape_sheet_name, unescape_sheet_name
from .errors import (
    IllegalRangeStateError,
    InvalidArgumentError,
    MissingInputError,
    RangeParseError,
    SheetRangesError,
)
from .models import GridCoordinate, GridRange, Sheet, SheetProperties

logger = logging.getLogger(__name__)

__all__ = [
    "for_sheet_name",
    "for_sheet",
    "for_grid_range",
    "for_start_grid_coordinate",
    "for_grid_coordinate",
    "for_range",
    "parse_range",
    "RangeContext",
    "RangeShape",
    "column_index_to_letters",
    "letters_to_column_index",
    "escape_sheet_name",
    "unescape_sheet_name",
    "SheetRangesError",
    "InvalidArgumentError",
    "RangeParseError",
    "IllegalRangeStateError",
    "MissingInputError",
    "GridCoordinate",
    "GridRange",
    "Sheet",
    "SheetProperties",
]


def for_sheet_name(sheet_name: str) -> RangeContext:
    """
    Start a range covering the whole of the named sheet.

    Raises:
        InvalidArgumentError: If the name is empty or too long.

    Examples:
        >>> for_sheet_name("Accounts").with_start_cell("A1").with_end_cell("J10").to_range()
        'Accounts!A1:J10'
    """
    return RangeContext().with_sheet_name(sheet_name)


def for_sheet(sheet: Sheet) -> RangeContext:
    """
    Start a range covering the whole of a Sheets API sheet (name and id).

    Raises:
        MissingInputError: If `sheet` is None.
    """
    if sheet is None:
        raise MissingInputError("sheet cannot be None.")
    context = RangeContext().with_sheet_name(sheet.properties.title)
    if sheet.properties.sheet_id is not None:
        context.with_sheet_id(sheet.properties.sheet_id)
    return context


def for_grid_range(grid_range: GridRange) -> RangeContext:
    """
    Start a range from a GridRange, converting exclusive end indexes to inclusive.

    Absent indexes leave the axis unbounded. An end index without a start index
    is anchored at index 0, as the Sheets API reads an unset start.

    Args:
        grid_range: GridRange to copy the sheet id and bounds from.

    Returns:
        A new RangeContext without a sheet name; set one before calling `to_range`.

    Raises:
        MissingInputError: If `grid_range` is None.

    Examples:
        >>> grid = GridRange(sheet_id=0, start_row_index=0, end_row_index=10,
        ...                  start_column_index=0, end_column_index=10)
        >>> for_grid_range(grid).with_sheet_name("Test").to_range()
        'Test!A1:J10'
    """
    if grid_range is None:
        raise MissingInputError("grid_range cannot be None.")
    context = RangeContext()
    if grid_range.sheet_id is not None:
        context.with_sheet_id(grid_range.sheet_id)
    _copy_axis(
        grid_range.start_column_index,
        grid_range.end_column_index,
        context.with_start_column,
        context.with_end_column,
    )
    _copy_axis(
        grid_range.start_row_index,
        grid_range.end_row_index,
        context.with_start_row,
        context.with_end_row,
    )
    return context


def _copy_axis(
    start: int | None,
    end: int | None,
    set_start: Callable[[int], RangeContext],
    set_end: Callable[[int], RangeContext],
) -> None:
    if end is not None:
        if start is None:
            logger.debug("Grid range end index %d has no start index; anchoring at 0", end)
            start = 0
        if end <= start:
            raise InvalidArgumentError(
                f"Grid range end index {end} must be greater than start index {start}."
            )
    if start is not None:
        set_start(start)
    if end is not None:
        set_end(end - 1)


def for_start_grid_coordinate(grid_coordinate: GridCoordinate) -> RangeContext:
    """
    Start a range anchored at a GridCoordinate (sheet id, start column and row).

    Raises:
        MissingInputError: If `grid_coordinate` is None.

    Examples:
        >>> start = GridCoordinate(sheet_id=0, column_index=0, row_index=0)
        >>> for_start_grid_coordinate(start).with_sheet_name("Test").with_width(10).with_height(10).to_range()
        'Test!A1:J10'
    """
    if grid_coordinate is None:
        raise MissingInputError("grid_coordinate cannot be None.")
    context = RangeContext()
    if grid_coordinate.sheet_id is not None:
        context.with_sheet_id(grid_coordinate.sheet_id)
    if grid_coordinate.column_index is not None:
        context.with_start_column(grid_coordinate.column_index)
    if grid_coordinate.row_index is not None:
        context.with_start_row(grid_coordinate.row_index)
    return context


for_grid_coordinate = for_start_grid_coordinate


def for_range(range_str: str) -> RangeContext:
    """
    Start a range from a range string such as "Sheet1!A1:C10" or "'My Sheet'!B:D".

    Raises:
        MissingInputError: If `range_str` is None.
        RangeParseError: If the string is not a valid range.

    Examples:
        >>> for_range("Test!A1:B2").translate(5, 5).to_range()
        'Test!F6:G7'
    """
    return parse_range(range_str)
