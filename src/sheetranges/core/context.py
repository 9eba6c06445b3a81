from __future__ import annotations

from enum import Enum
import logging
import re

from ..errors import IllegalRangeStateError, InvalidArgumentError, MissingInputError
from ..models import GridCoordinate, GridRange
from .columns import column_index_to_letters, letters_to_column_index
from .sheet_names import SHEET_NAME_MAX_LENGTH, escape_sheet_name, is_valid_sheet_name

logger = logging.getLogger(__name__)

_CELL_PATTERN = re.compile(r"([A-Z]*)([0-9]*)")


class RangeShape(str, Enum):
    """Combination of bounds that a range currently holds."""

    BOX = "box"
    COLUMNS = "columns"
    ROWS = "rows"
    SHEET = "sheet"
    INVALID = "invalid"


def _parse_cell(a1_cell: str | None, label: str) -> tuple[int | None, int | None]:
    """Split an A1 cell token into zero-based (column, row); either part may be absent."""
    if a1_cell is None:
        raise MissingInputError(f"{label} cell cannot be None.")
    if not a1_cell:
        raise InvalidArgumentError(f"{label} cell cannot be an empty string.")
    match = _CELL_PATTERN.fullmatch(a1_cell)
    if match is None:
        raise InvalidArgumentError(f"Illegal cell format: {a1_cell!r}")
    letters, digits = match.groups()
    column = letters_to_column_index(letters) - 1 if letters else None
    row: int | None = None
    if digits:
        try:
            row = int(digits) - 1
        except ValueError as exc:
            raise InvalidArgumentError(f"Row number too long: {len(digits)} digits") from exc
        if row < 0:
            raise InvalidArgumentError(f"Invalid row specified: {a1_cell!r}")
    return column, row


class RangeContext:
    """Mutable bounds of a range, built up and edited before output.

    Columns and rows are zero-based and both ends are inclusive. Any bound may
    be unset (None), meaning the range is unbounded along that edge. Every
    mutator returns the context itself for chaining, and either applies fully
    or raises without changing the context.

    Examples:
        >>> RangeContext().with_sheet_name("Accounts").with_start_cell("A1").with_end_cell("J10").to_range()
        'Accounts!A1:J10'
    """

    def __init__(self) -> None:
        self._sheet_name: str | None = None
        self._sheet_id: int | None = None
        self._start_column: int | None = None
        self._start_row: int | None = None
        self._end_column: int | None = None
        self._end_row: int | None = None

    @property
    def sheet_name(self) -> str | None:
        return self._sheet_name

    @property
    def sheet_id(self) -> int | None:
        return self._sheet_id

    @property
    def start_column(self) -> int | None:
        return self._start_column

    @property
    def start_row(self) -> int | None:
        return self._start_row

    @property
    def end_column(self) -> int | None:
        return self._end_column

    @property
    def end_row(self) -> int | None:
        return self._end_row

    def with_sheet_name(self, sheet_name: str) -> RangeContext:
        """Set or overwrite the sheet name.

        Raises:
            InvalidArgumentError: If the name is None, empty or too long.
        """
        if not is_valid_sheet_name(sheet_name):
            raise InvalidArgumentError(
                f"sheet_name must be between 1 and {SHEET_NAME_MAX_LENGTH - 1} characters."
            )
        self._sheet_name = sheet_name
        return self

    def with_sheet_id(self, sheet_id: int) -> RangeContext:
        """Set or overwrite the sheet id (must be non-negative)."""
        if sheet_id < 0:
            raise InvalidArgumentError(f"Sheet id must be non-negative: {sheet_id}")
        self._sheet_id = sheet_id
        return self

    def with_width(self, width: int) -> RangeContext:
        """Set the number of columns, counted from the start column.

        Args:
            width: Number of columns; 3 with start column A covers A, B and C.

        Raises:
            InvalidArgumentError: If width is not positive.
            IllegalRangeStateError: If the start column is not set.
        """
        if width <= 0:
            raise InvalidArgumentError(f"Width must be positive: {width}")
        if self._start_column is None:
            raise IllegalRangeStateError("Cannot set width where start column is not set.")
        self._end_column = self._start_column + width - 1
        return self

    def with_height(self, height: int) -> RangeContext:
        """Set the number of rows, counted from the start row.

        Raises:
            InvalidArgumentError: If height is not positive.
            IllegalRangeStateError: If the start row is not set.
        """
        if height <= 0:
            raise InvalidArgumentError(f"Height must be positive: {height}")
        if self._start_row is None:
            raise IllegalRangeStateError("Cannot set height where start row is not set.")
        self._end_row = self._start_row + height - 1
        return self

    def with_start_column(self, start_column: int) -> RangeContext:
        """Set the zero-based start column, swapping with the end column if inverted."""
        _check_index(start_column, "start_column")
        self._start_column = start_column
        self._order_bounds()
        return self

    def with_start_row(self, start_row: int) -> RangeContext:
        """Set the zero-based start row, swapping with the end row if inverted."""
        _check_index(start_row, "start_row")
        self._start_row = start_row
        self._order_bounds()
        return self

    def with_end_column(self, end_column: int) -> RangeContext:
        """Set the zero-based, inclusive end column.

        Raises:
            IllegalRangeStateError: If the start column is not set.
        """
        _check_index(end_column, "end_column")
        if self._start_column is None:
            raise IllegalRangeStateError("Cannot set end column where start column is not set.")
        self._end_column = end_column
        self._order_bounds()
        return self

    def with_end_row(self, end_row: int) -> RangeContext:
        """Set the zero-based, inclusive end row.

        Raises:
            IllegalRangeStateError: If the start row is not set.
        """
        _check_index(end_row, "end_row")
        if self._start_row is None:
            raise IllegalRangeStateError("Cannot set end row where start row is not set.")
        self._end_row = end_row
        self._order_bounds()
        return self

    def with_start_cell(self, a1_cell: str) -> RangeContext:
        """Set the start column and/or row from an A1 token such as "B3", "B" or "3".

        Raises:
            MissingInputError: If the cell is None.
            InvalidArgumentError: If the cell is empty, malformed or has row 0.
        """
        column, row = _parse_cell(a1_cell, "start")
        if column is not None:
            self._start_column = column
        if row is not None:
            self._start_row = row
        self._order_bounds()
        return self

    def with_end_cell(self, a1_cell: str) -> RangeContext:
        """Set the end column and/or row from an A1 token such as "D10", "D" or "10".

        Raises:
            MissingInputError: If the cell is None.
            InvalidArgumentError: If the cell is empty, malformed or has row 0.
            IllegalRangeStateError: If the matching start bound is not set.
        """
        column, row = _parse_cell(a1_cell, "end")
        if column is not None and self._start_column is None:
            raise IllegalRangeStateError("Cannot set end column when start column is unset.")
        if row is not None and self._start_row is None:
            raise IllegalRangeStateError("Cannot set end row when start row is unset.")
        if column is not None:
            self._end_column = column
        if row is not None:
            self._end_row = row
        self._order_bounds()
        return self

    def clear_start_column(self) -> RangeContext:
        """Unset the start column; the end column must be cleared first."""
        if self._end_column is not None:
            raise IllegalRangeStateError("Cannot clear start column where end column still set.")
        self._start_column = None
        return self

    def clear_start_row(self) -> RangeContext:
        """Unset the start row; the end row must be cleared first."""
        if self._end_row is not None:
            raise IllegalRangeStateError("Cannot clear start row where end row still set.")
        self._start_row = None
        return self

    def clear_end_column(self) -> RangeContext:
        self._end_column = None
        return self

    def clear_end_row(self) -> RangeContext:
        self._end_row = None
        return self

    def expand_columns(self, num_extra_columns: int) -> RangeContext:
        """Move the end column right by `num_extra_columns`.

        Raises:
            InvalidArgumentError: If `num_extra_columns` is not positive.
            IllegalRangeStateError: If start or end column is not set.
        """
        if num_extra_columns <= 0:
            raise InvalidArgumentError("num_extra_columns must be greater than zero.")
        if self._start_column is None or self._end_column is None:
            raise IllegalRangeStateError("Cannot expand columns where bounds are not set.")
        self._end_column += num_extra_columns
        return self

    def expand_rows(self, num_extra_rows: int) -> RangeContext:
        """Move the end row down by `num_extra_rows`.

        Raises:
            InvalidArgumentError: If `num_extra_rows` is not positive.
            IllegalRangeStateError: If start or end row is not set.
        """
        if num_extra_rows <= 0:
            raise InvalidArgumentError("num_extra_rows must be greater than zero.")
        if self._start_row is None or self._end_row is None:
            raise IllegalRangeStateError("Cannot expand rows where bounds are not set.")
        self._end_row += num_extra_rows
        return self

    def translate(self, delta_x: int, delta_y: int) -> RangeContext:
        """Shift the range by `delta_x` columns and `delta_y` rows.

        A non-zero delta requires the start bound of that axis to be set.

        Raises:
            IllegalRangeStateError: If shifting along an axis with no start bound.
            InvalidArgumentError: If the shift would move a start bound below 0.
        """
        if delta_x != 0:
            if self._start_column is None:
                raise IllegalRangeStateError(
                    "Cannot translate range where start column is not set."
                )
            if self._start_column + delta_x < 0:
                raise InvalidArgumentError("Cannot translate to before column 0.")
        if delta_y != 0:
            if self._start_row is None:
                raise IllegalRangeStateError("Cannot translate range where start row is not set.")
            if self._start_row + delta_y < 0:
                raise InvalidArgumentError("Cannot translate to before row 0.")

        if delta_x != 0:
            self._start_column = _shift(self._start_column, delta_x)
            self._end_column = _shift(self._end_column, delta_x)
        if delta_y != 0:
            self._start_row = _shift(self._start_row, delta_y)
            self._end_row = _shift(self._end_row, delta_y)
        return self

    @property
    def shape(self) -> RangeShape:
        """Classify the bounds currently set."""
        bounds = (self._start_column, self._start_row, self._end_column, self._end_row)
        present = tuple(value is not None for value in bounds)
        match present:
            case (True, True, True, True):
                return RangeShape.BOX
            case (True, _, True, False):
                return RangeShape.COLUMNS
            case (_, True, False, True):
                return RangeShape.ROWS
            case (False, False, False, False):
                return RangeShape.SHEET
            case _:
                return RangeShape.INVALID

    def to_range(self) -> str:
        """Render the range as a string such as "Sheet1!A1:C4".

        Supported forms:
            - "Sheet1": the whole sheet.
            - "Sheet1!A1": a single cell.
            - "Sheet1!A1:C4": a box.
            - "Sheet1!A:C" / "Sheet1!A4:C": columns, optionally from a start row.
            - "Sheet1!2:6" / "Sheet1!B2:6": rows, optionally from a start column.

        Raises:
            IllegalRangeStateError: If no sheet name is set or the bounds form
                none of the shapes above (e.g. only a start row).
        """
        if self._sheet_name is None:
            raise IllegalRangeStateError("Sheet name is not set: cannot create a range string.")
        prefix = escape_sheet_name(self._sheet_name)
        match self.shape:
            case RangeShape.BOX:
                start_cell = _cell(self._start_column, self._start_row)
                end_cell = _cell(self._end_column, self._end_row)
                if start_cell == end_cell:
                    return f"{prefix}!{start_cell}"
                return f"{prefix}!{start_cell}:{end_cell}"
            case RangeShape.COLUMNS:
                start_cell = _cell(self._start_column, self._start_row)
                end_cell = _cell(self._end_column, None)
                return f"{prefix}!{start_cell}:{end_cell}"
            case RangeShape.ROWS:
                start_cell = _cell(self._start_column, self._start_row)
                end_cell = _cell(None, self._end_row)
                return f"{prefix}!{start_cell}:{end_cell}"
            case RangeShape.SHEET:
                return prefix
            case _:
                raise IllegalRangeStateError(
                    f"Illegal combination of coordinates set: {self!r}"
                )

    to_notation = to_range

    def to_grid_range(self) -> GridRange:
        """Return the bounds as a GridRange (end indexes exclusive)."""
        return GridRange(
            sheet_id=self._sheet_id,
            start_row_index=self._start_row,
            end_row_index=_shift(self._end_row, 1),
            start_column_index=self._start_column,
            end_column_index=_shift(self._end_column, 1),
        )

    def to_start_grid_coordinate(self) -> GridCoordinate:
        return GridCoordinate(
            sheet_id=self._sheet_id,
            column_index=self._start_column,
            row_index=self._start_row,
        )

    def to_end_grid_coordinate(self) -> GridCoordinate:
        return GridCoordinate(
            sheet_id=self._sheet_id,
            column_index=self._end_column,
            row_index=self._end_row,
        )

    def to_coordinates(self) -> tuple[GridCoordinate, GridCoordinate]:
        """Return the (start, end) coordinates of the range."""
        return self.to_start_grid_coordinate(), self.to_end_grid_coordinate()

    def copy(self) -> RangeContext:
        clone = RangeContext()
        (
            clone._sheet_name,
            clone._sheet_id,
            clone._start_column,
            clone._start_row,
            clone._end_column,
            clone._end_row,
        ) = self._state()
        return clone

    def _state(
        self,
    ) -> tuple[str | None, int | None, int | None, int | None, int | None, int | None]:
        return (
            self._sheet_name,
            self._sheet_id,
            self._start_column,
            self._start_row,
            self._end_column,
            self._end_row,
        )

    def _order_bounds(self) -> None:
        """Swap start and end of an axis where both are set and inverted."""
        if (
            self._start_column is not None
            and self._end_column is not None
            and self._start_column > self._end_column
        ):
            logger.debug(
                "Swapping columns %d and %d", self._start_column, self._end_column
            )
            self._start_column, self._end_column = self._end_column, self._start_column
        if (
            self._start_row is not None
            and self._end_row is not None
            and self._start_row > self._end_row
        ):
            logger.debug("Swapping rows %d and %d", self._start_row, self._end_row)
            self._start_row, self._end_row = self._end_row, self._start_row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeContext):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"RangeContext(sheet_name={self._sheet_name!r}, sheet_id={self._sheet_id!r}, "
            f"start_column={self._start_column!r}, start_row={self._start_row!r}, "
            f"end_column={self._end_column!r}, end_row={self._end_row!r})"
        )


def _check_index(value: int, name: str) -> None:
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative: {value}")


def _shift(value: int | None, delta: int) -> int | None:
    return None if value is None else value + delta


def _cell(column: int | None, row: int | None) -> str:
    """Render an A1 token; either part may be omitted."""
    letters = "" if column is None else column_index_to_letters(column)
    digits = "" if row is None else str(row + 1)
    return letters + digits
