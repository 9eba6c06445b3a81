from __future__ import annotations

import logging

import pytest

from sheetranges import (
    GridCoordinate,
    GridRange,
    IllegalRangeStateError,
    InvalidArgumentError,
    MissingInputError,
    Sheet,
    SheetProperties,
    for_grid_coordinate,
    for_grid_range,
    for_range,
    for_sheet,
    for_sheet_name,
    for_start_grid_coordinate,
)


def test_for_sheet_name() -> None:
    assert for_sheet_name("TestSheet1").sheet_name == "TestSheet1"
    ctx = (
        for_sheet_name("Accounts")
        .with_start_column(0)
        .with_start_row(0)
        .with_end_column(9)
        .with_end_row(9)
    )
    assert ctx.to_notation() == "Accounts!A1:J10"


@pytest.mark.parametrize("name", ["", "a" * 100])
def test_for_sheet_name_invalid(name: str) -> None:
    with pytest.raises(InvalidArgumentError):
        for_sheet_name(name)


def test_for_sheet_name_lone_row_anchor_not_exportable() -> None:
    with pytest.raises(IllegalRangeStateError):
        for_sheet_name("Test").with_start_row(5).to_notation()


def test_for_sheet() -> None:
    sheet = Sheet(properties=SheetProperties(title="Today's results!", sheet_id=123))
    ctx = for_sheet(sheet)
    assert ctx.to_range() == "'Today''s results!'"
    assert ctx.sheet_id == 123


def test_for_sheet_from_api_payload() -> None:
    sheet = Sheet.model_validate({"properties": {"sheetId": 5, "title": "Data"}})
    assert for_sheet(sheet).to_grid_range().sheet_id == 5


def test_for_sheet_without_id() -> None:
    assert for_sheet(Sheet(properties=SheetProperties(title="Data"))).sheet_id is None


def test_for_grid_range(ten_by_ten: GridRange) -> None:
    assert for_grid_range(ten_by_ten).with_sheet_name("Test").to_range() == "Test!A1:J10"


def test_for_grid_range_requires_sheet_name_for_string(ten_by_ten: GridRange) -> None:
    with pytest.raises(IllegalRangeStateError, match="Sheet name is not set"):
        for_grid_range(ten_by_ten).to_range()


def test_for_grid_range_coordinates(ten_by_ten: GridRange) -> None:
    ctx = for_grid_range(ten_by_ten).with_sheet_name("Test")
    start = ctx.to_start_grid_coordinate()
    end = ctx.to_end_grid_coordinate()
    assert (start.column_index, start.row_index) == (0, 0)
    assert (end.column_index, end.row_index) == (9, 9)


def test_for_grid_range_round_trip(ten_by_ten: GridRange) -> None:
    assert for_grid_range(ten_by_ten).to_grid_range() == ten_by_ten


def test_for_grid_range_unbounded_axes() -> None:
    columns = GridRange(sheet_id=1, start_column_index=2, end_column_index=4)
    assert for_grid_range(columns).with_sheet_name("Test").to_range() == "Test!C:D"

    rows_from_anchor = GridRange(start_row_index=3, end_row_index=20, start_column_index=1)
    assert for_grid_range(rows_from_anchor).with_sheet_name("T").to_range() == "T!B4:20"

    whole_sheet = GridRange(sheet_id=0)
    ctx = for_grid_range(whole_sheet).with_sheet_name("Test")
    assert ctx.to_range() == "Test"
    assert ctx.to_grid_range() == whole_sheet


def test_for_grid_range_missing_start_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="sheetranges"):
        for_grid_range(GridRange(end_row_index=2))
    assert any("anchoring at 0" in record.message for record in caplog.records)


def test_for_grid_range_missing_start_is_zero() -> None:
    grid = GridRange(end_column_index=3, end_row_index=2)
    assert for_grid_range(grid).with_sheet_name("Test").to_range() == "Test!A1:C2"


def test_for_grid_range_empty_axis_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="must be greater than start"):
        for_grid_range(GridRange(start_row_index=4, end_row_index=4))


def test_for_start_grid_coordinate() -> None:
    start = GridCoordinate(sheet_id=0, column_index=0, row_index=0)
    ctx = for_start_grid_coordinate(start).with_sheet_name("Test").with_width(10).with_height(10)
    assert ctx.to_range() == "Test!A1:J10"
    assert for_grid_coordinate is for_start_grid_coordinate


def test_for_start_grid_coordinate_alone_is_not_a_range() -> None:
    ctx = for_start_grid_coordinate(GridCoordinate(column_index=2, row_index=3))
    with pytest.raises(IllegalRangeStateError):
        ctx.with_sheet_name("Test").to_range()
    assert ctx.to_start_grid_coordinate() == GridCoordinate(column_index=2, row_index=3)


def test_for_range_translate() -> None:
    assert for_range("Test!A1:B2").translate(5, 5).to_range() == "Test!F6:G7"
    assert for_range("Test!A1:D6").translate(3, 5).to_range() == "Test!D6:G11"
    assert for_range("Test!A1:D6").translate(3, 0).to_range() == "Test!D1:G6"
    assert for_range("Test!A1").translate(3, 5).to_range() == "Test!D6"


def test_for_range_edits() -> None:
    assert for_range("Test!A13:C15").expand_columns(3).expand_rows(5).to_range() == "Test!A13:F20"
    assert for_range("Test!A4:C40").clear_end_column().clear_start_column().to_range() == "Test!4:40"
    assert for_range("Test!A1:C10").clear_end_row().clear_start_row().to_range() == "Test!A:C"
    assert (
        for_range("'Brian''s Sheet'!B:D4").with_start_cell("A10").to_range()
        == "'Brian''s Sheet'!A10:D"
    )
    assert (
        for_range("'Today''s report'").with_start_cell("D1").with_end_cell("A10").to_range()
        == "'Today''s report'!A1:D10"
    )


@pytest.mark.parametrize(
    "factory", [for_sheet, for_grid_range, for_start_grid_coordinate, for_range]
)
def test_none_inputs_raise_missing_input(factory: object) -> None:
    with pytest.raises(MissingInputError):
        factory(None)  # type: ignore[operator]
