from __future__ import annotations

import pytest

from sheetranges import GridRange


@pytest.fixture
def ten_by_ten() -> GridRange:
    """GridRange covering A1:J10 on sheet 0."""
    return GridRange(
        sheet_id=0,
        start_column_index=0,
        start_row_index=0,
        end_column_index=10,
        end_row_index=10,
    )
