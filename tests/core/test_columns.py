from __future__ import annotations

from openpyxl.utils import column_index_from_string, get_column_letter
import pytest

from sheetranges.core.columns import column_index_to_letters, letters_to_column_index
from sheetranges.errors import InvalidArgumentError


@pytest.mark.parametrize(
    ("index", "letters"),
    [(0, "A"), (25, "Z"), (26, "AA"), (51, "AZ"), (52, "BA"), (81, "CD"), (701, "ZZ"), (702, "AAA")],
)
def test_column_index_to_letters(index: int, letters: str) -> None:
    assert column_index_to_letters(index) == letters


def test_letters_to_column_index_is_one_based() -> None:
    assert letters_to_column_index("A") == 1
    assert letters_to_column_index("Z") == 26
    assert letters_to_column_index("AA") == 27
    assert letters_to_column_index("CD") == 82


def test_codec_inverse_up_to_zzz() -> None:
    for index in range(18278):
        assert letters_to_column_index(column_index_to_letters(index)) - 1 == index


def test_codec_matches_openpyxl() -> None:
    for index in range(0, 18278, 7):
        letters = column_index_to_letters(index)
        assert letters == get_column_letter(index + 1)
        assert letters_to_column_index(letters) == column_index_from_string(letters)


def test_no_upper_limit_on_columns() -> None:
    assert column_index_to_letters(18278) == "AAAA"


def test_negative_index_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="non-negative"):
        column_index_to_letters(-1)


@pytest.mark.parametrize("letters", ["", "a", "A1", "Ä"])
def test_invalid_letters_rejected(letters: str) -> None:
    with pytest.raises(InvalidArgumentError, match="Invalid column letters"):
        letters_to_column_index(letters)
