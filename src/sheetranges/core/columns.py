from __future__ import annotations

import re

from ..errors import InvalidArgumentError

ALPHABET_LENGTH = 26
_LETTERS_PATTERN = re.compile(r"[A-Z]+")


def column_index_to_letters(index: int) -> str:
    """Convert a zero-based column index to A1 column letters.

    Letters form a bijective base-26 numeral (A=1 ... Z=26), so there is no
    zero digit: 0 -> "A", 25 -> "Z", 26 -> "AA", 51 -> "AZ", 52 -> "BA".

    Args:
        index: Zero-based column index.

    Returns:
        Column letters.

    Raises:
        InvalidArgumentError: If the index is negative.
    """
    if index < 0:
        raise InvalidArgumentError(f"Column index must be non-negative: {index}")
    chunks: list[str] = []
    current = index
    while True:
        current, remainder = divmod(current, ALPHABET_LENGTH)
        chunks.append(chr(ord("A") + remainder))
        if current == 0:
            break
        current -= 1
    return "".join(reversed(chunks))


def letters_to_column_index(letters: str) -> int:
    """Convert A1 column letters to a 1-based column index (A -> 1, AA -> 27).

    Note the result is 1-based, unlike the input of `column_index_to_letters`.

    Raises:
        InvalidArgumentError: If `letters` is empty or not uppercase A-Z.
    """
    if not _LETTERS_PATTERN.fullmatch(letters):
        raise InvalidArgumentError(f"Invalid column letters: {letters!r}")
    index = 0
    for char in letters:
        index = index * ALPHABET_LENGTH + (ord(char) - ord("A") + 1)
    return index
