"""Words formed on the board by a play."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .constants import ALPHABET_EMPTY_SQUARE_MARKER, PLAYED_THROUGH_MARKER, unblank


@dataclass
class FormedWord:
    """A word as unblanked machine letters; validity is unknown until checked."""

    word: tuple[int, ...]
    valid: bool = False


def words_played(
    board: Sequence[Sequence[int]],
    word: Sequence[int],
    row: int,
    col: int,
    vertical: bool,
) -> list[FormedWord]:
    """Return the cross words made by fresh tiles, then the main word last."""
    if vertical:
        row, col = col, row

    def letter_at(r: int, c: int) -> int:
        return board[c][r] if vertical else board[r][c]

    def is_empty(r: int, c: int) -> bool:
        return letter_at(r, c) == ALPHABET_EMPTY_SQUARE_MARKER

    dim = len(board)
    formed: list[FormedWord] = []
    main_word: list[int] = []

    for offset, ml in enumerate(word):
        c = col + offset
        fresh = ml != PLAYED_THROUGH_MARKER
        if not fresh:
            ml = letter_at(row, c)
        ml = unblank(ml)
        main_word.append(ml)

        has_cross = (row > 0 and not is_empty(row - 1, c)) or (
            row < dim - 1 and not is_empty(row + 1, c)
        )
        if not (fresh and has_cross):
            continue

        begin = row
        while begin > 0 and not is_empty(begin - 1, c):
            begin -= 1
        end = row
        while end < dim - 1 and not is_empty(end + 1, c):
            end += 1

        cross = tuple(
            ml if r == row else unblank(letter_at(r, c)) for r in range(begin, end + 1)
        )
        formed.append(FormedWord(cross))

    formed.append(FormedWord(tuple(main_word)))
    return formed