"""Rendering of moves in the UCGI text format."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from .constants import PLAYED_THROUGH_MARKER, MoveType


@dataclass
class Move:
    """A play, exchange or pass; a tile of 0 marks a played-through square."""

    move_type: MoveType
    tiles: tuple[int, ...] = ()
    row_start: int = 0
    col_start: int = 0
    vertical: bool = False
    tiles_played: int = 0
    score: int = 0
    equity: float = 0.0

    def __post_init__(self) -> None:
        self.move_type = MoveType(self.move_type)
        self.tiles = tuple(self.tiles)


def format_move(
    move: Move,
    board: Sequence[Sequence[int]],
    letter_text: Callable[[int], str],
) -> str:
    """Return the move as ``8h.WORD``, ``h8.WORD``, ``ex.TILES`` or ``pass``."""
    if move.move_type == MoveType.PASS:
        return "pass"

    shown = move.tiles
    if move.move_type == MoveType.EXCHANGE:
        shown = move.tiles[: move.tiles_played]

    dr, dc = (1, 0) if move.vertical else (0, 1)
    letters = []
    for i, letter in enumerate(shown):
        if letter == PLAYED_THROUGH_MARKER and move.move_type == MoveType.PLAY:
            letter = board[move.row_start + dr * i][move.col_start + dc * i]
        letters.append(letter_text(letter))
    tiles = "".join(letters)

    if move.move_type == MoveType.EXCHANGE:
        return f"ex.{tiles}"

    col = chr(move.col_start + ord("a"))
    row = move.row_start + 1
    coords = f"{col}{row}" if move.vertical else f"{row}{col}"
    return f"{coords}.{tiles}"