"""Win-percentage lookup table indexed by spread and unseen tile count."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

MAX_SPREAD = 300
MAX_COLS = 94

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _atof(token: str) -> float:
    """Parse the leading number of a token, or 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(token.lstrip())
    if match is None:
        return 0.0
    try:
        return _to_float32(float(match.group(0)))
    except OverflowError:
        return float("inf") if not match.group(0).startswith("-") else float("-inf")


@dataclass
class WinPct:
    """Table of win probabilities; row 0 holds the largest spread."""

    table: list[list[float]] = field(default_factory=list)
    min_spread: int = -MAX_SPREAD
    max_spread: int = MAX_SPREAD
    max_tiles_unseen: int = MAX_COLS - 1

    def win_pct(self, spread_plus_leftover: int, tiles_unseen: int) -> float:
        """Look up the win probability, clamping both arguments to the table."""
        spread = min(max(spread_plus_leftover, self.min_spread), self.max_spread)
        # A negative count behaves like a huge unsigned one and is clamped.
        if tiles_unseen < 0 or tiles_unseen > self.max_tiles_unseen:
            tiles_unseen = self.max_tiles_unseen
        return self.table[MAX_SPREAD - spread][tiles_unseen]


def parse_winpct(lines: Iterable[str]) -> WinPct:
    """Build a table from CSV lines; the header and first column are skipped."""
    max_rows = MAX_SPREAD * 2 + 1
    iterator = iter(lines)
    next(iterator, None)
    table: list[list[float]] = []
    for line in iterator:
        if len(table) >= max_rows:
            break
        tokens = [token for token in line.split(",") if token]
        table.append([_atof(token) for token in tokens[1:MAX_COLS + 1]])
    return WinPct(table=table)


def load_winpct(path: str | Path) -> WinPct:
    """Read a win-percentage CSV file."""
    with open(path, encoding="utf-8") as handle:
        return parse_winpct(handle)