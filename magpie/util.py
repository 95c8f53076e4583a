"""Small text helpers."""

from __future__ import annotations

from typing import Callable, Sequence


def contains_all_whitespace(text: str) -> bool:
    """Whether every character of the text is whitespace (true when empty)."""
    return all(ch.isspace() for ch in text)


def rack_to_string(counts: Sequence[int], letter_text: Callable[[int], str]) -> str:
    """Render a rack given as per-letter counts, in machine-letter order."""
    return "".join(
        letter_text(ml) * count for ml, count in enumerate(counts) if count > 0
    )