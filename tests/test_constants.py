import pytest

from magpie.constants import (
    BLANK_MASK,
    UNBLANK_MASK,
    MoveType,
    blank,
    is_blanked,
    unblank,
)


def test_blank_sets_mask():
    assert blank(1) == (1 | BLANK_MASK)
    assert blank(5) == (5 | BLANK_MASK)


def test_unblank_clears_mask():
    assert unblank(1) == (1 & UNBLANK_MASK)
    assert unblank(5) == (5 & UNBLANK_MASK)


@pytest.mark.parametrize("ml", range(1, 50))
def test_blank_round_trip(ml):
    blanked = blank(ml)
    assert is_blanked(blanked)
    assert not is_blanked(ml)
    assert unblank(blanked) == ml


def test_blank_is_idempotent():
    assert blank(blank(7)) == blank(7)


@pytest.mark.parametrize(
    "value,expected",
    [(0, "PLAY"), (1, "EXCHANGE"), (2, "PASS")],
)
def test_move_type_lookup_by_value(value, expected):
    assert MoveType(value).name == expected


def test_move_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        MoveType(3)