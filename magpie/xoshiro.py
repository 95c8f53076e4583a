"""xoshiro256++ pseudo-random generator seeded through splitmix64."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1

XOSHIRO_MAX = _MASK64

_JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C)
_LONG_JUMP = (
    0x76E15D3EFEFDCBBF,
    0xC5004E441C522FB3,
    0x77710069854EE241,
    0x39109BB02ACBE635,
)


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK64


class SplitMix64:
    """Fixed-increment 64-bit splitmix generator."""

    def __init__(self, seed: int) -> None:
        self.state = seed & _MASK64

    def next(self) -> int:
        self.state = (self.state + 0x9E3779B97F4A7C15) & _MASK64
        z = self.state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        return z ^ (z >> 31)


class Xoshiro:
    """xoshiro256++ generator with jump support for parallel streams."""

    def __init__(self, seed: int) -> None:
        self.state: list[int] = [0, 0, 0, 0]
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reseed the state from a splitmix64 stream started at ``seed``."""
        mixer = SplitMix64(seed)
        self.state = [mixer.next() for _ in range(4)]

    def next(self) -> int:
        s = self.state
        result = (_rotl((s[0] + s[3]) & _MASK64, 23) + s[0]) & _MASK64
        t = (s[1] << 17) & _MASK64
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = _rotl(s[3], 45)
        return result

    def _apply_jump(self, table: tuple[int, ...]) -> None:
        acc = [0, 0, 0, 0]
        for word in table:
            for bit in range(64):
                if word & (1 << bit):
                    acc = [a ^ s for a, s in zip(acc, self.state)]
                self.next()
        self.state = acc

    def jump(self) -> None:
        """Advance the state as if by 2**128 calls to :meth:`next`."""
        self._apply_jump(_JUMP)

    def long_jump(self) -> None:
        """Advance the state as if by 2**192 calls to :meth:`next`."""
        self._apply_jump(_LONG_JUMP)

    def copy(self) -> Xoshiro:
        """Return an independent generator with the same state."""
        clone = Xoshiro.__new__(Xoshiro)
        clone.state = list(self.state)
        return clone