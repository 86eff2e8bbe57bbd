# seeded_random.py
# ------------------------------------------------------------
# Mulberry32 PRNG.
# All arithmetic is done on unsigned 32-bit ints so the output
# sequence matches the JavaScript (Math.imul / >>>) reference
# bit for bit.
# ------------------------------------------------------------

from typing import Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
TWO_32 = 4294967296.0


def imul32(a: int, b: int) -> int:
    return (a * b) & MASK32


class SeededRandom:
    def __init__(self, seed: int):
        self.state = int(seed) & MASK32

    def next(self) -> float:
        """Return a float in [0, 1)."""
        self.state = (self.state + 0x6D2B79F5) & MASK32
        s = self.state
        t = imul32(s ^ (s >> 15), 1 | s)
        t = ((t + imul32(t ^ (t >> 7), 61 | t)) & MASK32) ^ t
        return ((t ^ (t >> 14)) & MASK32) / TWO_32

    def int_range(self, lo: int, hi: int) -> int:
        """Random integer in [lo, hi], both ends inclusive."""
        return int(self.next() * (hi - lo + 1)) + lo

    def pick(self, seq: Sequence[T]) -> T:
        return seq[int(self.next() * len(seq))]
