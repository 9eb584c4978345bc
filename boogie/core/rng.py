"""Deterministic pseudo-random streams seeded from strings."""

from __future__ import annotations
import math
from typing import Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply."""
    return (a * b) & MASK32


def string_hash(text: str) -> list[int]:
    """
    Hash a string into four 32-bit words (xmur3).

    The string is mixed as UTF-16 code units, so a character outside the
    BMP contributes its two surrogates. Each following word is another
    round of the same mixer, so the four words together seed sfc32's
    128-bit state.
    """
    encoded = text.encode("utf-16-le", "surrogatepass")
    units = [int.from_bytes(encoded[i:i + 2], "little") for i in range(0, len(encoded), 2)]
    h = (1779033703 ^ len(units)) & MASK32
    for unit in units:
        h = _imul(h ^ unit, 3432918353)
        h = ((h << 13) | (h >> 19)) & MASK32

    words = []
    for _ in range(4):
        h = _imul(h ^ (h >> 16), 2246822507)
        h = _imul(h ^ (h >> 13), 3266489909)
        h ^= h >> 16
        words.append(h & MASK32)
    return words


class SeededRng:
    """
    Small fast counter generator (sfc32) over a string seed.

    The 32-bit counter in the state guarantees a period of at least 2**32
    draws; the expected period is around 2**127. Output depends only on
    the seed and the number of draws taken so far.
    """

    def __init__(self, seed: str):
        self.seed = seed
        self._a, self._b, self._c, self._d = string_hash(seed)
        self.draws = 0

    @classmethod
    def for_stream(cls, seed: str, stream: str) -> SeededRng:
        """Independent named stream, e.g. `seed|gen` vs `seed|base`."""
        return cls(f"{seed}|{stream}")

    def next_uint32(self) -> int:
        a, b, c, d = self._a, self._b, self._c, self._d
        t = (a + b) & MASK32
        a = b ^ (b >> 9)
        b = (c + (c << 3)) & MASK32
        c = ((c << 21) | (c >> 11)) & MASK32
        d = (d + 1) & MASK32
        t = (t + d) & MASK32
        c = (c + t) & MASK32
        self._a, self._b, self._c, self._d = a, b, c, d
        self.draws += 1
        return t

    def next_float(self) -> float:
        """Random float in [0, 1)."""
        return self.next_uint32() / 4294967296.0

    def next_int(self, lo: int, hi: int) -> int:
        """Random integer in [lo, hi], both inclusive."""
        return lo + math.floor(self.next_float() * (hi - lo + 1))

    def chance(self, probability: float) -> bool:
        """Bernoulli draw: True with the given probability."""
        return self.next_float() < probability

    def pick(self, items: Sequence[T]) -> T:
        return items[math.floor(self.next_float() * len(items))]

    def weighted_pick(self, items: Sequence[T], weights: Sequence[float]) -> T:
        total = sum(weights)
        r = self.next_float() * total
        for item, weight in zip(items, weights):
            r -= weight
            if r <= 0:
                return item
        return items[-1]

    def state(self) -> tuple[int, int, int, int]:
        return (self._a, self._b, self._c, self._d)
