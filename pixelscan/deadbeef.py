"""The small, fast "deadbeef" pseudo-random number generator."""

from __future__ import annotations

import time

DEADBEEF_MAX = 0xFFFFFFFF
_BEEF = 0xDEADBEEF
_CLOCKS_PER_SEC = 1_000_000


def generate_seed() -> int:
    """Derive a 32-bit seed from the wall clock, CPU clock and an address."""
    t = int(time.time()) & DEADBEEF_MAX
    c = int(time.process_time() * _CLOCKS_PER_SEC) & DEADBEEF_MAX
    marker = object()
    return ((t << 24) ^ (c << 11) ^ t ^ id(marker)) & DEADBEEF_MAX


class DeadbeefRandom:
    """A deadbeef generator with its own state."""

    __slots__ = ("_seed", "_beef")

    def __init__(self, initial_seed: int = 0) -> None:
        self._seed = 0
        self._beef = _BEEF
        self.seed(initial_seed)

    def seed(self, x: int) -> None:
        """Reset the generator to the given 32-bit seed."""
        self._seed = x & DEADBEEF_MAX
        self._beef = _BEEF

    def seed_from_time(self) -> int:
        """Seed from :func:`generate_seed` and return the seed used."""
        value = generate_seed()
        self.seed(value)
        return value

    def rand(self) -> int:
        """Return the next integer in [0, DEADBEEF_MAX]."""
        seed, beef = self._seed, self._beef
        self._seed = ((seed << 7) ^ ((seed >> 25) + beef)) & DEADBEEF_MAX
        self._beef = ((beef << 7) ^ ((beef >> 25) + _BEEF)) & DEADBEEF_MAX
        return self._seed

    def uniform(self, a: float, b: float) -> float:
        """Return a float in [a, b)."""
        return a + self.rand() / (DEADBEEF_MAX / (b - a) + 1)

    def randrange(self, a: int, b: int) -> int:
        """Return an integer in [a, b)."""
        return int(self.uniform(a, b))