"""Reseedable RNG wrapper built on top of random.Random."""
from __future__ import annotations

import time
from random import Random
from typing import Callable

SeedSource = Callable[[], int]


def wall_clock_seed() -> int:
    """Return the current wall-clock time in whole seconds."""
    return int(time.time())


class RNG:
    """Wrapper around random.Random with an explicit reseed hook.

    Services call ``reseed()`` at the points where the game draws fresh
    entropy. Draws taken within the same clock second after a reseed repeat,
    so tests should pass a fixed ``seed_source`` instead of relying on timing.
    """

    def __init__(self, seed: int | None = None, *, seed_source: SeedSource = wall_clock_seed) -> None:
        self._seed_source = seed_source
        self._random = Random(seed_source() if seed is None else seed)

    def reseed(self) -> None:
        """Reseed from the configured seed source."""
        self._random.seed(self._seed_source())

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def randrange(self, stop: int) -> int:
        """Return a random integer N such that 0 <= N < stop."""
        if stop <= 0:
            raise ValueError("Cannot draw from an empty range.")
        return self._random.randrange(stop)
