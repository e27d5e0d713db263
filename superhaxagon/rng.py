"""Random number source for level generation."""

from __future__ import annotations

import random


class Twist:
    """A seedable Mersenne Twister returning inclusive integer ranges."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def rand(self, low: float, high: float | None = None) -> int:
        """Return an integer in [low, high], or in [0, low] when high is omitted."""
        if high is None:
            low, high = 0, low
        low, high = int(low), int(high)
        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._random.randint(low, high)