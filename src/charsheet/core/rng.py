"""Seedable RNG wrapper used for dice rolls."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random so rolls can be reproduced from a seed."""

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def roll_die(self, sides: int) -> int:
        """Roll a single die with the given number of faces."""
        if sides < 1:
            raise ValueError("A die needs at least one side.")
        return self.randint(1, sides)
