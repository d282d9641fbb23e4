"""Six-sided dice."""

import random
import time


class Dice:
    """A pair-capable six-sided die driven by a random generator."""

    SIDES = 6

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random(int(time.time()))

    def roll(self) -> int:
        """Roll once and return a value from 1 to 6."""
        return self._rng.randint(1, self.SIDES)

    def roll_pair(self) -> tuple[int, int]:
        """Roll two dice."""
        return self.roll(), self.roll()