"""
Ludo Rules - Dice

The random source for the match. Presentation delays around a roll are
the caller's business; the controller only needs the value.
"""

import random

from ludo_rules.engine.base import DIE_FACES


class Dice:
    """A single D6 with its own random generator."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self.last_rolled_value: int | None = None

    def roll(self) -> int:
        """Roll the die.

        Returns:
            Random value 1-6
        """
        self.last_rolled_value = self._rng.randint(1, DIE_FACES)
        return self.last_rolled_value
