"""Food placement and special food rolls"""

import random
from typing import Iterable, Optional

from snake_arcade.config import (
    GRID_HEIGHT,
    GRID_WIDTH,
    HARMFUL_CHANCE,
    SPECIAL_FOOD_CHANCE,
)
from snake_arcade.model import PLACEHOLDER, Cell, Variant


class FoodSpawner:
    """Picks random free cells and rolls the special food dice"""

    def __init__(self, rng: Optional[random.Random] = None,
                 width: int = GRID_WIDTH, height: int = GRID_HEIGHT):
        self.rng = rng or random.Random()
        self.width = width
        self.height = height

    @property
    def capacity(self) -> int:
        return self.width * self.height

    def generate_position(self, snake: Iterable[Optional[Cell]]) -> Optional[Cell]:
        """Random cell not covered by the snake, or None if the board is full"""
        exclude = {segment for segment in snake if segment is not PLACEHOLDER}
        if len(exclude) >= self.capacity:
            return None
        while True:
            pos = (self.rng.randrange(self.width), self.rng.randrange(self.height))
            if pos not in exclude:
                return pos

    def should_spawn_special(self) -> bool:
        """25% roll made after each ordinary food is eaten"""
        return self.rng.random() < SPECIAL_FOOD_CHANCE

    def pick_variant(self) -> Variant:
        return Variant.HARMFUL if self.rng.random() < HARMFUL_CHANCE else Variant.BENEFICIAL
