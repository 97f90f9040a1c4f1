"""Game entities: cells, directions, special food and the shared game state"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Optional, Tuple

from snake_arcade.config import (
    BASE_SPEED,
    BENEFICIAL_FOOD_COLOR,
    HARMFUL_FOOD_COLOR,
    START_CELL,
)

Cell = Tuple[int, int]

# Growth placeholder appended by beneficial special food. It occupies a tail
# slot until the tail moves past it; it is never drawn and never collides.
PLACEHOLDER = None


class Direction(Enum):
    """Travel direction with its grid delta"""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def step(self, cell: Cell) -> Cell:
        """Cell one grid unit away in this direction"""
        dx, dy = self.delta
        return (cell[0] + dx, cell[1] + dy)


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Variant(Enum):
    BENEFICIAL = "beneficial"
    HARMFUL = "harmful"

    @property
    def color(self) -> Tuple[int, int, int]:
        return HARMFUL_FOOD_COLOR if self is Variant.HARMFUL else BENEFICIAL_FOOD_COLOR


@dataclass
class SpecialFood:
    """Transient bonus/penalty item; serial ties it to its expiry timer"""
    position: Cell
    variant: Variant
    color: Tuple[int, int, int]
    serial: int


@dataclass
class GameState:
    """Everything that is reset when a new game starts, plus the high score"""
    snake: Deque[Optional[Cell]] = field(default_factory=lambda: deque([START_CELL]))
    food: Optional[Cell] = None
    special_food: Optional[SpecialFood] = None
    direction: Direction = Direction.RIGHT
    score: int = 0
    high_score: int = 0
    game_speed: int = BASE_SPEED
    game_over: bool = False
    won: bool = False
    new_record: bool = False

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def special_food_active(self) -> bool:
        return self.special_food is not None

    def occupied(self) -> set:
        """Real snake cells, placeholders excluded"""
        return {segment for segment in self.snake if segment is not PLACEHOLDER}
