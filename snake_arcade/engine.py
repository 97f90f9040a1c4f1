"""
Snake game engine

Owns the game state and applies every rule: starting a game, advancing the
snake one cell per tick, collisions, food consumption, special food
lifecycle, speed changes and the end of a game. Timers are driven through a
Scheduler so the engine itself never touches pygame.
"""

import logging
from collections import deque
from typing import Optional

from snake_arcade.config import (
    BASE_SPEED,
    BENEFICIAL_EXTRA_SEGMENTS,
    BENEFICIAL_POINTS,
    HARMFUL_PENALTY,
    MIN_SPEED,
    POINTS_PER_SPEED_STEP,
    SPECIAL_FOOD_LIFETIME,
    SPEED_STEP,
    START_CELL,
)
from snake_arcade.food import FoodSpawner
from snake_arcade.model import PLACEHOLDER, Cell, Direction, GameState, SpecialFood, Variant
from snake_arcade.scheduler import Scheduler
from snake_arcade.storage import HighScoreStore

logger = logging.getLogger(__name__)


def speed_for_score(score: int) -> int:
    """Tick interval in ms: 10 ms faster every 4 points, never below 60"""
    return max(BASE_SPEED - (score // POINTS_PER_SPEED_STEP) * SPEED_STEP, MIN_SPEED)


class Game:
    """Rules and state of one Snake session (many games, one high score)"""

    def __init__(self, scheduler: Scheduler, store: HighScoreStore,
                 spawner: Optional[FoodSpawner] = None):
        self.scheduler = scheduler
        self.store = store
        self.spawner = spawner or FoodSpawner()
        self.state = GameState()
        self._special_serial = 0

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell[0] < self.spawner.width and 0 <= cell[1] < self.spawner.height

    # -- initialization --------------------------------------------------

    def load_high_score(self):
        """Pull the persisted best score into the state"""
        self.state.high_score = self.store.load()
        logger.info("Loaded high score %d", self.state.high_score)

    def start_game(self):
        """Reset everything but the high score and start ticking"""
        state = self.state
        state.snake = deque([START_CELL])
        state.food = self.spawner.generate_position(state.snake)
        state.special_food = None
        self.scheduler.cancel_expiry()

        state.direction = Direction.RIGHT
        state.score = 0
        state.game_speed = BASE_SPEED
        state.game_over = False
        state.won = False
        state.new_record = False

        self.scheduler.start_ticker(state.game_speed)
        logger.info("New game started")

    # -- special food ----------------------------------------------------

    def spawn_special_food(self):
        """Place a bonus or penalty item that disappears after 5 seconds"""
        state = self.state
        if state.special_food_active:
            return

        variant = self.spawner.pick_variant()
        position = self.spawner.generate_position(state.snake)
        if position is None:
            return

        self._special_serial += 1
        state.special_food = SpecialFood(
            position=position,
            variant=variant,
            color=variant.color,
            serial=self._special_serial,
        )
        self.scheduler.start_expiry(SPECIAL_FOOD_LIFETIME, self._special_serial)
        logger.debug("Spawned %s special food at %s", variant.value, position)

    def expire_special_food(self, serial: int):
        """Expiry timer callback; ignores timers of already replaced items"""
        self.scheduler.expiry_fired(serial)
        special = self.state.special_food
        if special is None or special.serial != serial:
            logger.debug("Ignoring stale special food expiry #%d", serial)
            return
        self.state.special_food = None
        logger.debug("Special food #%d expired", serial)

    # -- update ----------------------------------------------------------

    def update_game_speed(self):
        """Re-derive the tick interval from the score and restart the ticker"""
        self.state.game_speed = speed_for_score(self.state.score)
        self.scheduler.start_ticker(self.state.game_speed)

    def update(self):
        """Advance the snake one cell and resolve what it runs into"""
        state = self.state
        if state.game_over:
            return

        head = state.direction.step(state.head)

        if not self.in_bounds(head):
            logger.debug("Hit the wall at %s", head)
            return self.end_game()
        if head in state.snake:
            logger.debug("Hit own body at %s", head)
            return self.end_game()

        state.snake.appendleft(head)
        ate_food = False

        if head == state.food:
            ate_food = True
            state.score += 1
            state.food = self.spawner.generate_position(state.snake)
            if state.food is None:
                return self.end_game(won=True)
            self.update_game_speed()
            if self.spawner.should_spawn_special():
                self.spawn_special_food()
        elif state.special_food_active and head == state.special_food.position:
            ate_food = True
            self.scheduler.cancel_expiry()
            if state.special_food.variant is Variant.HARMFUL:
                state.score = max(0, state.score - HARMFUL_PENALTY)
                # No growth for this step, then one segment less
                state.snake.pop()
                if len(state.snake) > 1:
                    state.snake.pop()
            else:
                state.score += BENEFICIAL_POINTS
                state.snake.extend([PLACEHOLDER] * BENEFICIAL_EXTRA_SEGMENTS)
            state.special_food = None
            self.update_game_speed()

        if not ate_food:
            state.snake.pop()

    # -- end of game -----------------------------------------------------

    def end_game(self, won: bool = False):
        """Stop ticking and record a new best score if there is one"""
        state = self.state
        state.game_over = True
        state.won = won
        self.scheduler.stop_ticker()

        if state.score > state.high_score:
            state.high_score = state.score
            state.new_record = True
            self.store.save(state.high_score)
            logger.info("New high score: %d", state.high_score)

        logger.info("Game over%s, score %d (length %d)",
                    " - board cleared" if won else "", state.score, len(state.snake))

    # -- input -----------------------------------------------------------

    def handle_direction_change(self, new_direction: Direction):
        """Turn unless it would reverse straight into the body"""
        if new_direction is not self.state.direction.opposite:
            self.state.direction = new_direction
