"""
Application shell: window, event loop and command line

Every callback (ticks, special food expiry, keys, clicks) is taken off the
single pygame event queue and handled to completion before the next one, so
the game state never sees two handlers at once.

Run with: python -m snake_arcade
For headless testing: python -m snake_arcade --headless --ticks 300
"""

import argparse
import logging
import os
import random
import sys
from pathlib import Path
from typing import List, Optional

import pygame

from snake_arcade import __version__
from snake_arcade.config import WINDOW_HEIGHT, WINDOW_WIDTH, Settings, validate_board
from snake_arcade.controls import QUIT, RESTART, ControlPad, key_action
from snake_arcade.engine import Game
from snake_arcade.food import FoodSpawner
from snake_arcade.model import Direction, GameState
from snake_arcade.renderer import Renderer
from snake_arcade.scheduler import SPECIAL_FOOD_EXPIRED, TICK_EVENT, PygameScheduler
from snake_arcade.storage import HighScoreStore

logger = logging.getLogger(__name__)


def autopilot(state: GameState, width: int, height: int) -> Optional[Direction]:
    """Greedy pick for headless runs: closest safe step toward the food"""
    body = state.occupied()
    target = state.food or state.head
    best = None
    best_distance = None
    for direction in Direction:
        if direction is state.direction.opposite:
            continue
        x, y = direction.step(state.head)
        if not (0 <= x < width and 0 <= y < height) or (x, y) in body:
            continue
        distance = abs(x - target[0]) + abs(y - target[1])
        if best_distance is None or distance < best_distance:
            best, best_distance = direction, distance
    return best


class App:
    """Main window and event loop"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake")

        self.pad = ControlPad()
        self.scheduler = PygameScheduler()
        self.game = Game(
            scheduler=self.scheduler,
            store=HighScoreStore(settings.high_score_file),
            spawner=FoodSpawner(random.Random(settings.seed)),
        )

        self.renderer = Renderer(self.screen, self.pad)

    def start(self):
        self.game.load_high_score()
        self.game.start_game()
        self.redraw()

    def redraw(self):
        self.renderer.draw(self.game.state)
        pygame.display.flip()

    def apply(self, action) -> bool:
        """Carry out a control action, return False to quit"""
        if action == QUIT:
            return False
        if action == RESTART:
            self.game.start_game()
            self.redraw()
        elif isinstance(action, Direction):
            self.game.handle_direction_change(action)
        return True

    def handle_event(self, event) -> bool:
        """Dispatch one event, return False when the app should exit"""
        if event.type == pygame.QUIT:
            return False

        if event.type == TICK_EVENT:
            self.game.update()
            self.redraw()
        elif event.type == SPECIAL_FOOD_EXPIRED:
            self.game.expire_special_food(event.serial)
        elif event.type == pygame.KEYDOWN:
            return self.apply(key_action(event.key))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self.apply(self.pad.hit(event.pos, self.game.state.game_over))
        elif event.type == pygame.VIDEOEXPOSE:
            self.redraw()
        return True

    def run(self):
        """Block on the event queue until the window is closed"""
        self.start()
        running = True
        while running:
            running = self.handle_event(pygame.event.wait())

    def run_headless(self, ticks: int) -> int:
        """Drive the game for a number of ticks with the autopilot steering"""
        self.start()
        state = self.game.state
        for _ in range(ticks):
            # Ticks are synthesised here; queued timer ticks are dropped
            for event in pygame.event.get():
                if event.type != TICK_EVENT and not self.handle_event(event):
                    return state.score
            direction = autopilot(state, self.game.spawner.width, self.game.spawner.height)
            if direction is not None:
                self.game.handle_direction_change(direction)
            self.handle_event(pygame.event.Event(TICK_EVENT))
            if state.game_over:
                break
        return state.score


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snake-arcade", description="Classic grid Snake")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window using the dummy SDL driver")
    parser.add_argument("--ticks", type=int, help="Number of ticks to play in headless mode")
    parser.add_argument("--seed", type=int, help="Seed for food placement")
    parser.add_argument("--high-score-file", type=Path, help="Where the best score is kept")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_settings(argv: Optional[List[str]] = None) -> Settings:
    """Environment defaults overridden by command line flags"""
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    if args.headless:
        settings.headless = True
    if args.ticks is not None:
        settings.ticks = args.ticks
    if args.seed is not None:
        settings.seed = args.seed
    if args.high_score_file is not None:
        settings.high_score_file = args.high_score_file
    if args.log_level:
        settings.log_level = args.log_level
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    settings = parse_settings(argv)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    validate_board()

    # SDL reads the driver when the display initialises
    if settings.headless:
        os.environ["SDL_VIDEODRIVER"] = "dummy"
        os.environ["SDL_AUDIODRIVER"] = "dummy"

    pygame.init()
    try:
        app = App(settings)
        if settings.headless:
            logger.info("Running in headless mode for %d ticks", settings.ticks)
            score = app.run_headless(settings.ticks)
            state = app.game.state
            print(f"Headless run complete. Score: {score}  High: {state.high_score}  "
                  f"Length: {len(state.snake)}  Game over: {state.game_over}")
        else:
            app.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
