"""Shared fixtures: pygame on the dummy driver, fake timers, scripted food"""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from snake_arcade.engine import Game
from snake_arcade.food import FoodSpawner
from snake_arcade.model import Variant
from snake_arcade.scheduler import Scheduler
from snake_arcade.storage import HighScoreStore


class FakeScheduler(Scheduler):
    """Records timer calls instead of arming pygame timers"""

    def __init__(self):
        super().__init__()
        self.ticker_starts = []
        self.active_tickers = 0
        self.expiries = []
        self.cancelled_expiries = 0

    def _arm_ticker(self, interval_ms):
        self.ticker_starts.append(interval_ms)
        self.active_tickers += 1

    def _disarm_ticker(self):
        self.active_tickers -= 1

    def _arm_expiry(self, delay_ms, serial):
        self.expiries.append((delay_ms, serial))

    def _disarm_expiry(self):
        self.cancelled_expiries += 1


class ScriptedSpawner(FoodSpawner):
    """Hands out queued positions first and fixed special food rolls"""

    def __init__(self, positions=(), special=False, variant=Variant.BENEFICIAL):
        super().__init__(random.Random(0))
        self.positions = list(positions)
        self.special = special
        self.variant = variant

    def generate_position(self, snake):
        if self.positions:
            return self.positions.pop(0)
        return super().generate_position(snake)

    def should_spawn_special(self):
        return self.special

    def pick_variant(self):
        return self.variant


@pytest.fixture(autouse=True)
def pygame_ready():
    pygame.init()
    yield


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(tmp_path / "high_score.json")


@pytest.fixture
def spawner():
    return ScriptedSpawner()


@pytest.fixture
def game(scheduler, store, spawner):
    game = Game(scheduler=scheduler, store=store, spawner=spawner)
    game.load_high_score()
    game.start_game()
    return game
