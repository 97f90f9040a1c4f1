"""Tests for food.py - food placement and special food rolls."""

import random

import pytest

from snake_arcade.food import FoodSpawner
from snake_arcade.model import PLACEHOLDER, Variant


class FixedRandom(random.Random):
    """random() always returns the same value"""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


class TestGeneratePosition:
    """Tests for FoodSpawner.generate_position."""

    @pytest.mark.parametrize("seed", range(10))
    def test_never_on_snake(self, seed):
        """Positions avoid every snake cell."""
        spawner = FoodSpawner(random.Random(seed), width=4, height=4)
        snake = [(x, y) for x in range(4) for y in range(4) if (x, y) != (2, 3)]
        assert spawner.generate_position(snake) == (2, 3)

    def test_within_bounds(self):
        """Positions stay on the board."""
        spawner = FoodSpawner(random.Random(5))
        for _ in range(200):
            x, y = spawner.generate_position([(10, 10)])
            assert 0 <= x < 20 and 0 <= y < 20

    def test_full_board_returns_none(self):
        """No free cell means no position."""
        spawner = FoodSpawner(random.Random(1), width=2, height=2)
        assert spawner.generate_position([(0, 0), (0, 1), (1, 0), (1, 1)]) is None

    def test_placeholders_do_not_occupy(self):
        """Growth placeholders are not counted as snake cells."""
        spawner = FoodSpawner(random.Random(2), width=2, height=1)
        assert spawner.generate_position([(0, 0), PLACEHOLDER, PLACEHOLDER]) == (1, 0)


class TestRolls:
    """Tests for the special food dice."""

    @pytest.mark.parametrize("value,expected", [(0.0, True), (0.2499, True), (0.25, False), (0.9, False)])
    def test_special_chance(self, value, expected):
        """Special food appears on rolls below 0.25."""
        assert FoodSpawner(FixedRandom(value)).should_spawn_special() is expected

    @pytest.mark.parametrize("value,variant", [(0.1, Variant.HARMFUL), (0.5, Variant.BENEFICIAL)])
    def test_variant_split(self, value, variant):
        """Harmful below 0.5, beneficial otherwise."""
        assert FoodSpawner(FixedRandom(value)).pick_variant() is variant

    def test_roughly_a_quarter(self):
        """Over many rolls about a quarter spawn special food."""
        spawner = FoodSpawner(random.Random(42))
        hits = sum(spawner.should_spawn_special() for _ in range(10000))
        assert 2200 < hits < 2800
