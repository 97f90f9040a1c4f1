"""Tests for controls.py - keyboard and on-screen buttons."""

import pygame
import pytest

from snake_arcade.config import WINDOW_HEIGHT, WINDOW_WIDTH
from snake_arcade.controls import QUIT, RESTART, ControlPad, key_action
from snake_arcade.model import Direction


class TestKeys:
    """Tests for key_action."""

    @pytest.mark.parametrize("key,action", [
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_w, Direction.UP),
        (pygame.K_d, Direction.RIGHT),
        (pygame.K_r, RESTART),
        (pygame.K_SPACE, RESTART),
        (pygame.K_ESCAPE, QUIT),
    ])
    def test_mapping(self, key, action):
        """Arrows and WASD steer, R/Space restart, Esc quits."""
        assert key_action(key) == action

    def test_unmapped_key(self):
        """Other keys do nothing."""
        assert key_action(pygame.K_z) is None


class TestControlPad:
    """Tests for ControlPad hit testing."""

    @pytest.fixture
    def pad(self):
        return ControlPad()

    @pytest.mark.parametrize("direction", list(Direction))
    def test_button_centres(self, pad, direction):
        """A click on a button gives its direction."""
        centre = pad.direction_buttons[direction].center
        assert pad.hit(centre, game_over=False) is direction

    def test_buttons_inside_window(self, pad):
        """All buttons fit in the window."""
        window = pygame.Rect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)
        for rect in pad.direction_buttons.values():
            assert window.contains(rect)
        assert window.contains(pad.restart_button)

    def test_buttons_do_not_overlap(self, pad):
        """Direction buttons are separate targets."""
        rects = list(pad.direction_buttons.values())
        for i, a in enumerate(rects):
            for b in rects[i + 1:]:
                assert not a.colliderect(b)

    def test_restart_only_when_game_over(self, pad):
        """The restart button is live only on the overlay."""
        centre = pad.restart_button.center
        assert pad.hit(centre, game_over=True) == RESTART
        assert pad.hit(centre, game_over=False) is None

    def test_click_on_board(self, pad):
        """Clicks elsewhere do nothing."""
        assert pad.hit((5, 60), game_over=False) is None
