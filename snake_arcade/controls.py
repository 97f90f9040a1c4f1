"""
Keyboard and on-screen controls

Both map to the same small set of actions: one of four directions, restart
or quit. The on-screen pad sits below the board and works with mouse clicks
and touch (SDL reports taps as left clicks).
"""

from typing import Dict, Optional, Union

import pygame

from snake_arcade.config import CANVAS_HEIGHT, PANEL_HEIGHT, PAD_HEIGHT, WINDOW_WIDTH
from snake_arcade.model import Direction

RESTART = "restart"
QUIT = "quit"

Action = Union[Direction, str]

KEY_ACTIONS: Dict[int, Action] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_r: RESTART,
    pygame.K_SPACE: RESTART,
    pygame.K_ESCAPE: QUIT,
}

BUTTON_SIZE = 44
BUTTON_GAP = 4


def key_action(key: int) -> Optional[Action]:
    return KEY_ACTIONS.get(key)


class ControlPad:
    """Layout and hit testing of the on-screen buttons"""

    def __init__(self, top: int = PANEL_HEIGHT + CANVAS_HEIGHT, width: int = WINDOW_WIDTH,
                 height: int = PAD_HEIGHT):
        cx = width // 2
        cy = top + height // 2
        step = BUTTON_SIZE + BUTTON_GAP

        def button(dx: int, dy: int) -> pygame.Rect:
            rect = pygame.Rect(0, 0, BUTTON_SIZE, BUTTON_SIZE)
            rect.center = (cx + dx * step, cy + dy * step)
            return rect

        self.direction_buttons: Dict[Direction, pygame.Rect] = {
            Direction.UP: button(0, -1),
            Direction.DOWN: button(0, 1),
            Direction.LEFT: button(-1, 0),
            Direction.RIGHT: button(1, 0),
        }
        # Restart lives on the game over overlay, centred below the final score
        self.restart_button = pygame.Rect(0, 0, 160, 44)
        self.restart_button.center = (width // 2, PANEL_HEIGHT + CANVAS_HEIGHT // 2 + 90)

    def hit(self, pos, game_over: bool) -> Optional[Action]:
        """Action under a click at pos, if any"""
        if game_over and self.restart_button.collidepoint(pos):
            return RESTART
        for direction, rect in self.direction_buttons.items():
            if rect.collidepoint(pos):
                return direction
        return None
