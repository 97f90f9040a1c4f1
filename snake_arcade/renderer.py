"""
Rendering

The board is repainted from scratch with flat colors after every tick. The
window around it holds the score panel, the on-screen control pad and, once
a game ends, the game over overlay.
"""

from typing import Dict, List, Tuple

import pygame

from snake_arcade.config import (
    ACCENT_COLOR,
    BACKGROUND_COLOR,
    BODY_COLOR,
    BUTTON_BORDER,
    BUTTON_COLOR,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    FOOD_COLOR,
    GAME_OVER_COLOR,
    GRID_SIZE,
    HEAD_COLOR,
    OVERLAY_COLOR,
    PANEL_HEIGHT,
    PANEL_TEXT_COLOR,
    WINDOW_BG,
    WINDOW_WIDTH,
)
from snake_arcade.controls import ControlPad
from snake_arcade.model import PLACEHOLDER, Cell, Direction, GameState

Rect = Tuple[int, int, int, int]

# Eyes and mouth cut out of the head, relative to the head cell's corner.
# The mouth always faces the direction of travel.
FACE_RECTS: Dict[Direction, List[Rect]] = {
    Direction.UP: [(4, 12, 4, 4), (12, 12, 4, 4), (4, 4, 12, 4)],
    Direction.DOWN: [(4, 4, 4, 4), (12, 4, 4, 4), (4, 12, 12, 4)],
    Direction.LEFT: [(12, 4, 4, 4), (12, 12, 4, 4), (4, 4, 4, 12)],
    Direction.RIGHT: [(4, 4, 4, 4), (4, 12, 4, 4), (12, 4, 4, 12)],
}

ARROWS = {
    Direction.UP: [(0.5, 0.25), (0.75, 0.7), (0.25, 0.7)],
    Direction.DOWN: [(0.5, 0.75), (0.25, 0.3), (0.75, 0.3)],
    Direction.LEFT: [(0.25, 0.5), (0.7, 0.25), (0.7, 0.75)],
    Direction.RIGHT: [(0.75, 0.5), (0.3, 0.75), (0.3, 0.25)],
}


def cell_rect(cell: Cell) -> pygame.Rect:
    """Pixel rect of a grid cell on the board surface"""
    return pygame.Rect(cell[0] * GRID_SIZE, cell[1] * GRID_SIZE, GRID_SIZE, GRID_SIZE)


def draw_board(surface: pygame.Surface, state: GameState):
    """Paint background, snake, food and special food"""
    surface.fill(BACKGROUND_COLOR)

    # Body first, the head is drawn on top with its face
    for segment in list(state.snake)[1:]:
        if segment is PLACEHOLDER:
            continue
        surface.fill(BODY_COLOR, cell_rect(segment))

    head = cell_rect(state.head)
    surface.fill(HEAD_COLOR, head)
    for x, y, w, h in FACE_RECTS[state.direction]:
        surface.fill(BACKGROUND_COLOR, (head.x + x, head.y + y, w, h))

    if state.food is not None:
        surface.fill(FOOD_COLOR, cell_rect(state.food))

    if state.special_food is not None:
        surface.fill(state.special_food.color, cell_rect(state.special_food.position))


class Renderer:
    """Draws the full window"""

    def __init__(self, screen: pygame.Surface, pad: ControlPad):
        self.screen = screen
        self.pad = pad
        self.board = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))
        self.font_large = pygame.font.Font(None, 56)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 28)

    def draw(self, state: GameState):
        self.screen.fill(WINDOW_BG)
        self.draw_panel(state)

        draw_board(self.board, state)
        self.screen.blit(self.board, (0, PANEL_HEIGHT))

        self.draw_pad()
        if state.game_over:
            self.draw_game_over(state)

    def draw_panel(self, state: GameState):
        """Current score on the left, best score on the right"""
        score_surface = self.font_small.render(f"Score: {state.score}", True, PANEL_TEXT_COLOR)
        self.screen.blit(score_surface, (12, (PANEL_HEIGHT - score_surface.get_height()) // 2))

        high_surface = self.font_small.render(f"High: {state.high_score}", True, ACCENT_COLOR)
        self.screen.blit(high_surface, (WINDOW_WIDTH - high_surface.get_width() - 12,
                                        (PANEL_HEIGHT - high_surface.get_height()) // 2))

    def draw_pad(self):
        for direction, rect in self.pad.direction_buttons.items():
            pygame.draw.rect(self.screen, BUTTON_COLOR, rect, border_radius=8)
            pygame.draw.rect(self.screen, BUTTON_BORDER, rect, width=2, border_radius=8)
            points = [(rect.x + fx * rect.w, rect.y + fy * rect.h) for fx, fy in ARROWS[direction]]
            pygame.draw.polygon(self.screen, PANEL_TEXT_COLOR, points)

    def draw_game_over(self, state: GameState):
        """Overlay with final score and restart button"""
        overlay = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        self.screen.blit(overlay, (0, PANEL_HEIGHT))

        center_x = WINDOW_WIDTH // 2
        center_y = PANEL_HEIGHT + CANVAS_HEIGHT // 2

        title = "YOU WIN!" if state.won else "GAME OVER"
        title_surface = self.font_large.render(title, True, GAME_OVER_COLOR)
        self.screen.blit(title_surface, title_surface.get_rect(center=(center_x, center_y - 60)))

        score_surface = self.font_medium.render(f"Final Score: {state.score}", True, PANEL_TEXT_COLOR)
        self.screen.blit(score_surface, score_surface.get_rect(center=(center_x, center_y - 10)))

        if state.new_record:
            record_surface = self.font_small.render("NEW HIGH SCORE!", True, ACCENT_COLOR)
            self.screen.blit(record_surface, record_surface.get_rect(center=(center_x, center_y + 28)))

        button = self.pad.restart_button
        pygame.draw.rect(self.screen, BUTTON_COLOR, button, border_radius=8)
        pygame.draw.rect(self.screen, ACCENT_COLOR, button, width=2, border_radius=8)
        label = self.font_small.render("Restart", True, PANEL_TEXT_COLOR)
        self.screen.blit(label, label.get_rect(center=button.center))
