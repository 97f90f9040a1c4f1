"""
Game configuration

Board geometry, colors and timing live here as module constants. Runtime
options (headless mode, seed, storage location, log level) are collected
into a Settings object by the command line parser in app.py.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Board
GRID_SIZE = 20
CANVAS_WIDTH = 400
CANVAS_HEIGHT = 400
GRID_WIDTH = CANVAS_WIDTH // GRID_SIZE
GRID_HEIGHT = CANVAS_HEIGHT // GRID_SIZE
START_CELL = (10, 10)

# Window layout: score panel on top, board, then the control pad
PANEL_HEIGHT = 48
PAD_HEIGHT = 152
WINDOW_WIDTH = CANVAS_WIDTH
WINDOW_HEIGHT = PANEL_HEIGHT + CANVAS_HEIGHT + PAD_HEIGHT
FPS = 60

# Timing (milliseconds)
BASE_SPEED = 200
MIN_SPEED = 60
SPEED_STEP = 10
POINTS_PER_SPEED_STEP = 4
SPECIAL_FOOD_LIFETIME = 5000

# Special food
SPECIAL_FOOD_CHANCE = 0.25
HARMFUL_CHANCE = 0.5
BENEFICIAL_POINTS = 4
BENEFICIAL_EXTRA_SEGMENTS = 3
HARMFUL_PENALTY = 1

# Colors
BACKGROUND_COLOR = (22, 27, 34)
BODY_COLOR = (72, 202, 228)
HEAD_COLOR = (173, 232, 244)
FOOD_COLOR = (255, 175, 204)
HARMFUL_FOOD_COLOR = (247, 37, 133)
BENEFICIAL_FOOD_COLOR = (255, 234, 0)

# UI colors
WINDOW_BG = (13, 17, 23)
PANEL_TEXT_COLOR = (201, 209, 217)
ACCENT_COLOR = (72, 202, 228)
OVERLAY_COLOR = (0, 0, 0, 180)
GAME_OVER_COLOR = (247, 37, 133)
BUTTON_COLOR = (33, 38, 45)
BUTTON_BORDER = (48, 54, 61)

# Persistence
HIGH_SCORE_KEY = "snakeHighScore"
DEFAULT_HIGH_SCORE_FILE = Path.home() / ".snake_arcade" / "high_score.json"


def validate_board(width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT,
                   cell: int = GRID_SIZE, start=START_CELL):
    """Raise ValueError if the board geometry is unusable"""
    if cell <= 0 or width % cell or height % cell:
        raise ValueError(
            f"canvas {width}x{height} is not a multiple of the cell size {cell}"
        )
    columns, rows = width // cell, height // cell
    if not (0 <= start[0] < columns and 0 <= start[1] < rows):
        raise ValueError(f"start cell {start} lies outside a {columns}x{rows} grid")


@dataclass
class Settings:
    """Runtime options gathered from the command line and environment"""
    headless: bool = False
    ticks: int = 200
    seed: Optional[int] = None
    high_score_file: Path = DEFAULT_HIGH_SCORE_FILE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Defaults overridden by SNAKE_ARCADE_* and SDL environment variables"""
        settings = cls()
        settings.headless = os.environ.get("SDL_VIDEODRIVER") == "dummy"
        path = os.environ.get("SNAKE_ARCADE_HIGH_SCORE_FILE")
        if path:
            settings.high_score_file = Path(path)
        settings.log_level = os.environ.get("SNAKE_ARCADE_LOG_LEVEL", settings.log_level)
        return settings
