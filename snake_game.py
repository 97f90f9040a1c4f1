#!/usr/bin/env python3
"""
Snake
A grid Snake game with special food and a saved high score

Features:
- Speed increases every 4 points
- Special food: yellow is worth 4 points and 4 segments, pink costs a point
  and a segment; both vanish after 5 seconds
- Directional face on the snake's head
- Best score kept between sessions
- Arrow keys, WASD or the on-screen pad to steer; R / Space to restart

Run with: python snake_game.py
For headless testing: SDL_VIDEODRIVER=dummy python snake_game.py --headless
"""

import sys

from snake_arcade.app import main

if __name__ == "__main__":
    sys.exit(main())
