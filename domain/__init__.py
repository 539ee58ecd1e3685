"""
Domain entities for the terminal Snake game.

This module contains the core game entities that are independent of
terminal and input concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, QUIT, VALID_MOVES, OPPOSITES,
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_FRAME_DURATION_MS,
)
from .position import Position
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'QUIT', 'VALID_MOVES', 'OPPOSITES',
    'DEFAULT_WIDTH', 'DEFAULT_HEIGHT', 'DEFAULT_FRAME_DURATION_MS',
    'Position',
    'Snake',
    'GameState',
]
