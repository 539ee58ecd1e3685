"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from display.base import Display
from domain.constants import QUIT, MOVE_DELTAS, OPPOSITES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autoplay input source that picks a direction avoiding walls,
    self-collisions and reversal.

    If a display is given, its quit key still ends the game.
    """

    def __init__(self, display: Optional[Display] = None, rng: Optional[random.Random] = None):
        self.display = display
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Optional[str]:
        if self.display is not None and self.display.read_key() == QUIT:
            return QUIT

        snake_positions = list(game_state.snake)
        head_x, head_y = snake_positions[0]

        # Filter out moves that:
        # 1. Reverse onto the neck
        # 2. Hit walls
        # 3. Hit own body (the tail counts: it only moves after the check)
        valid_moves: List[str] = []
        for move, (dx, dy) in MOVE_DELTAS.items():
            if move == OPPOSITES[game_state.direction]:
                continue

            new_pos = (head_x + dx, head_y + dy)
            if not game_state.is_interior(new_pos):
                continue

            if new_pos in snake_positions:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going straight (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(sorted(valid_moves))
