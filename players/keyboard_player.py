"""
Keyboard player - forwards key events from the display.
"""

from typing import Optional

from display.base import Display
from domain.game_state import GameState
from .base import Player


class KeyboardPlayer(Player):
    """A human at the terminal."""

    def __init__(self, display: Display):
        self.display = display

    def get_move(self, game_state: GameState) -> Optional[str]:
        return self.display.read_key()
