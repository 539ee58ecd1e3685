"""
Base player interface for the game loop.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    Each player is asked once per frame for the input to apply before the
    snake moves.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return the input for this frame given the current game state.

        Args:
            game_state: Current state of the game (read-only for players)

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", "QUIT", or None for no input
        """
        raise NotImplementedError
