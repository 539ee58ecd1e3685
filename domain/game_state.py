"""
GameState entity - the single state bundle owned by the game loop.
"""

from typing import Optional

from .constants import (
    RIGHT, BORDER_GLYPH, SNAKE_GLYPH, FOOD_GLYPH,
)
from .position import Position
from .snake import Snake


class GameState:
    """
    Everything the game loop knows about the current game.

    Attributes:
        width, height: board dimensions, border included
        snake: the Snake (head first)
        direction: current direction of travel
        food: position of the food, or None once the board is full
        score: number of food items eaten
        frame_number: frames processed so far (0-based)
        running: False once the game has terminated
        end_reason: why the game ended ('wall', 'self', 'quit', 'board_full')
    """

    def __init__(
        self,
        width: int,
        height: int,
        snake: Snake,
        direction: str = RIGHT,
        food: Optional[Position] = None,
        score: int = 0,
    ):
        self.width = width
        self.height = height
        self.snake = snake
        self.direction = direction
        self.food = food
        self.score = score
        self.frame_number = 0
        self.running = True
        self.end_reason: Optional[str] = None

    def is_interior(self, position) -> bool:
        """True if `position` lies strictly inside the border."""
        x, y = position
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    @property
    def interior_area(self) -> int:
        return (self.width - 2) * (self.height - 2)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = border
        O = snake segment
        * = food
        . = empty interior cell
        Row 0 is the top of the screen; the score line follows the board.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for x in range(self.width):
            board[0][x] = BORDER_GLYPH
            board[self.height - 1][x] = BORDER_GLYPH
        for y in range(self.height):
            board[y][0] = BORDER_GLYPH
            board[y][self.width - 1] = BORDER_GLYPH

        for x, y in self.snake:
            board[y][x] = SNAKE_GLYPH

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = FOOD_GLYPH

        result = [''.join(row) for row in board]
        result.append(f"Score: {self.score}")
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState frame={self.frame_number}, head={self.snake.head}, "
            f"direction={self.direction}, food={self.food}, score={self.score}, "
            f"running={self.running}>"
        )
