"""
Tests for the domain entities: Position, Snake and GameState.
"""

import pytest
import sys
import os
from collections import deque

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Position, Snake, GameState, UP, DOWN, LEFT, RIGHT  # noqa: E402


class TestPosition:
    """Tests for the Position value type."""

    @pytest.mark.parametrize("direction, expected", [
        (UP, (5, 4)),
        (DOWN, (5, 6)),
        (LEFT, (4, 5)),
        (RIGHT, (6, 5)),
    ])
    def test_moved(self, direction, expected):
        assert Position(5, 5).moved(direction) == expected

    def test_equals_plain_tuple(self):
        assert Position(3, 4) == (3, 4)
        assert Position(3, 4).x == 3
        assert Position(3, 4).y == 4

    def test_unknown_direction_raises(self):
        with pytest.raises(ValueError):
            Position(1, 1).moved("DIAGONAL")


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake initializes with a single position."""
        snake = Snake([(5, 5)])
        assert list(snake.positions) == [(5, 5)]
        assert snake.alive is True
        assert snake.death_reason is None

    def test_snake_head_and_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)
        assert isinstance(snake.head, Position)

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for cheap head/tail updates."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_push_head_and_drop_tail(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.push_head((6, 5))
        assert list(snake) == [(6, 5), (5, 5), (4, 5)]

        dropped = snake.drop_tail()
        assert dropped == (4, 5)
        assert list(snake) == [(6, 5), (5, 5)]
        assert len(snake) == 2

    def test_contains(self):
        snake = Snake([(5, 5), (4, 5)])
        assert (4, 5) in snake
        assert Position(5, 5) in snake
        assert (6, 5) not in snake

    def test_duplicate_segments_raise(self):
        with pytest.raises(ValueError):
            Snake([(5, 5), (5, 5)])

    def test_empty_snake_raises(self):
        with pytest.raises(ValueError):
            Snake([])


class TestGameState:
    """Tests for the GameState class."""

    def _state(self, **kwargs):
        defaults = dict(width=6, height=5, snake=Snake([(2, 2), (1, 2)]), direction=RIGHT)
        defaults.update(kwargs)
        return GameState(**defaults)

    def test_gamestate_initialization(self):
        """GameState initializes with all required attributes."""
        state = self._state(food=Position(4, 3), score=2)

        assert state.width == 6
        assert state.height == 5
        assert state.direction == RIGHT
        assert state.food == (4, 3)
        assert state.score == 2
        assert state.frame_number == 0
        assert state.running is True
        assert state.end_reason is None

    @pytest.mark.parametrize("position, inside", [
        ((1, 1), True),
        ((4, 3), True),
        ((0, 2), False),
        ((5, 2), False),
        ((2, 0), False),
        ((2, 4), False),
        ((-1, 2), False),
        ((9, 9), False),
    ])
    def test_is_interior(self, position, inside):
        assert self._state().is_interior(position) is inside

    def test_interior_area(self):
        assert self._state().interior_area == 12

    def test_print_board(self):
        """print_board draws border, snake, food and score."""
        state = self._state(food=Position(4, 3), score=3)

        assert state.print_board() == "\n".join([
            "######",
            "#....#",
            "#OO..#",
            "#...*#",
            "######",
            "Score: 3",
        ])

    def test_gamestate_repr(self):
        """GameState has a useful string representation."""
        repr_str = repr(self._state(food=Position(4, 3), score=2))
        assert "score=2" in repr_str
        assert "direction=RIGHT" in repr_str
