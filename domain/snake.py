"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator, Optional, Tuple

from .position import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: e.g., 'wall', 'self'
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(Position(*p) for p in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")
        if len(set(self.positions)) != len(self.positions):
            raise ValueError(f"Snake segments overlap: {list(self.positions)}")
        self.alive = True
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def push_head(self, position: Tuple[int, int]) -> None:
        self.positions.appendleft(Position(*position))

    def drop_tail(self) -> Position:
        return self.positions.pop()

    def __contains__(self, position) -> bool:
        return position in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __repr__(self):
        return f"<Snake len={len(self)} head={self.head} alive={self.alive}>"
