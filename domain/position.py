"""
Position value type.
"""

from typing import NamedTuple

from .constants import MOVE_DELTAS


class Position(NamedTuple):
    """An (x, y) grid coordinate. Compares equal to a plain tuple."""

    x: int
    y: int

    def moved(self, direction: str) -> "Position":
        """Return the neighbouring position one step towards `direction`."""
        try:
            dx, dy = MOVE_DELTAS[direction]
        except KeyError:
            raise ValueError(f"Unknown direction: {direction!r}") from None
        return Position(self.x + dx, self.y + dy)
