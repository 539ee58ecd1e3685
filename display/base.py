"""
Display interface for the game loop.
"""

from typing import Optional


class DisplayInitError(RuntimeError):
    """The terminal display could not be initialised."""


class Display:
    """
    Base class/interface for a text-grid terminal surface.

    The game loop only ever talks to this interface: it samples one key
    event per frame and emits the frame as a sequence of drawing calls.
    """

    def read_key(self) -> Optional[str]:
        """
        Non-blocking read of the next key event.

        Returns:
            One of "UP", "DOWN", "LEFT", "RIGHT", "QUIT", or None when no
            relevant key is pending.
        """
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def set_char(self, row: int, col: int, glyph: str) -> None:
        raise NotImplementedError

    def write_text(self, row: int, col: int, text: str) -> None:
        raise NotImplementedError

    def refresh(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        """Restore the terminal. Safe to call more than once."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
