"""
curses-backed Display.

Owns terminal setup and teardown, keycode mapping and the drawing
primitives. Terminal modes are only touched once the environment has been
checked, so a failed start leaves nothing to roll back.
"""

import curses
import logging
import os
import sys
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT
from .base import Display, DisplayInitError

logger = logging.getLogger(__name__)

ESCAPE = 27
# ncurses waits this long after a lone ESC for the rest of an escape sequence
ESCAPE_DELAY_MS = 25
NO_KEY = -1

KEY_MAP = {
    curses.KEY_UP: UP, ord('w'): UP, ord('W'): UP,
    curses.KEY_DOWN: DOWN, ord('s'): DOWN, ord('S'): DOWN,
    curses.KEY_LEFT: LEFT, ord('a'): LEFT, ord('A'): LEFT,
    curses.KEY_RIGHT: RIGHT, ord('d'): RIGHT, ord('D'): RIGHT,
    ord('q'): QUIT, ord('Q'): QUIT, ESCAPE: QUIT,
}


def map_key(code: int) -> Optional[str]:
    """Map a raw curses keycode to an input event, or None if irrelevant."""
    return KEY_MAP.get(code)


def check_terminal(width: int, height: int) -> None:
    """
    Raise DisplayInitError unless we are attached to a terminal large
    enough for the board plus the score line.
    """
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise DisplayInitError("Snake needs an interactive terminal (stdin/stdout is not a TTY).")

    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except OSError as e:
        raise DisplayInitError(f"Could not determine terminal size: {e}") from e

    needed_rows = height + 1
    if size.columns < width or size.lines < needed_rows:
        raise DisplayInitError(
            f"Terminal too small: need at least {width}x{needed_rows} "
            f"(columns x rows), got {size.columns}x{size.lines}."
        )


class CursesDisplay(Display):
    """Display implementation on top of the standard curses module."""

    def __init__(self, width: int, height: int):
        check_terminal(width, height)

        try:
            self.screen = curses.initscr()
        except curses.error as e:
            raise DisplayInitError(f"Could not initialise curses: {e}") from e

        self._closed = False
        try:
            curses.noecho()
            curses.cbreak()
            self.screen.keypad(True)
            self.screen.nodelay(True)
            if hasattr(curses, "set_escdelay"):
                curses.set_escdelay(ESCAPE_DELAY_MS)
            try:
                curses.curs_set(0)
            except curses.error:
                # Some terminals cannot hide the cursor
                pass
        except curses.error as e:
            self.close()
            raise DisplayInitError(f"Could not configure terminal: {e}") from e

        logger.info(f"Curses display ready for a {width}x{height} board")

    def read_key(self) -> Optional[str]:
        """
        Drain every pending key and keep the last meaningful one.
        A quit key anywhere in the buffer wins.
        """
        event = None
        while True:
            code = self.screen.getch()
            if code == NO_KEY:
                break
            mapped = map_key(code)
            if mapped == QUIT:
                return QUIT
            if mapped is not None:
                event = mapped
        return event

    def clear(self) -> None:
        self.screen.erase()

    def set_char(self, row: int, col: int, glyph: str) -> None:
        try:
            self.screen.addch(row, col, glyph)
        except curses.error:
            if not self._touches_last_cell(row, col + 1):
                raise

    def write_text(self, row: int, col: int, text: str) -> None:
        try:
            self.screen.addstr(row, col, text)
        except curses.error:
            if not self._touches_last_cell(row, col + len(text)):
                raise

    def refresh(self) -> None:
        self.screen.refresh()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        restores = (
            ("keypad", lambda: self.screen.keypad(False)),
            ("nocbreak", curses.nocbreak),
            ("echo", curses.echo),
        )
        for name, restore in restores:
            try:
                restore()
            except curses.error as e:
                logger.warning(f"Could not restore terminal mode {name}: {e}")

        curses.endwin()
        logger.info("Curses display closed")

    def _touches_last_cell(self, row: int, col_end: int) -> bool:
        # curses reports an error after writing the bottom-right cell because
        # the cursor cannot advance past it; the character is still drawn.
        max_y, max_x = self.screen.getmaxyx()
        return row == max_y - 1 and col_end >= max_x
