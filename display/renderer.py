"""
Frame renderer: turns a GameState into drawing calls on a Display.
"""

from domain.constants import BORDER_GLYPH, SNAKE_GLYPH, FOOD_GLYPH
from domain.game_state import GameState
from .base import Display


def score_text(score: int) -> str:
    return f"Score: {score}"


def render_frame(state: GameState, display: Display) -> None:
    """
    Emit the full frame in a fixed order:
      1) clear
      2) border glyphs
      3) snake glyphs
      4) food glyph
      5) score text (on the row below the board)
      6) refresh
    """
    display.clear()

    # Draw borders
    for x in range(state.width):
        display.set_char(0, x, BORDER_GLYPH)
        display.set_char(state.height - 1, x, BORDER_GLYPH)
    for y in range(state.height):
        display.set_char(y, 0, BORDER_GLYPH)
        display.set_char(y, state.width - 1, BORDER_GLYPH)

    for x, y in state.snake:
        display.set_char(y, x, SNAKE_GLYPH)

    if state.food is not None:
        display.set_char(state.food.y, state.food.x, FOOD_GLYPH)

    display.write_text(state.height, 0, score_text(state.score))

    display.refresh()
