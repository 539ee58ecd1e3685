"""
Game constants for the terminal Snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Non-directional input
QUIT = "QUIT"

# Screen coordinates: y grows downwards
MOVE_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Board defaults (dimensions include the one-cell border)
DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 20
DEFAULT_FRAME_DURATION_MS = 200
MIN_SIDE = 3

# Glyphs
BORDER_GLYPH = "#"
SNAKE_GLYPH = "O"
FOOD_GLYPH = "*"

# End reasons
END_WALL = "wall"
END_SELF = "self"
END_QUIT = "quit"
END_BOARD_FULL = "board_full"
