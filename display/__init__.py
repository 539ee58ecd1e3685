"""
Terminal display for the Snake game.
"""

from .base import Display, DisplayInitError
from .renderer import render_frame, score_text

__all__ = [
    'Display',
    'DisplayInitError',
    'render_frame',
    'score_text',
]
