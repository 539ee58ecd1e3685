"""
Player implementations for the Snake game.

This module contains the input-source abstraction consulted once per
frame and its implementations.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'RandomPlayer',
]
