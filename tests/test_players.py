"""
Tests for the player implementations.
"""

import pytest
import random
import sys
import os
from unittest.mock import MagicMock

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from display.base import Display  # noqa: E402
from domain import GameState, Snake, UP, DOWN, LEFT, RIGHT, QUIT, VALID_MOVES  # noqa: E402
from players import Player, KeyboardPlayer, RandomPlayer  # noqa: E402


def make_state(positions, direction=RIGHT, width=10, height=10):
    return GameState(width=width, height=height, snake=Snake(positions), direction=direction)


class TestPlayer:

    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(5, 5)]))


class TestKeyboardPlayer:
    """Tests for the KeyboardPlayer class."""

    def test_forwards_display_key(self):
        display = MagicMock(spec=Display)
        display.read_key.return_value = UP
        player = KeyboardPlayer(display)

        assert player.get_move(make_state([(5, 5)])) == UP
        display.read_key.assert_called_once_with()

    def test_no_key_means_no_move(self):
        display = MagicMock(spec=Display)
        display.read_key.return_value = None

        assert KeyboardPlayer(display).get_move(make_state([(5, 5)])) is None


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_returns_valid_move(self):
        """RandomPlayer.get_move() returns a valid direction."""
        player = RandomPlayer(rng=random.Random(0))
        assert player.get_move(make_state([(5, 5)])) in VALID_MOVES

    def test_random_player_never_reverses(self):
        player = RandomPlayer(rng=random.Random(1))
        state = make_state([(5, 5)], direction=RIGHT)

        for _ in range(50):
            assert player.get_move(state) != LEFT

    def test_random_player_avoids_walls_when_possible(self):
        """In the top-left interior corner moving left, only DOWN is safe."""
        player = RandomPlayer(rng=random.Random(2))
        state = make_state([(1, 1)], direction=LEFT)

        for _ in range(20):
            assert player.get_move(state) == DOWN

    def test_random_player_avoids_self_collision(self):
        """RandomPlayer does not run into its own body, tail included."""
        player = RandomPlayer(rng=random.Random(3))
        # Moving left; body wraps below the head
        state = make_state([(5, 5), (6, 5), (6, 6), (5, 6)], direction=LEFT)

        for _ in range(20):
            assert player.get_move(state) in {UP, LEFT}

    def test_random_player_keeps_direction_when_trapped(self):
        player = RandomPlayer(rng=random.Random(4))
        state = make_state([(1, 1)], direction=RIGHT, width=3, height=3)

        assert player.get_move(state) == RIGHT

    def test_quit_key_still_honoured(self):
        display = MagicMock(spec=Display)
        display.read_key.return_value = QUIT
        player = RandomPlayer(display, rng=random.Random(5))

        assert player.get_move(make_state([(5, 5)])) == QUIT

    def test_other_keys_ignored_in_autoplay(self):
        display = MagicMock(spec=Display)
        display.read_key.return_value = LEFT
        player = RandomPlayer(display, rng=random.Random(6))

        for _ in range(20):
            assert player.get_move(make_state([(5, 5)], direction=RIGHT)) in {UP, DOWN, RIGHT}

    def test_seeded_players_agree(self):
        state = make_state([(5, 5)])
        a = RandomPlayer(rng=random.Random(7))
        b = RandomPlayer(rng=random.Random(7))

        assert [a.get_move(state) for _ in range(10)] == [b.get_move(state) for _ in range(10)]
