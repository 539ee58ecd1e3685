import argparse
import logging
import random
import sys
import time
from typing import Callable, Iterable, Optional, Tuple

from dotenv import load_dotenv

from config import GameConfig, load_config, validate_geometry
from display.base import Display, DisplayInitError
from display.renderer import render_frame
from domain.constants import (
    RIGHT, QUIT, VALID_MOVES, OPPOSITES,
    DEFAULT_WIDTH, DEFAULT_HEIGHT,
    END_WALL, END_SELF, END_QUIT, END_BOARD_FULL,
)
from domain.game_state import GameState
from domain.position import Position
from domain.snake import Snake
from players import Player, KeyboardPlayer, RandomPlayer

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - The snake and its direction
      - Food
      - Score
      - Frames
    All of it lives in one GameState that each frame mutates in place.
    """
    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: Optional[random.Random] = None,
        snake_positions: Optional[Iterable[Tuple[int, int]]] = None,
        direction: str = RIGHT,
        food: Optional[Tuple[int, int]] = None,
    ):
        validate_geometry(width, height)
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")

        self.rng = rng or random.Random()

        if snake_positions is None:
            snake_positions = [(width // 2, height // 2)]
        self.state = GameState(width, height, Snake(snake_positions), direction)

        for segment in self.state.snake:
            if not self.state.is_interior(segment):
                raise ValueError(f"Snake segment {segment} is outside the interior.")

        if food is None:
            cell = self._random_free_cell()
            if cell is None:
                raise ValueError("No free interior cell left for food.")
            self.state.food = cell
        else:
            self.set_food(food)

        logger.info(
            f"New game on a {width}x{height} board: snake at {self.state.snake.head}, "
            f"food at {self.state.food}"
        )

    def set_food(self, position: Tuple[int, int]):
        """
        Place the food at a specific position.
        Useful for scripted scenarios; normal play uses random placement.
        """
        position = Position(*position)
        if not self.state.is_interior(position):
            raise ValueError(f"Food out of bounds at {position}.")
        if position in self.state.snake:
            raise ValueError(f"Food at {position} would sit on the snake.")
        self.state.food = position

    def _random_free_cell(self) -> Optional[Position]:
        """
        Return a random interior cell not occupied by the snake.
        Rejection sampling: keep drawing until a free cell comes up.
        Returns None when the snake already covers the whole interior.
        """
        state = self.state
        if len(state.snake) >= state.interior_area:
            return None

        while True:
            x = self.rng.randint(1, state.width - 2)
            y = self.rng.randint(1, state.height - 2)
            if (x, y) not in state.snake:
                return Position(x, y)

    def change_direction(self, move: str) -> bool:
        """
        Turn the snake unless `move` would reverse it onto itself.
        Returns True if the direction was accepted.
        """
        if move not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {move!r}")

        if move == OPPOSITES[self.state.direction]:
            logger.debug(f"Ignoring reversal {self.state.direction} -> {move}")
            return False

        self.state.direction = move
        return True

    def run_frame(self, move: Optional[str] = None) -> bool:
        """
        Execute one frame:
          1) Apply the sampled input (turn, or quit)
          2) Compute the candidate head
          3) Check wall and self collisions (snake left untouched if hit)
          4) Commit the move
          5) Eat and regrow food, or drop the tail
        Returns True while the game keeps running.
        """
        state = self.state
        if not state.running:
            return False

        if move == QUIT:
            self.end_game(END_QUIT)
            return False

        if move is not None:
            self.change_direction(move)

        new_head = state.snake.head.moved(state.direction)

        if not state.is_interior(new_head):
            self.end_game(END_WALL)
            return False

        if new_head in state.snake:
            self.end_game(END_SELF)
            return False

        state.snake.push_head(new_head)

        if new_head == state.food:
            state.score += 1
            state.food = self._random_free_cell()
            logger.debug(f"Food eaten at {new_head}; score {state.score}, next food at {state.food}")
        else:
            state.snake.drop_tail()

        state.frame_number += 1

        if state.food is None:
            self.end_game(END_BOARD_FULL)
            return False

        return True

    def end_game(self, reason: str):
        state = self.state
        state.running = False
        state.end_reason = reason
        if reason in (END_WALL, END_SELF):
            state.snake.alive = False
            state.snake.death_reason = reason
        logger.info(f"Game Over: {reason}. Score {state.score} after {state.frame_number} frames.")
        logger.debug("Final board:\n" + state.print_board())


# -------------------------------
# Game Loop
# -------------------------------

def run_game(
    game: SnakeGame,
    player: Player,
    display: Display,
    frame_duration: float,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Drive the game at a fixed frame interval until it terminates.

    Args:
        game: the game to run; its state is mutated in place
        player: input source sampled once per frame
        display: sink for the rendered frames
        frame_duration: seconds per frame
        clock: monotonic time source
        sleep: blocking delay used for frame pacing

    Returns:
        The final score. Ctrl+C ends the game like the quit key.
    """
    state: GameState = game.state

    try:
        while state.running:
            frame_start = clock()

            move = player.get_move(state)
            if not game.run_frame(move):
                break

            render_frame(state, display)

            # Maintain consistent frame rate
            elapsed = clock() - frame_start
            if elapsed < frame_duration:
                sleep(frame_duration - elapsed)
    except KeyboardInterrupt:
        logger.info("Interrupted from the keyboard")
        if state.running:
            game.end_game(END_QUIT)

    return state.score


# -------------------------------
# Main Entry Point
# -------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Arrow keys or WASD to steer, q or ESC to quit."
    )
    parser.add_argument("--width", type=int, default=None,
                        help=f"Board width including the border (default {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=int, default=None,
                        help=f"Board height including the border (default {DEFAULT_HEIGHT})")
    parser.add_argument("--frame-ms", dest="frame_ms", type=int, default=None,
                        help="Frame duration in milliseconds (default 200)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and autoplay")
    parser.add_argument("--autoplay", action="store_true",
                        help="Let a random player steer the snake")
    parser.add_argument("--log-file", dest="log_file", default=None,
                        help="Write logs to this file")
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help="DEBUG, INFO, WARNING or ERROR (default INFO)")
    return parser


def configure_logging(config: GameConfig):
    # curses owns the screen, so only a log file gets the full stream
    if config.log_file:
        logging.basicConfig(
            filename=config.log_file,
            level=config.log_level_number,
            format=LOG_FORMAT
        )
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


def create_player(config: GameConfig, display: Display, rng: random.Random) -> Player:
    if config.autoplay:
        return RandomPlayer(display, rng=rng)
    return KeyboardPlayer(display)


def main(argv=None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(config)
    logger.info(f"Starting with {config}")

    rng = random.Random(config.seed)
    game = SnakeGame(config.width, config.height, rng=rng)

    from display.curses_display import CursesDisplay

    try:
        display = CursesDisplay(config.width, config.height)
    except DisplayInitError as e:
        logger.error(f"Could not start the display: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with display:
        player = create_player(config, display, rng)
        score = run_game(game, player, display, config.frame_duration)

    print(f"Game Over! Your score was: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
