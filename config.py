"""
Configuration for the Snake game.

Settings are layered: built-in defaults, then environment variables (a
local .env file is loaded by main()), then command-line flags.

Environment variables:
- SNAKE_WIDTH / SNAKE_HEIGHT: board size including the border
- SNAKE_FRAME_MS: frame duration in milliseconds
- SNAKE_SEED: RNG seed for reproducible food placement
- SNAKE_AUTOPLAY: let the random player drive the snake
- SNAKE_LOG_FILE: write logs to this file
- SNAKE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR
"""

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from domain.constants import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_FRAME_DURATION_MS, MIN_SIDE,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
TRUTHY = ("1", "true", "yes", "on")


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    frame_duration_ms: int = DEFAULT_FRAME_DURATION_MS
    seed: Optional[int] = None
    autoplay: bool = False
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @property
    def frame_duration(self) -> float:
        """Frame duration in seconds."""
        return self.frame_duration_ms / 1000.0

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def validate_geometry(width: int, height: int) -> None:
    """
    Raise ValueError unless the board has a border on every side and at
    least two interior cells (one for the snake, one for the food).
    """
    if width < MIN_SIDE or height < MIN_SIDE:
        raise ValueError(
            f"Board must be at least {MIN_SIDE}x{MIN_SIDE}, got {width}x{height}."
        )
    if (width - 2) * (height - 2) < 2:
        raise ValueError(
            f"Board {width}x{height} leaves no room for food next to the snake."
        )


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_int(environ: Mapping[str, str], name: str) -> Optional[int]:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return _parse_int(name, raw)


def _pick(cli_value, env_value, default):
    if cli_value is not None:
        return cli_value
    if env_value is not None:
        return env_value
    return default


def load_config(
    args: Optional[argparse.Namespace] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GameConfig:
    """
    Build a GameConfig from CLI args and the environment.

    Args:
        args: parsed command line; attributes left as None fall through to the environment
        environ: environment mapping (defaults to os.environ)

    Raises:
        ValueError: If any setting is malformed or out of range
    """
    environ = os.environ if environ is None else environ
    cli = vars(args) if args is not None else {}

    width = _pick(cli.get("width"), _env_int(environ, "SNAKE_WIDTH"), DEFAULT_WIDTH)
    height = _pick(cli.get("height"), _env_int(environ, "SNAKE_HEIGHT"), DEFAULT_HEIGHT)
    validate_geometry(width, height)

    frame_ms = _pick(
        cli.get("frame_ms"), _env_int(environ, "SNAKE_FRAME_MS"), DEFAULT_FRAME_DURATION_MS
    )
    if frame_ms <= 0:
        raise ValueError(f"Frame duration must be positive, got {frame_ms} ms.")

    seed = _pick(cli.get("seed"), _env_int(environ, "SNAKE_SEED"), None)

    autoplay = bool(cli.get("autoplay")) or (
        environ.get("SNAKE_AUTOPLAY", "").strip().lower() in TRUTHY
    )

    log_file = _pick(cli.get("log_file"), environ.get("SNAKE_LOG_FILE") or None, None)

    log_level = _pick(cli.get("log_level"), environ.get("SNAKE_LOG_LEVEL") or None, "INFO")
    log_level = log_level.strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVELS)}.")

    return GameConfig(
        width=width,
        height=height,
        frame_duration_ms=frame_ms,
        seed=seed,
        autoplay=autoplay,
        log_file=log_file,
        log_level=log_level,
    )
