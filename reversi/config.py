"""
Configuration for a Reversi session.
Board size, search depth, colors and logging, settable from the command line.
"""

import argparse
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .game.board import BoardSizeError, Stone, BLACK, WHITE, check_board_size


class ConfigError(ValueError):
    """Raised for an invalid game configuration."""


class Difficulty(Enum):
    """AI difficulty levels with corresponding search depths."""
    EASY = ("easy", 2)
    MEDIUM = ("medium", 3)
    HARD = ("hard", 5)
    EXPERT = ("expert", 6)

    def __init__(self, label: str, depth: int):
        self._label = label
        self._depth = depth

    @property
    def label(self) -> str:
        return self._label

    @property
    def depth(self) -> int:
        return self._depth

    @classmethod
    def from_label(cls, label: str) -> 'Difficulty':
        for level in cls:
            if level.label == label:
                return level
        raise ConfigError(f"unknown difficulty {label!r}")


COLOR_NAMES = {'black': BLACK, 'white': WHITE}


@dataclass
class GameConfig:
    """Settings consumed when a session is constructed."""
    board_size: int = 8
    depth: int = Difficulty.HARD.depth
    starting_color: Stone = WHITE
    computer_color: Stone = WHITE
    log_level: str = "WARNING"

    @property
    def human_color(self) -> Stone:
        return BLACK if self.computer_color == WHITE else WHITE

    def validate(self) -> 'GameConfig':
        try:
            check_board_size(self.board_size)
        except BoardSizeError as e:
            raise ConfigError(str(e)) from e
        if self.depth < 1:
            raise ConfigError("Search depth must be a positive integer")
        for name, color in (('starting', self.starting_color),
                            ('computer', self.computer_color)):
            if color not in (BLACK, WHITE):
                raise ConfigError(f"The {name} color must be black or white")
        return self


def parse_args(argv: Optional[Sequence[str]] = None) -> GameConfig:
    """Build a validated GameConfig from command line arguments."""
    parser = argparse.ArgumentParser(description="Reversi against the computer")
    parser.add_argument("--size", type=int, default=8,
                        help="board size, an even number from 4 to 10")
    parser.add_argument("--depth", type=int, default=None,
                        help="search depth in plies (overrides --level)")
    parser.add_argument("--level", choices=[d.label for d in Difficulty],
                        default=Difficulty.HARD.label, help="AI difficulty")
    parser.add_argument("--human-color", choices=list(COLOR_NAMES), default="black",
                        help="color played by the human")
    parser.add_argument("--start", choices=list(COLOR_NAMES), default="white",
                        help="color that moves first")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    depth = args.depth if args.depth is not None else Difficulty.from_label(args.level).depth
    human = COLOR_NAMES[args.human_color]
    config = GameConfig(
        board_size=args.size,
        depth=depth,
        starting_color=COLOR_NAMES[args.start],
        computer_color=WHITE if human == BLACK else BLACK,
        log_level=args.log_level,
    )
    try:
        return config.validate()
    except ConfigError as e:
        parser.error(str(e))


def configure_logging(level: str = "WARNING"):
    """Set up console logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
