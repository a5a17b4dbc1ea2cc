"""Tests for session configuration."""

import logging
import sys
sys.path.insert(0, '.')

import pytest

from reversi.config import ConfigError, Difficulty, GameConfig, configure_logging, parse_args
from reversi.game.board import BLACK, WHITE, EMPTY


class TestDifficulty:
    """Test cases for difficulty levels."""

    def test_depths(self):
        """Levels map to increasing search depths."""
        assert [d.depth for d in Difficulty] == [2, 3, 5, 6]

    def test_from_label(self):
        """Look up a level by its command line label."""
        assert Difficulty.from_label("expert") is Difficulty.EXPERT

    def test_unknown_label(self):
        """Unknown labels are a configuration error."""
        with pytest.raises(ConfigError):
            Difficulty.from_label("impossible")


class TestGameConfig:
    """Defaults and validation."""

    def test_defaults(self):
        """Default session: 8x8, depth 5, computer plays White and starts."""
        config = GameConfig().validate()
        assert config.board_size == 8
        assert config.depth == 5
        assert config.starting_color == WHITE
        assert config.computer_color == WHITE
        assert config.human_color == BLACK

    @pytest.mark.parametrize("size", [3, 5, 2, 12])
    def test_bad_board_size(self, size):
        """Board sizes outside the playable range are rejected."""
        with pytest.raises(ConfigError):
            GameConfig(board_size=size).validate()

    def test_bad_depth(self):
        """Depth must be positive."""
        with pytest.raises(ConfigError, match="depth"):
            GameConfig(depth=0).validate()

    def test_empty_color_rejected(self):
        """Only black and white can start or be played by the computer."""
        with pytest.raises(ConfigError, match="starting"):
            GameConfig(starting_color=EMPTY).validate()
        with pytest.raises(ConfigError, match="computer"):
            GameConfig(computer_color=EMPTY).validate()

    def test_config_error_is_value_error(self):
        """ConfigError can be caught as ValueError."""
        with pytest.raises(ValueError):
            GameConfig(board_size=7).validate()


class TestParseArgs:
    """Command line parsing."""

    def test_no_arguments(self):
        """No arguments give the default configuration."""
        assert parse_args([]) == GameConfig()

    def test_all_arguments(self):
        """Every option reaches the configuration."""
        config = parse_args(["--size", "6", "--depth", "4", "--human-color", "white",
                             "--start", "black", "--log-level", "DEBUG"])
        assert config.board_size == 6
        assert config.depth == 4
        assert config.human_color == WHITE
        assert config.computer_color == BLACK
        assert config.starting_color == BLACK
        assert config.log_level == "DEBUG"

    def test_level_sets_depth(self):
        """--level picks the depth of that level."""
        assert parse_args(["--level", "easy"]).depth == 2

    def test_depth_overrides_level(self):
        """An explicit --depth wins over --level."""
        assert parse_args(["--level", "easy", "--depth", "7"]).depth == 7

    def test_invalid_size_is_usage_error(self, capsys):
        """An odd board size exits with a usage message, not a traceback."""
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["--size", "9"])
        assert excinfo.value.code == 2
        assert "even" in capsys.readouterr().err

    def test_zero_depth_is_usage_error(self, capsys):
        """--depth 0 exits with a usage message, not a traceback."""
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["--depth", "0"])
        assert excinfo.value.code == 2
        err = capsys.readouterr().err
        assert "usage:" in err
        assert "Search depth must be a positive integer" in err

    def test_unknown_choice_exits(self):
        """argparse rejects unknown levels."""
        with pytest.raises(SystemExit):
            parse_args(["--level", "impossible"])


def test_configure_logging():
    """Unknown level names fall back to WARNING."""
    configure_logging("debug")
    configure_logging("nonsense")
    assert logging.getLogger("reversi").getEffectiveLevel() <= logging.WARNING


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
