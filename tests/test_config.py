"""Tests for GameConfig and logger setup."""

import logging
from pathlib import Path

import pytest

from tictactoe_engine.board import PlayerType
from tictactoe_engine.config import GameConfig, parse_player
from tictactoe_engine.utils import setup_logger
from tictactoe_engine.utils.logger import LOGGER_NAME


@pytest.fixture
def package_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level

    yield logger

    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestGameConfig:
    """Tests for GameConfig."""

    def test_defaults(self):
        config = GameConfig()

        assert config.starting_player is PlayerType.CROSS
        assert config.auto_play_opponent is True
        assert config.debug is False
        assert config.log_file is None

    @pytest.mark.parametrize("name, expected", [
        ("x", PlayerType.CROSS),
        ("Cross", PlayerType.CROSS),
        (" O ", PlayerType.NOUGHT),
        ("noughts", PlayerType.NOUGHT),
    ])
    def test_player_names_coerced(self, name, expected):
        assert GameConfig(starting_player=name).starting_player is expected

    def test_unknown_player_rejected(self):
        with pytest.raises(ValueError):
            GameConfig(starting_player="triangle")

    def test_auto_play_must_be_bool(self):
        with pytest.raises(ValueError):
            GameConfig(auto_play_opponent="yes")

    def test_log_file_converted_to_path(self, tmp_path):
        config = GameConfig(log_file=str(tmp_path / "game.log"))

        assert isinstance(config.log_file, Path)

    def test_repr(self):
        text = repr(GameConfig(starting_player=PlayerType.NOUGHT))

        assert text.startswith("GameConfig(")
        assert "NOUGHT starts" in text

    def test_parse_player_passes_enum_through(self):
        assert parse_player(PlayerType.NOUGHT) is PlayerType.NOUGHT


class TestSetupLogger:
    """Tests for setup_logger()."""

    def test_info_level_by_default(self, package_logger):
        logger = setup_logger()

        assert logger is package_logger
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_debug_level(self, package_logger):
        assert setup_logger(debug=True).level == logging.DEBUG

    def test_repeated_setup_does_not_duplicate_handlers(self, package_logger):
        setup_logger()
        setup_logger()

        assert len(package_logger.handlers) == 1

    def test_log_file(self, package_logger, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"
        logger = setup_logger(log_file=log_file)

        logging.getLogger("tictactoe_engine.game.controller").info("Game over: DRAW")
        for handler in logger.handlers:
            handler.flush()

        assert isinstance(logger.handlers[0], logging.FileHandler)
        text = log_file.read_text()
        assert "[INFO] Game over: DRAW" in text
