"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest

from config import AppConfig, GameConfig, LoggingConfig, _parse_seed


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_seed_unset_by_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert GameConfig().seed is None

    def test_seed_from_env(self):
        with patch.dict(os.environ, {"INDIGO_SEED": "1234"}):
            assert GameConfig().seed == 1234

    def test_blank_seed_is_unset(self):
        with patch.dict(os.environ, {"INDIGO_SEED": "  "}):
            assert _parse_seed() is None

    def test_bad_seed_rejected(self):
        with patch.dict(os.environ, {"INDIGO_SEED": "abc"}):
            with pytest.raises(ValueError):
                GameConfig()

    def test_computer_hand_shown_by_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert GameConfig().show_computer_hand is True

    def test_computer_hand_hidden_from_env(self):
        with patch.dict(os.environ, {"INDIGO_SHOW_COMPUTER_HAND": "False"}):
            assert GameConfig().show_computer_hand is False

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            GameConfig().seed = 3


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            assert LoggingConfig().level == "WARNING"

    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert LoggingConfig().level == "DEBUG"


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_debug_from_env(self):
        with patch.dict(os.environ, {"DEBUG": "true"}):
            assert AppConfig().debug is True

    def test_nested_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            app = AppConfig()
            assert app.debug is False
            assert isinstance(app.game, GameConfig)
            assert isinstance(app.logging, LoggingConfig)
