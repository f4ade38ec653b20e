"""Tests for configuration loading and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from handfoot.config import Config, load_config
from handfoot.utils.logger import setup_logging


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test default values."""
        config = load_config()
        assert config.game.num_players == 4
        assert config.game.seed is None
        assert config.rules.hand_size == 11
        assert config.rules.foot_size == 11
        assert config.rules.max_discard_attempts == 100
        assert config.rules.lock_on_wild_discard
        assert config.logging.level == "INFO"

    def test_missing_file(self, tmp_path):
        """Test a missing file falls back to defaults."""
        assert load_config(tmp_path / "nope.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test an empty file falls back to defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_yaml_values(self, tmp_path):
        """Test values are read from YAML, the rest keep defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  num_players: 6\n"
            "  seed: 42\n"
            "rules:\n"
            "  lock_on_wild_discard: false\n"
            "logging:\n"
            "  level: DEBUG\n"
        )
        config = load_config(str(path))

        assert config.game.num_players == 6
        assert config.game.seed == 42
        assert not config.rules.lock_on_wild_discard
        assert config.rules.hand_size == 11
        assert config.logging.level == "DEBUG"

    def test_invalid_value(self, tmp_path):
        """Test out-of-range values are rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  num_players: 0\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_accepts_level_names(self):
        """Test level names in any case are accepted."""
        setup_logging("debug")
        setup_logging(load_config().logging.level)
        assert logging.getLogger("handfoot").getEffectiveLevel() <= logging.CRITICAL

    def test_applies_configured_level(self, tmp_path):
        """Test the level from a config file reaches the package logger."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: DEBUG\n")
        package_logger = logging.getLogger("handfoot")
        try:
            setup_logging(load_config(path).logging.level)
            assert package_logger.level == logging.DEBUG
            assert logging.getLogger("handfoot.game.engine").isEnabledFor(logging.DEBUG)

            setup_logging("warning")
            assert package_logger.level == logging.WARNING
        finally:
            package_logger.setLevel(logging.NOTSET)

    def test_unknown_level(self):
        """Test an unknown level name is rejected."""
        with pytest.raises(AttributeError):
            setup_logging("LOUD")
