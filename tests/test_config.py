"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from maze_game.config import Settings, get_settings


class TestSettings:
    """Tests for the pydantic settings."""

    def test_defaults(self):
        """Test the default game settings."""
        settings = Settings(_env_file=None)
        assert settings.width == 15
        assert settings.height == 15
        assert settings.seed is None
        assert settings.layout_file is None
        assert settings.log_level == "WARNING"
        assert settings.debug is False

    def test_environment_overrides(self, monkeypatch):
        """Test MAZE_* environment variables."""
        monkeypatch.setenv("MAZE_WIDTH", "21")
        monkeypatch.setenv("MAZE_SEED", "7")
        monkeypatch.setenv("MAZE_LAYOUT_FILE", "/tmp/maze.txt")
        monkeypatch.setenv("MAZE_DEBUG", "true")

        settings = Settings(_env_file=None)
        assert settings.width == 21
        assert settings.seed == 7
        assert settings.layout_file == Path("/tmp/maze.txt")
        assert settings.debug is True

    def test_log_level_is_normalized(self):
        """Test that log levels are upper-cased."""
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None, log_level="chatty")

    @pytest.mark.parametrize("field", ["width", "height"])
    def test_non_positive_dimension(self, field):
        """Test that dimensions must be positive."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})

    def test_non_integer_dimension(self, monkeypatch):
        """Test that a non-numeric environment value is rejected."""
        monkeypatch.setenv("MAZE_HEIGHT", "tall")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        """Test that get_settings returns one instance."""
        assert get_settings() is get_settings()
