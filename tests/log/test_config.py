"""Tests for log/config.py."""

import logging

import pytest

from mdtogo.log.config import LogConfig, _should_use_color
from mdtogo.log.exceptions import InvalidLogLevelError


@pytest.mark.unit
class TestResolveLevel:
    """Test level resolution."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warning", logging.WARNING),
            ("trace", 5),
            ("false", False),
            ("15", 15),
            (20, 20),
            (False, False),
            (True, logging.INFO),
        ],
    )
    def test_levels(self, level, expected):
        assert LogConfig.resolve_level(level) == expected

    def test_unknown_name(self):
        with pytest.raises(InvalidLogLevelError, match="Invalid log level: loud"):
            LogConfig.resolve_level("loud")


@pytest.mark.unit
class TestLogConfig:
    """Test LogConfig construction."""

    def test_defaults(self):
        config = LogConfig()
        assert config.level == logging.WARNING
        assert config.colors is False

    def test_from_params_explicit_colors(self):
        config = LogConfig.from_params("debug", colors=True)
        assert config == LogConfig(level=logging.DEBUG, colors=True)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            LogConfig().level = logging.DEBUG  # type: ignore[misc]

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert _should_use_color() is False
        assert LogConfig.from_params("info").colors is False

    def test_force_color_env(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert LogConfig.from_params("info").colors is True
