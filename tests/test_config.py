"""Tests for runtime settings and logging setup."""

import logging

import pytest

from chord_shapes import config
from chord_shapes.config import Settings, configure_logging, get_settings


class TestSettings:
    """Test settings defaults, overrides and clamps."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("DISPLAY_WINDOW", "LIST_WINDOW", "STRING_COUNT", "LOG_LEVEL"):
            monkeypatch.delenv(f"CHORD_SHAPES_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.display_window == 5
        assert s.list_window == 4
        assert s.string_count == 6
        assert s.log_level == "WARNING"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHORD_SHAPES_DISPLAY_WINDOW", "7")
        monkeypatch.setenv("CHORD_SHAPES_STRING_COUNT", "4")
        s = Settings(_env_file=None)
        assert s.display_window == 7
        assert s.string_count == 4

    def test_keyword_override(self) -> None:
        s = Settings(CHORD_SHAPES_LIST_WINDOW=3, _env_file=None)
        assert s.list_window == 3

    @pytest.mark.parametrize("value", [0, -2])
    def test_non_positive_values_fall_back(self, value: int) -> None:
        s = Settings(
            CHORD_SHAPES_DISPLAY_WINDOW=value,
            CHORD_SHAPES_LIST_WINDOW=value,
            CHORD_SHAPES_STRING_COUNT=value,
            _env_file=None,
        )
        assert s.display_window == 5
        assert s.list_window == 4
        assert s.string_count == 6

    def test_log_level_upper_cased(self) -> None:
        assert Settings(CHORD_SHAPES_LOG_LEVEL="debug", _env_file=None).log_level == "DEBUG"

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestConfigureLogging:
    """Test the basic handler setup."""

    def test_installs_handler_when_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        monkeypatch.setattr(config.logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging(Settings(CHORD_SHAPES_LOG_LEVEL="info", _env_file=None))

        assert calls == [{"level": "INFO", "format": config.LOG_FORMAT}]

    def test_existing_handler_left_alone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])
        monkeypatch.setattr(config.logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging(Settings(_env_file=None))

        assert calls == []
