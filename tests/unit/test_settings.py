"""Тесты для конфигурации и настройки логирования."""

import logging

import pytest

from src.core.config import Settings, get_settings
from src.core.config.settings import ENV_PREFIX
from src.core.domain import InvalidTargetSpec, TargetSpec
from src.core.monitoring import LOG_FORMAT, configure_logging


class TestSettings:
    """Settings.from_env и построение TargetSpec."""

    def test_defaults_from_empty_env(self):
        settings = Settings.from_env({})

        assert settings == Settings()
        assert settings.to_target_spec() == TargetSpec()

    def test_overrides(self):
        settings = Settings.from_env(
            {
                "NORMALIZER_TARGET_HEIGHT_M": "0.12",
                "NORMALIZER_TARGET_WIDTH_M": "0.10",
                "NORMALIZER_SCALE_MIN": "0.05",
                "NORMALIZER_SCALE_MAX": "2.5",
                "NORMALIZER_LOG_LEVEL": "DEBUG",
            }
        )

        target = settings.to_target_spec()
        assert target.target_height_m == 0.12
        assert target.target_width_m == 0.10
        assert target.scale_min == 0.05
        assert target.scale_max == 2.5
        assert settings.log_level == "DEBUG"

    def test_blank_value_uses_default(self):
        settings = Settings.from_env({"NORMALIZER_TARGET_HEIGHT_M": "  "})
        assert settings.target_height_m == 0.08

    def test_non_numeric_value_rejected(self):
        with pytest.raises(InvalidTargetSpec, match="NORMALIZER_SCALE_MAX must be a number"):
            Settings.from_env({"NORMALIZER_SCALE_MAX": "five"})

    def test_inverted_bounds_rejected_at_configuration(self):
        settings = Settings.from_env({"NORMALIZER_SCALE_MIN": "6", "NORMALIZER_SCALE_MAX": "5"})

        with pytest.raises(InvalidTargetSpec, match="scale_min"):
            settings.to_target_spec()

    def test_non_positive_target_rejected(self):
        settings = Settings(target_height_m=0.0)

        with pytest.raises(InvalidTargetSpec, match="target_height_m must be positive"):
            settings.to_target_spec()

    def test_get_settings_reads_environment_once(self, monkeypatch):
        get_settings.cache_clear()
        monkeypatch.setenv(ENV_PREFIX + "TARGET_WIDTH_M", "0.2")
        try:
            first = get_settings()
            monkeypatch.setenv(ENV_PREFIX + "TARGET_WIDTH_M", "0.3")

            assert first.target_width_m == 0.2
            assert get_settings() is first
        finally:
            get_settings.cache_clear()


class TestConfigureLogging:
    """configure_logging передаёт уровень и формат в basicConfig."""

    def test_level_and_format(self, monkeypatch):
        captured = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

        configure_logging(Settings(log_level="debug"))

        assert captured == {"level": logging.DEBUG, "format": LOG_FORMAT}

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        captured = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

        configure_logging(Settings(log_level="chatty"))

        assert captured["level"] == logging.INFO
