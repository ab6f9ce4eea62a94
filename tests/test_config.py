"""Tests for environment-driven settings."""

from __future__ import annotations

from channel_translator.core.config import Settings, TranslatorConfig


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.marker == "~"
        assert settings.poll_interval_ms == 50
        assert settings.translator.timeout_seconds == 5.0
        assert settings.translator.client == "gtx"
        assert settings.translator.endpoint.startswith("https://translate.googleapis.com/")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CHANTRANS_MARKER", "#")
        monkeypatch.setenv("CHANTRANS_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.marker == "#"
        assert settings.log_level == "DEBUG"

    def test_translator_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CHANTRANS_TRANSLATOR_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("CHANTRANS_TRANSLATOR_ENDPOINT", "http://localhost:5000/t")
        config = TranslatorConfig()
        assert config.timeout_seconds == 2.5
        assert config.endpoint == "http://localhost:5000/t"
