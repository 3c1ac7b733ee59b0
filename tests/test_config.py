"""Tests for environment configuration."""

from string_analyzer.config import DEFAULT_PORT, get_settings


def test_defaults(monkeypatch):
    for key in ("HOST", "PORT", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == DEFAULT_PORT
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["*"]


def test_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    settings = get_settings()
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_invalid_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert get_settings().port == DEFAULT_PORT


def test_invalid_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert get_settings().log_level == "INFO"
