"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

from grocer.config import get_settings


def test_database_path_comes_from_environment(tmp_path):
    assert get_settings().database_path == tmp_path / "test_grocer.db"


def test_env_file_fallback(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("GROCER_CURRENCY=$\n# comment\nGROCER_LOG_FORMAT=json\n", encoding="utf-8")
    get_settings.cache_clear()

    settings = get_settings()
    assert settings.currency_symbol == "$"
    assert settings.log_format == "json"


def test_defaults(monkeypatch):
    monkeypatch.delenv("GROCER_DATABASE_PATH")
    get_settings.cache_clear()

    settings = get_settings()
    assert settings.database_path == Path("./data/grocer.db")
    assert settings.log_level == "INFO"
    assert settings.currency_symbol == "₹"


def test_env_file_values_are_unquoted(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text('export GROCER_LOG_LEVEL="debug"\n', encoding="utf-8")
    (tmp_path / ".env.local").write_text("GROCER_CURRENCY='€'\n", encoding="utf-8")
    get_settings.cache_clear()

    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.currency_symbol == "€"


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("GROCER_CURRENCY=$\n", encoding="utf-8")
    monkeypatch.setenv("GROCER_CURRENCY", "£")
    get_settings.cache_clear()

    assert get_settings().currency_symbol == "£"
