"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from sentiment_rate.config import DEFAULT_DB_FILE, load_settings

ENV_KEYS = [
    "DISCORD_TOKEN",
    "SENTIMENT_LEXICON_PATH",
    "SENTIMENT_STRICT_LEXICON",
    "SENTIMENT_DB_FILE",
    "RETENTION_DAYS",
    "SENTIMENT_ALERT_THRESHOLD",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for k in ENV_KEYS:
        monkeypatch.delenv(k, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        s = load_settings()
        assert s.token == ""
        assert s.lexicon_path is None
        assert s.strict_lexicon is False
        assert s.db_file == DEFAULT_DB_FILE
        assert s.retention_days == 30
        assert s.alert_threshold == -5
        assert s.log_level == "INFO"
        assert s.log_format == "console"

    def test_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("SENTIMENT_LEXICON_PATH", "/tmp/words.txt")
        clean_env.setenv("SENTIMENT_STRICT_LEXICON", "true")
        clean_env.setenv("RETENTION_DAYS", "7")
        clean_env.setenv("SENTIMENT_ALERT_THRESHOLD", "-3")
        clean_env.setenv("LOG_FORMAT", "JSON")
        clean_env.setenv("LOG_LEVEL", "debug")
        s = load_settings()
        assert s.lexicon_path == "/tmp/words.txt"
        assert s.strict_lexicon is True
        assert s.retention_days == 7
        assert s.alert_threshold == -3
        assert s.log_format == "json"
        assert s.log_level == "DEBUG"

    def test_bad_values_fall_back(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("RETENTION_DAYS", "soon")
        clean_env.setenv("LOG_FORMAT", "xml")
        clean_env.setenv("SENTIMENT_STRICT_LEXICON", "nah")
        s = load_settings()
        assert s.retention_days == 30
        assert s.log_format == "console"
        assert s.strict_lexicon is False
