"""Tests for configuration and logging setup."""

import structlog

from content_ranker.config.settings import Settings
from content_ranker.config.vocabulary import DEFAULT_VOCABULARY
from content_ranker.observability.logger import get_logger, setup_logging


def test_settings_defaults(settings):
    assert settings.default_result_limit == 8
    assert settings.equipment_gate_penalty == 50
    assert settings.curriculum_category == "online photography course"


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("RANKER_DEFAULT_RESULT_LIMIT", "3")
    monkeypatch.setenv("RANKER_FETCH_TIMEOUT_SECONDS", "0.5")
    settings = Settings(_env_file=None)
    assert settings.default_result_limit == 3
    assert settings.fetch_timeout_seconds == 0.5


def test_vocabulary_concepts_are_topic_keywords():
    # Concept boosts only fire when the concept can be extracted as a keyword.
    vocab = DEFAULT_VOCABULARY
    extractable = set(vocab.topic_keywords) | set(vocab.technical_terms)
    assert set(vocab.core_concepts) <= extractable


def test_setup_logging_json(capsys):
    setup_logging("DEBUG", json_output=True)
    try:
        get_logger("test").info("hello", answer=42)
        out = capsys.readouterr().out
        assert '"event": "hello"' in out
        assert '"component": "test"' in out
    finally:
        structlog.reset_defaults()
