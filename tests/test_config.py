from pathlib import Path

import pytest

from saberbot.core.config import PROJECT_ROOT, ConfigurationError, Settings


def test_defaults():
    settings = Settings(_env_file=None, gemini_api_key="abcd1234")

    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.port == 5000
    assert settings.gemini_max_retries == 0
    assert settings.allowed_origins == ["*"]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key-9876")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")

    settings = Settings(_env_file=None)

    assert settings.gemini_api_key == "env-key-9876"
    assert settings.port == 8080
    assert settings.allowed_origins == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize("api_key", ["", "  ", "inserisci_qui_la_tua_api_key"])
def test_placeholder_or_blank_key_is_not_configured(api_key):
    settings = Settings(_env_file=None, gemini_api_key=api_key)

    assert settings.api_key_configured is False
    assert settings.masked_api_key == "<not set>"
    with pytest.raises(ConfigurationError):
        settings.require_api_key()


def test_masked_key_only_shows_last_four_characters():
    settings = Settings(_env_file=None, gemini_api_key="AIzaSyExample9xYz")

    assert settings.masked_api_key == "****9xYz"
    settings.require_api_key()


def test_knowledge_base_candidates_are_probed_in_order(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    explicit = tmp_path / "custom" / "kb.txt"
    settings = Settings(
        _env_file=None,
        knowledge_base_path=str(explicit),
        knowledge_base_filename="kb.txt",
    )

    assert settings.knowledge_base_candidates() == [
        explicit,
        Path.cwd() / "kb.txt",
        PROJECT_ROOT / "kb.txt",
    ]


def test_knowledge_base_candidates_without_explicit_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = Settings(_env_file=None, knowledge_base_filename="kb.txt")

    assert settings.knowledge_base_candidates() == [Path.cwd() / "kb.txt", PROJECT_ROOT / "kb.txt"]
