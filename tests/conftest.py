from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from saberbot.core.config import Settings
from saberbot.main import create_app


class FakeGenerator:
    def __init__(self, reply: str = "Risposta di prova", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def knowledge_base_file(tmp_path: Path) -> Path:
    path = tmp_path / "kb.txt"
    path.write_text("Primer epossidico EP-200: resa 8 m2/l.\nSmalto PU-50: lucido.", encoding="utf-8")
    return path


@pytest.fixture
def make_settings(tmp_path: Path):
    def _make(**overrides) -> Settings:
        values = {
            "gemini_api_key": "test-key-1234",
            "knowledge_base_filename": "saberbot-test-kb-absent.txt",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def client(make_settings, knowledge_base_file, fake_generator):
    app = create_app(
        settings=make_settings(knowledge_base_path=str(knowledge_base_file)),
        generator=fake_generator,
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    for name in (
        "GEMINI_API_KEY",
        "GEMINI_MODEL",
        "HOST",
        "PORT",
        "ALLOWED_ORIGINS",
        "KNOWLEDGE_BASE_PATH",
        "KNOWLEDGE_BASE_FILENAME",
        "FAIL_FAST_ON_MISSING_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
