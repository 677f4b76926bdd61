"""Pytest configuration and fixtures for the summarizer tests."""

import pytest

from tests.helpers import FakeCompletionClient, make_words, write_words


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GPTC_* settings from the developer's shell out of the tests."""
    for var in ("GPTC_PROVIDER", "GPTC_MODEL", "GPTC_TOKEN_PATH", "GPTC_MAX_TOKENS"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def token_file(tmp_path, monkeypatch):
    """A valid token file wired in through GPTC_TOKEN_PATH."""
    path = tmp_path / "openai.token"
    path.write_text("sk-test-token\n", encoding="utf-8")
    monkeypatch.setenv("GPTC_TOKEN_PATH", str(path))
    return path


@pytest.fixture
def fake_client():
    """Completion client that streams canned replies and records prompts."""
    return FakeCompletionClient()


@pytest.fixture
def document_2500(tmp_path):
    """Input file with 2500 words."""
    path = tmp_path / "paper.txt"
    write_words(path, make_words(2500))
    return path
