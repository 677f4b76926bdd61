"""Helper fakes and builders for the summarizer tests."""

from pathlib import Path
from typing import Iterator, List, Sequence

from langchain_core.language_models.fake_chat_models import GenericFakeChatModel
from langchain_core.messages import AIMessage


def make_words(count: int) -> List[str]:
    """Distinct words w1 ... wN."""
    return [f"w{i}" for i in range(1, count + 1)]


def write_words(path: Path, words: Sequence[str]) -> None:
    path.write_text(" ".join(words), encoding="utf-8")


def fake_chat_model(*replies: str) -> GenericFakeChatModel:
    """Chat model that streams the given replies word by word, one per request."""
    return GenericFakeChatModel(messages=iter([AIMessage(content=reply) for reply in replies]))


class FakeCompletionClient:
    """
    Stand-in for CompletionClient.

    Each request streams "summary <n>" in two deltas. Prompts are recorded so
    tests can count requests and inspect their order.
    """

    def __init__(self, fail_on: int = None, error: Exception = None):
        """
        Args:
            fail_on: 1-based request number that raises instead of streaming.
            error: Exception raised on that request.
        """
        self.prompts: List[str] = []
        self.fail_on = fail_on
        self.error = error

    def stream(self, prompt: str) -> Iterator[str]:
        self.prompts.append(prompt)
        number = len(self.prompts)
        if number == self.fail_on:
            raise self.error
        yield "summary"
        yield f" {number}"

    def complete(self, prompt: str, on_delta=None) -> str:
        parts = []
        for delta in self.stream(prompt):
            parts.append(delta)
            if on_delta is not None:
                on_delta(delta)
        return "".join(parts)
