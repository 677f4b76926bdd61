"""Streaming completion client: turns a chat model stream into text deltas."""

from typing import Callable, Iterable, Iterator, Optional

from gptc.exceptions import AuthError, CompletionError, TransportError
from gptc.model_provider import create_llm
from gptc.models.completion_config import CompletionConfig
from gptc.prompts import build_chat_prompt

_AUTH_ERROR_NAMES = {"AuthenticationError", "PermissionDeniedError", "Unauthenticated", "PermissionDenied"}
_TRANSPORT_ERROR_NAMES = {"APIConnectionError", "APITimeoutError", "ConnectError", "ReadTimeout", "DeadlineExceeded"}


def iter_deltas(cumulative_texts: Iterable[str]) -> Iterator[str]:
    """
    Yield only the new suffix of each successive cumulative text.

    Args:
        cumulative_texts: Monotonically growing snapshots of one response.

    Yields:
        Text not yet seen, in order; empty suffixes are skipped.
    """
    emitted = 0
    for text in cumulative_texts:
        delta = text[emitted:]
        emitted = max(emitted, len(text))
        if delta:
            yield delta


def _content_text(message) -> str:
    """Extract plain text from a message chunk (str or list of content blocks)."""
    content = message.content if hasattr(message, "content") else message
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def classify_error(error: Exception) -> CompletionError:
    """Map a provider exception onto AuthError, TransportError or CompletionError."""
    message = str(error) or type(error).__name__
    lowered = message.lower()
    status = getattr(error, "status_code", None)
    name = type(error).__name__

    if (
        status in (401, 403)
        or name in _AUTH_ERROR_NAMES
        or "invalid_api_key" in lowered
        or "invalid api key" in lowered
        or "incorrect api key" in lowered
    ):
        return AuthError(f"API key is invalid or rejected: {message}")
    if (
        isinstance(error, (ConnectionError, TimeoutError))
        or name in _TRANSPORT_ERROR_NAMES
        or "timed out" in lowered
        or "connection error" in lowered
    ):
        return TransportError(f"Could not reach the completion service: {message}")
    return CompletionError(f"Completion request failed: {message}")


class CompletionClient:
    """Sends one prompt at a time to a chat model and streams the reply back."""

    def __init__(self, config: CompletionConfig, llm=None):
        """
        Initialize the completion client.

        Args:
            config: Provider, model, credential and sampling settings.
            llm: Pre-built chat model. If None, one is created from config.
        """
        self.config = config
        self.llm = llm if llm is not None else create_llm(config)
        self.chain = build_chat_prompt(config.system_message) | self.llm

    def _cumulative_texts(self, prompt: str) -> Iterator[str]:
        text = ""
        for message_chunk in self.chain.stream({"prompt": prompt}):
            text += _content_text(message_chunk)
            yield text

    def stream(self, prompt: str) -> Iterator[str]:
        """
        Send one request and yield the reply as it grows.

        Args:
            prompt: Rendered instruction for one chunk.

        Yields:
            Text deltas, each delivered exactly once.

        Raises:
            CompletionError: AuthError or TransportError when classifiable.
        """
        try:
            yield from iter_deltas(self._cumulative_texts(prompt))
        except CompletionError:
            raise
        except Exception as e:
            raise classify_error(e) from e

    def complete(self, prompt: str, on_delta: Optional[Callable[[str], None]] = None) -> str:
        """Run one request to completion and return the full reply text."""
        parts = []
        for delta in self.stream(prompt):
            parts.append(delta)
            if on_delta is not None:
                on_delta(delta)
        return "".join(parts)
