"""Runtime configuration: constants, provider defaults and environment lookups."""

import os
from pathlib import Path
from typing import Optional

from gptc.exceptions import ConfigurationError
from gptc.models.completion_config import CompletionConfig

CHUNK_SIZE = 1024
DEFAULT_PROVIDER = "openai"
DEFAULT_MAX_TOKENS = 4096

DEFAULT_MODELS = {
    "openai": "gpt-4",
    "groq": "openai/gpt-oss-120b",
    "google": "gemini-2.0-flash",
}

SYSTEM_MESSAGE = (
    "You're a PhD that summarizes papers, seeking to understand their actual meaning "
    "in order to capture and preserve important information."
)


def get_provider() -> str:
    """Return the configured provider name (GPTC_PROVIDER, default openai)."""
    provider = (os.getenv("GPTC_PROVIDER") or DEFAULT_PROVIDER).strip().lower()
    if provider not in DEFAULT_MODELS:
        raise ConfigurationError(
            f"Unknown provider '{provider}'. Set GPTC_PROVIDER to one of: "
            + ", ".join(sorted(DEFAULT_MODELS))
        )
    return provider


def get_token_path(provider: Optional[str] = None) -> Path:
    """Location of the API token file.

    GPTC_TOKEN_PATH wins when set; otherwise ~/.config/<provider>.token.
    """
    override = os.getenv("GPTC_TOKEN_PATH")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / f"{provider or DEFAULT_PROVIDER}.token"


def get_max_tokens() -> int:
    raw = os.getenv("GPTC_MAX_TOKENS")
    if not raw:
        return DEFAULT_MAX_TOKENS
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"GPTC_MAX_TOKENS must be an integer, got '{raw}'") from e
    if value <= 0:
        raise ConfigurationError(f"GPTC_MAX_TOKENS must be positive, got {value}")
    return value


def build_completion_config(api_key: str, provider: Optional[str] = None) -> CompletionConfig:
    """
    Assemble the completion client configuration from the environment.

    Args:
        api_key: Credential loaded from the token file.
        provider: Provider override. If None, read from GPTC_PROVIDER.

    Returns:
        A frozen CompletionConfig with deterministic sampling and streaming enabled.
    """
    provider = provider or get_provider()
    return CompletionConfig(
        provider=provider,
        model_name=os.getenv("GPTC_MODEL") or DEFAULT_MODELS[provider],
        api_key=api_key,
        system_message=SYSTEM_MESSAGE,
        temperature=0.0,
        max_tokens=get_max_tokens(),
        streaming=True,
    )
