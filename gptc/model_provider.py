"""LLM provider factory for OpenAI, Groq and Google Gemini chat models."""

from gptc.exceptions import ConfigurationError
from gptc.models.completion_config import CompletionConfig


def create_llm(config: CompletionConfig):
    """Create a streaming chat model for the configured provider.

    Args:
        config: Completion client configuration (provider, model, key, sampling).

    Returns:
        A LangChain chat model instance.

    Raises:
        ConfigurationError: If the provider is not supported.
    """
    if config.provider == "openai":
        from langchain_openai import ChatOpenAI
        return ChatOpenAI(
            model=config.model_name,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            streaming=config.streaming,
            api_key=config.api_key,
        )
    elif config.provider == "groq":
        from langchain_groq import ChatGroq
        return ChatGroq(
            model=config.model_name,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            streaming=config.streaming,
            api_key=config.api_key,
        )
    elif config.provider == "google":
        from langchain_google_genai import ChatGoogleGenerativeAI
        return ChatGoogleGenerativeAI(
            model=config.model_name,
            temperature=config.temperature,
            max_output_tokens=config.max_tokens,
            google_api_key=config.api_key,
        )
    else:
        raise ConfigurationError(f"Unsupported provider: {config.provider}")
