"""Configuration model for the streaming completion client."""

from pydantic import BaseModel, Field


class CompletionConfig(BaseModel):
    """Everything the completion client needs, fixed for the whole run."""

    provider: str = Field(default="openai", description="LLM provider: openai, groq or google")
    model_name: str = Field(description="Model identifier passed to the provider")
    api_key: str = Field(repr=False, description="API credential loaded from the token file")
    system_message: str = Field(description="Persona instruction sent as the system message")
    temperature: float = Field(default=0.0, description="Sampling temperature (0.0 for determinism)")
    max_tokens: int = Field(default=4096, gt=0, description="Output length ceiling per request")
    streaming: bool = Field(default=True, description="Request a streamed response")

    model_config = {"frozen": True, "protected_namespaces": ()}
