"""Local LLM provider: OpenAI-compatible endpoint (Ollama, LM Studio, vLLM, etc.)."""

from typing import Optional

from .openai_provider import OpenAILLMProvider

# Default for Ollama; use env LLM_LOCAL_BASE_URL to override (e.g. http://localhost:1234/v1 for LM Studio)
DEFAULT_LOCAL_BASE_URL = "http://localhost:11434/v1"


class LocalLLMProvider(OpenAILLMProvider):
    """LLM client for an OpenAI-compatible endpoint. No API key required."""

    provider_name = "local"

    def __init__(
        self,
        base_url: str = DEFAULT_LOCAL_BASE_URL,
        model: str = "llama3.2",
        temperature: float = 0.0,
        api_key: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(
            api_key=api_key or "local",
            model=model,
            temperature=temperature,
            base_url=base_url,
            **kwargs,
        )
