"""LLM abstraction, providers and per-chain client factory."""

from .base import LLMClient
from .parameters import ModelParameters
from .openai_provider import OpenAILLMProvider
from .local_provider import LocalLLMProvider
from .registry import LLMProviderRegistry
from .factory import LLMFactory

__all__ = [
    "LLMClient",
    "ModelParameters",
    "OpenAILLMProvider",
    "LocalLLMProvider",
    "LLMProviderRegistry",
    "LLMFactory",
]
