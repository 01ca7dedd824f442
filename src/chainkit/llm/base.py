"""Abstract LLM client interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class LLMClient(ABC):
    """Model adapter used by chains: a prompt in, generated text out.

    ``stop`` lists sequences at which generation must halt; the returned
    text does not include the matched sequence.
    """

    provider_name: str = "llm"

    @abstractmethod
    def invoke(self, prompt: str, stop: Optional[list[str]] = None, **kwargs: Any) -> str:
        """Send a prompt and return the model response text."""
        ...
