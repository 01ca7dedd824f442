"""OpenAI LLM provider implementation."""

from typing import Any, Optional

from langchain_openai import ChatOpenAI
from langchain_core.messages import HumanMessage

from ..exceptions import ModelInvocationError
from .base import LLMClient


class OpenAILLMProvider(LLMClient):
    """LLM client using the OpenAI chat completions API."""

    provider_name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.0,
        max_tokens: Optional[int] = None,
        top_p: Optional[float] = None,
        frequency_penalty: Optional[float] = None,
        presence_penalty: Optional[float] = None,
        stop_sequences: Optional[list[str]] = None,
        base_url: Optional[str] = None,
    ):
        kwargs: dict[str, Any] = {}
        if base_url:
            kwargs["base_url"] = base_url
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        if top_p is not None:
            kwargs["top_p"] = top_p
        if frequency_penalty is not None:
            kwargs["frequency_penalty"] = frequency_penalty
        if presence_penalty is not None:
            kwargs["presence_penalty"] = presence_penalty
        self._default_stop = list(stop_sequences) if stop_sequences else None
        self._client = ChatOpenAI(
            model=model,
            temperature=temperature,
            openai_api_key=api_key,
            **kwargs,
        )

    def invoke(self, prompt: str, stop: Optional[list[str]] = None, **kwargs: Any) -> str:
        """Call the chat model. An explicit ``stop`` replaces the configured stop sequences."""
        stop = stop if stop is not None else self._default_stop
        try:
            response = self._client.invoke([HumanMessage(content=prompt)], stop=stop)
        except Exception as e:
            raise ModelInvocationError(self.provider_name, str(e)) from e
        return response.content if hasattr(response, "content") else str(response)
