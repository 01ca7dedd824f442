"""Build one LLM client per chain from request model parameters and settings defaults."""

import logging
from typing import Optional

from ..config import ChainkitSettings
from .base import LLMClient
from .parameters import ModelParameters
from .registry import LLMProviderRegistry


class LLMFactory:
    """Resolve ``ModelParameters`` against settings and create a fresh LLM client.

    Every call returns a new client so that chains never share a model adapter.
    """

    def __init__(self, settings: ChainkitSettings):
        self._settings = settings

    def create(self, parameters: Optional[ModelParameters] = None) -> LLMClient:
        params = parameters or ModelParameters()
        settings = self._settings
        provider = (params.provider or settings.LLM_PROVIDER or "openai").lower().strip()

        if provider == "local":
            model = params.model_id or settings.LLM_LOCAL_MODEL or settings.LLM_MODEL
            base_url = params.base_url or settings.LLM_LOCAL_BASE_URL
            api_key = params.api_key
        else:
            model = params.model_id or settings.LLM_MODEL
            base_url = params.base_url
            api_key = params.api_key or settings.OPENAI_API_KEY

        temperature = params.temperature if params.temperature is not None else settings.TEMPERATURE
        max_tokens = params.max_tokens if params.max_tokens is not None else settings.LLM_MAX_TOKENS

        llm = LLMProviderRegistry.create(
            provider=provider,
            api_key=api_key,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=params.top_p,
            frequency_penalty=params.frequency_penalty,
            presence_penalty=params.presence_penalty,
            stop_sequences=params.stop_sequences,
            base_url=base_url,
        )

        if settings.ENABLE_LLM_TRACING:
            from ..observability.tracing import TracingLLMClient

            level = getattr(logging, (settings.TRACING_LOG_LEVEL or "INFO").upper(), logging.INFO)
            llm = TracingLLMClient(llm, log_level=level)
        return llm
