"""Named LLM provider factories.

``LLMFactory`` resolves request model parameters and then asks the registry
for a client by provider name. New providers plug in with a decorator:

    @LLMProviderRegistry.register("my_provider")
    def create_my_provider(api_key, model, temperature, **options):
        return MyLLMProvider(...)

Built-in providers:
    - openai: OpenAI chat models (requires OPENAI_API_KEY)
    - local: any OpenAI-compatible endpoint (Ollama, LM Studio, vLLM)
"""

from typing import Any, Callable, Dict, Optional

from ..exceptions import APIKeyError, ProviderNotFoundError
from .base import LLMClient

ProviderFactory = Callable[..., LLMClient]


def _normalize(name: Optional[str]) -> str:
    return (name or "openai").lower().strip()


class LLMProviderRegistry:
    """Class-level map of provider name to factory."""

    _providers: Dict[str, ProviderFactory] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[ProviderFactory], ProviderFactory]:
        """Decorator registering ``factory(api_key, model, temperature, **options)`` under ``name``."""
        def decorator(factory: ProviderFactory) -> ProviderFactory:
            cls._providers[_normalize(name)] = factory
            return factory
        return decorator

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._providers.pop(_normalize(name), None)

    @classmethod
    def create(
        cls,
        provider: Optional[str],
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.0,
        **options: Any,
    ) -> LLMClient:
        """Build a client for ``provider``.

        ``options`` are provider specific (max_tokens, top_p, penalties,
        stop_sequences, base_url).

        Raises:
            ProviderNotFoundError: If no factory is registered under the name
            APIKeyError: If the provider needs a key and none was given
        """
        name = _normalize(provider)
        factory = cls._providers.get(name)
        if factory is None:
            raise ProviderNotFoundError(name, cls.list_providers())
        return factory(api_key=api_key, model=model, temperature=temperature, **options)

    @classmethod
    def list_providers(cls) -> list[str]:
        return sorted(cls._providers)

    @classmethod
    def is_registered(cls, provider: str) -> bool:
        return _normalize(provider) in cls._providers


def _register_builtin_providers() -> None:
    from .local_provider import DEFAULT_LOCAL_BASE_URL, LocalLLMProvider
    from .openai_provider import OpenAILLMProvider

    @LLMProviderRegistry.register("openai")
    def create_openai(api_key: Optional[str], model: str, temperature: float, **options: Any) -> LLMClient:
        if not api_key:
            raise APIKeyError("OpenAI", "OPENAI_API_KEY")
        return OpenAILLMProvider(api_key=api_key, model=model, temperature=temperature, **options)

    @LLMProviderRegistry.register("local")
    def create_local(api_key: Optional[str], model: str, temperature: float, **options: Any) -> LLMClient:
        base_url = options.pop("base_url", None) or DEFAULT_LOCAL_BASE_URL
        return LocalLLMProvider(base_url=base_url, model=model, temperature=temperature, api_key=api_key, **options)


_register_builtin_providers()
