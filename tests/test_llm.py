"""Tests for LLM providers, the provider registry and the per-chain factory."""

from unittest.mock import MagicMock

import pytest

from src.chainkit.config import ChainkitSettings
from src.chainkit.exceptions import APIKeyError, ModelInvocationError, ProviderNotFoundError
from src.chainkit.llm import (
    LLMClient,
    LLMFactory,
    LLMProviderRegistry,
    LocalLLMProvider,
    ModelParameters,
    OpenAILLMProvider,
)
from src.chainkit.observability import TracingLLMClient
from tests.fakes import FakeLLM


def test_registry_lists_builtin_providers():
    providers = LLMProviderRegistry.list_providers()
    assert "openai" in providers
    assert "local" in providers
    assert LLMProviderRegistry.is_registered("OpenAI")


def test_registry_unknown_provider():
    with pytest.raises(ProviderNotFoundError) as exc_info:
        LLMProviderRegistry.create("nope")
    assert "openai" in exc_info.value.available


def test_registry_openai_requires_api_key():
    with pytest.raises(APIKeyError):
        LLMProviderRegistry.create("openai", api_key=None)


def test_registry_custom_provider():
    @LLMProviderRegistry.register("fake-test")
    def create_fake(api_key, model, temperature, **kwargs):
        return FakeLLM([model])

    try:
        llm = LLMProviderRegistry.create("fake-test", model="m")
        assert llm.invoke("x") == "m"
    finally:
        LLMProviderRegistry.unregister("fake-test")


def test_openai_provider_passes_stop():
    llm = OpenAILLMProvider(api_key="sk-test", stop_sequences=["END"])
    llm._client = MagicMock()
    llm._client.invoke.return_value = MagicMock(content="answer")

    assert llm.invoke("prompt") == "answer"
    assert llm._client.invoke.call_args.kwargs["stop"] == ["END"]

    llm.invoke("prompt", stop=["\n\nSQLResult:"])
    assert llm._client.invoke.call_args.kwargs["stop"] == ["\n\nSQLResult:"]


def test_openai_provider_wraps_errors():
    llm = OpenAILLMProvider(api_key="sk-test")
    llm._client = MagicMock()
    llm._client.invoke.side_effect = RuntimeError("rate limited")
    with pytest.raises(ModelInvocationError) as exc_info:
        llm.invoke("prompt")
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_factory_uses_settings_defaults(settings):
    llm = LLMFactory(settings).create()
    assert isinstance(llm, OpenAILLMProvider)
    assert llm._client.model_name == "gpt-4o-mini"


def test_factory_request_parameters_override(settings):
    llm = LLMFactory(settings).create(ModelParameters(model_id="gpt-4o", temperature=0.5, max_tokens=64))
    assert llm._client.model_name == "gpt-4o"
    assert llm._client.temperature == 0.5
    assert llm._client.max_tokens == 64


def test_factory_local_provider():
    settings = ChainkitSettings(_env_file=None, LLM_PROVIDER="local", LLM_LOCAL_MODEL="llama3.2")
    llm = LLMFactory(settings).create()
    assert isinstance(llm, LocalLLMProvider)
    assert llm.provider_name == "local"
    assert llm._client.model_name == "llama3.2"


def test_factory_missing_api_key():
    settings = ChainkitSettings(_env_file=None, OPENAI_API_KEY=None)
    with pytest.raises(APIKeyError):
        LLMFactory(settings).create(ModelParameters(provider="openai"))


def test_factory_returns_fresh_clients(settings):
    factory = LLMFactory(settings)
    assert factory.create() is not factory.create()


def test_factory_tracing_wrapper():
    settings = ChainkitSettings(_env_file=None, OPENAI_API_KEY="sk-test", ENABLE_LLM_TRACING=True)
    llm = LLMFactory(settings).create()
    assert isinstance(llm, TracingLLMClient)
    assert isinstance(llm, LLMClient)
    assert llm.provider_name == "openai"


def test_model_parameters_accept_camel_case():
    params = ModelParameters.model_validate({"modelId": "m", "maxTokens": 10, "stopSequences": ["x"]})
    assert params.model_id == "m"
    assert params.max_tokens == 10
    assert params.stop_sequences == ["x"]
