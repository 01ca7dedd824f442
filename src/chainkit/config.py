"""Shared configuration for chainkit."""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChainkitSettings(BaseSettings):
    """Chainkit-wide settings. Values are defaults for per-request model parameters."""

    APP_VERSION: str = "1.0.0"

    # LLM provider: openai | local
    LLM_PROVIDER: str = "openai"
    OPENAI_API_KEY: Optional[str] = None
    LLM_MODEL: str = "gpt-4o-mini"
    TEMPERATURE: float = 0.0
    LLM_MAX_TOKENS: Optional[int] = None
    # Local / OpenAI-compatible endpoint (Ollama, LM Studio, vLLM, OCI OpenAI-compatible)
    LLM_LOCAL_BASE_URL: str = "http://localhost:11434/v1"
    LLM_LOCAL_MODEL: Optional[str] = None

    # SQL chain defaults
    SQL_TOP_K: int = 5
    SQL_SAMPLE_ROWS_IN_TABLE_INFO: int = 3

    # HTTP request chain: httpx timeout in seconds
    HTTP_TIMEOUT: float = 30.0

    # Observability: LLM tracing (log prompt/response/latency)
    ENABLE_LLM_TRACING: bool = False
    TRACING_LOG_LEVEL: str = "INFO"  # DEBUG | INFO | WARNING
    LOG_LEVEL: str = "INFO"

    DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


@lru_cache
def get_settings() -> ChainkitSettings:
    return ChainkitSettings()


def get_settings_dep() -> ChainkitSettings:
    """FastAPI dependency that returns settings."""
    return get_settings()
