"""Per-request model parameters (provider, model id, sampling settings)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelParameters(BaseModel):
    """Model settings carried by a chain payload. Unset fields fall back to settings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())

    provider: Optional[str] = Field(None, description="LLM provider: openai | local")
    model_id: Optional[str] = Field(None, description="Model name/identifier")
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    stop_sequences: Optional[list[str]] = None
    base_url: Optional[str] = Field(None, description="OpenAI-compatible endpoint URL")
    api_key: Optional[str] = None
