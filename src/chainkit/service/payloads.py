"""Request payloads for completions, single chains and multi-chain pipelines.

All models accept camelCase keys (``modelParameters``, ``outputVariable``)
as well as snake_case field names.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..llm.parameters import ModelParameters


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())


class Property(_Payload):
    """A named value substituted into prompts and SQL commands as ``{key}``."""

    key: str
    value: Any = None


class HttpRequestPayload(_Payload):
    api_url: str = Field(..., description="Endpoint to GET")
    authorization_token: Optional[str] = Field(None, description="Full Authorization header value")
    username: Optional[str] = None
    password: Optional[str] = None
    content_type: Optional[str] = "application/json"
    parameters: dict[str, Any] = Field(default_factory=dict, description="Query parameters")


class DatabaseRequestPayload(_Payload):
    db_connection: str = Field(..., description="SQLAlchemy URL, e.g. oracle+oracledb://host:1521/?service_name=x")
    db_username: Optional[str] = None
    db_password: Optional[str] = None
    sql_cmd: Optional[str] = Field(None, description="Fixed command with {key} placeholders")
    include_tables: Optional[list[str]] = None
    ignore_tables: Optional[list[str]] = None
    sample_rows_in_table_info: Optional[int] = None
    top_k: Optional[int] = None
    return_direct: bool = False
    use_decider: bool = Field(False, description="Let the model pick relevant tables first (generation path only)")


class CompletionRequestPayload(_Payload):
    prompt: str
    model_parameters: Optional[ModelParameters] = None
    properties: list[Property] = Field(default_factory=list)


class ChainRequestPayload(_Payload):
    """One chain: kind tag, its own prompt and model, and an optional output variable."""

    chain_type: Optional[str] = None
    prompt: str
    model_parameters: Optional[ModelParameters] = None
    http_request: Optional[HttpRequestPayload] = None
    db_request: Optional[DatabaseRequestPayload] = None
    properties: list[Property] = Field(default_factory=list)
    output_variable: Optional[str] = None


class MultipleChainsRequestPayload(_Payload):
    prompt: str
    model_parameters: Optional[ModelParameters] = None
    chains: list[ChainRequestPayload] = Field(default_factory=list)
    properties: list[Property] = Field(default_factory=list)
