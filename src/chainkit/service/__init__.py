"""Chain service and its request payloads."""

from .chain_service import ChainKind, ChainService, build_authorization_header
from .payloads import (
    ChainRequestPayload,
    CompletionRequestPayload,
    DatabaseRequestPayload,
    HttpRequestPayload,
    MultipleChainsRequestPayload,
    Property,
)

__all__ = [
    "ChainKind",
    "ChainService",
    "build_authorization_header",
    "ChainRequestPayload",
    "CompletionRequestPayload",
    "DatabaseRequestPayload",
    "HttpRequestPayload",
    "MultipleChainsRequestPayload",
    "Property",
]
