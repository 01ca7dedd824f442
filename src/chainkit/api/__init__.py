"""Base API layer: app factory, error handling, dependencies."""

from .app import create_app, error_status_code
from .deps import get_chain_service, get_llm_factory

__all__ = [
    "create_app",
    "error_status_code",
    "get_chain_service",
    "get_llm_factory",
]
