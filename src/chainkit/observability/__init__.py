"""Observability: LLM call tracing."""

from .tracing import TracingLLMClient, TraceEntry

__all__ = [
    "TracingLLMClient",
    "TraceEntry",
]
