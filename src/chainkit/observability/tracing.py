"""LLM call tracing for chains: one record per model call with latency, stop sequences and outcome."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..llm.base import LLMClient

logger = logging.getLogger(__name__)


@dataclass
class TraceEntry:
    """Single model call as seen by a chain."""

    provider: str
    prompt: str
    response: str
    latency_seconds: float
    stop: Optional[list[str]] = None
    error: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def prompt_length(self) -> int:
        return len(self.prompt)

    @property
    def response_length(self) -> int:
        return len(self.response)

    @property
    def succeeded(self) -> bool:
        return self.error is None


class TracingLLMClient(LLMClient):
    """
    Decorates an LLMClient: every ``invoke`` is logged and, optionally,
    handed to a callback. Failures are traced too and then re-raised unchanged.
    """

    def __init__(
        self,
        inner: LLMClient,
        log_level: int = logging.INFO,
        callback: Optional[Callable[[TraceEntry], None]] = None,
    ):
        self._inner = inner
        self._log_level = log_level
        self._callback = callback
        self.provider_name = inner.provider_name

    def invoke(self, prompt: str, stop: Optional[list[str]] = None, **kwargs: Any) -> str:
        entry = TraceEntry(provider=self.provider_name, prompt=prompt, response="", latency_seconds=0.0, stop=stop, metadata=kwargs)
        start = time.perf_counter()
        try:
            entry.response = self._inner.invoke(prompt, stop=stop, **kwargs)
        except Exception as e:
            entry.error = f"{type(e).__name__}: {e}"
            raise
        finally:
            entry.latency_seconds = time.perf_counter() - start
            self._emit(entry)
        return entry.response

    def _emit(self, entry: TraceEntry) -> None:
        logger.log(
            self._log_level if entry.succeeded else logging.WARNING,
            "LLM trace | provider=%s latency=%.3fs prompt_len=%s response_len=%s stop=%r error=%s",
            entry.provider,
            entry.latency_seconds,
            entry.prompt_length,
            entry.response_length,
            entry.stop,
            entry.error,
        )
        if self._callback:
            try:
                self._callback(entry)
            except Exception as e:
                logger.warning("Tracing callback failed: %s", e)
