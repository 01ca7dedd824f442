"""LLM chain: prompt template + LLM → response text."""

from typing import Any, Optional

from ..llm.base import LLMClient
from ..prompts.template import PromptTemplate

from .base import Chain


class LLMChain(Chain):
    """Chain that renders a prompt template with inputs and invokes the LLM.

    Stop sequences are a per-call option (``call(..., stop=[...])``), so every
    input key, ``stop`` included, is a template variable.
    """

    def __init__(self, llm: LLMClient, prompt: PromptTemplate, output_key: str = "text"):
        self.llm = llm
        self.prompt = prompt
        self.output_key = output_key

    @property
    def chain_type(self) -> str:
        return "llm_chain"

    @property
    def input_keys(self) -> list[str]:
        return list(self.prompt.input_variables)

    @property
    def output_keys(self) -> list[str]:
        return [self.output_key]

    def _call(self, inputs: dict[str, Any], stop: Optional[list[str]] = None) -> dict[str, Any]:
        text = self.llm.invoke(self.prompt.render(**inputs), stop=stop)
        return {self.output_key: text}

    def predict(
        self,
        inputs: Optional[dict[str, Any]] = None,
        *,
        stop: Optional[list[str]] = None,
        **kwargs: Any,
    ) -> str:
        """Render and invoke; returns the raw model text.

        Variables come from ``inputs`` and/or keyword arguments; use ``inputs``
        for a variable whose name clashes with ``stop``.
        """
        variables = {**(inputs or {}), **kwargs}
        return self.call(variables, return_only_outputs=True, stop=stop)[self.output_key]

    def predict_and_parse(self, **kwargs: Any) -> Any:
        """Predict, then apply the prompt's output parser (raw text if it has none)."""
        text = self.predict(**kwargs)
        if self.prompt.output_parser is None:
            return text
        return self.prompt.output_parser.parse(text)
