"""Abstract chain interface: declared input/output keys around a single execution step."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..exceptions import ChainContractError, MissingInputError

logger = logging.getLogger(__name__)


class Chain(ABC):
    """Abstract interface for chains.

    A chain declares the keys it reads (``input_keys``) and the keys it
    guarantees in its result (``output_keys``). ``call`` validates inputs,
    runs ``_call`` and validates outputs. The base class performs no I/O;
    side effects belong to the concrete chain.
    """

    @property
    @abstractmethod
    def chain_type(self) -> str:
        """Tag identifying the concrete chain variant."""
        ...

    @property
    @abstractmethod
    def input_keys(self) -> list[str]:
        ...

    @property
    @abstractmethod
    def output_keys(self) -> list[str]:
        ...

    @abstractmethod
    def _call(self, inputs: dict[str, Any]) -> dict[str, Any]:
        """Chain-specific step. Receives validated inputs, returns the declared outputs."""
        ...

    def call(
        self, inputs: dict[str, Any], return_only_outputs: bool = False, **options: Any
    ) -> dict[str, Any]:
        """Run the chain.

        Args:
            inputs: Must contain every name in ``input_keys``; extra keys are passed through.
            return_only_outputs: If False, the result is the caller inputs merged with the
                outputs. On a key collision the output value wins.
            options: Per-call settings handed to ``_call`` as keywords, never mixed into
                the inputs (``LLMChain`` takes ``stop``).

        Raises:
            MissingInputError: If a declared input key is absent.
        """
        for key in self.input_keys:
            if key not in inputs:
                raise MissingInputError(key, self.chain_type)
        logger.debug("Executing %s", self.chain_type)
        outputs = self._call(dict(inputs), **options)
        for key in self.output_keys:
            if key not in outputs:
                raise ChainContractError(key, self.chain_type)
        if return_only_outputs:
            return outputs
        return {**inputs, **outputs}

    def __call__(self, inputs: dict[str, Any], return_only_outputs: bool = False) -> dict[str, Any]:
        """Convenience: chain(inputs) == chain.call(inputs)."""
        return self.call(inputs, return_only_outputs=return_only_outputs)

    def run(self, *args: Any, **kwargs: Any) -> Any:
        """Run a single-output chain and return that output's value.

        One positional argument is bound to the single input key; otherwise
        inputs are given as keyword arguments.
        """
        if len(self.output_keys) != 1:
            raise ValueError(f"run() requires a single output key, {self.chain_type} has {self.output_keys}")
        if args:
            if len(args) != 1 or kwargs or len(self.input_keys) != 1:
                raise ValueError("run() supports one positional argument only for single-input chains")
            inputs = {self.input_keys[0]: args[0]}
        else:
            inputs = kwargs
        return self.call(inputs, return_only_outputs=True)[self.output_keys[0]]
