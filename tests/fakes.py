"""Test doubles: scripted LLM, per-chain LLM factory and an in-memory action target."""

from typing import Any, Optional

from src.chainkit.llm.base import LLMClient


class FakeLLM(LLMClient):
    """Returns queued responses in order (then ``default``); records prompts and stop sequences."""

    provider_name = "fake"

    def __init__(self, responses: Optional[list[str]] = None, default: str = "ok"):
        self.responses = list(responses or [])
        self.default = default
        self.prompts: list[str] = []
        self.stops: list[Optional[list[str]]] = []

    def invoke(self, prompt: str, stop: Optional[list[str]] = None, **kwargs: Any) -> str:
        self.prompts.append(prompt)
        self.stops.append(stop)
        if self.responses:
            return self.responses.pop(0)
        return self.default


class FakeLLMFactory:
    """Hands out the given clients, one per ``create`` call, and records the parameters."""

    def __init__(self, *llms: LLMClient):
        self.llms = list(llms)
        self.parameters: list[Any] = []

    def create(self, parameters=None) -> LLMClient:
        self.parameters.append(parameters)
        return self.llms.pop(0)


class FakeDatabase:
    """Duck-typed SQLDatabase: fixed table names, canned run result, recorded calls."""

    def __init__(self, table_names: list[str], run_result: str = "", dialect: str = "oracle"):
        self.table_names = list(table_names)
        self.run_result = run_result
        self.dialect = dialect
        self.table_info_requests: list[Optional[list[str]]] = []
        self.commands: list[str] = []

    def get_usable_table_names(self) -> list[str]:
        return list(self.table_names)

    def get_table_info(self, table_names: Optional[list[str]] = None) -> str:
        self.table_info_requests.append(table_names)
        names = self.table_names if table_names is None else table_names
        return "\n\n".join(f"CREATE TABLE {name} (ID NUMBER)" for name in names)

    def run(self, command: str, include_column_names: bool = True) -> str:
        self.commands.append(command)
        return self.run_result
