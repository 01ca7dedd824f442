"""Decide-then-act over a SQL database: pick the relevant tables, then query only those."""

import logging
from typing import Any, Optional

from langchain_core.output_parsers import CommaSeparatedListOutputParser

from ..llm.base import LLMClient
from ..prompts.sql import DECIDER_PROMPT
from ..prompts.template import PromptTemplate
from ..sql.database import SQLDatabase

from .base import Chain
from .llm_chain import LLMChain
from .sql_database_chain import TABLE_NAMES_KEY, SQLDatabaseChain

logger = logging.getLogger(__name__)


class SQLDatabaseSequentialChain(Chain):
    """
    Two-stage SQL chain. A decider model picks the tables relevant to the
    question; the wrapped SQLDatabaseChain then sees only their schema.

    Useful when the database has more tables than fit comfortably in a prompt.
    """

    def __init__(
        self,
        sql_chain: SQLDatabaseChain,
        decider_chain: LLMChain,
        input_key: str = "query",
    ):
        self.sql_chain = sql_chain
        self.decider_chain = decider_chain
        self.input_key = input_key

    @classmethod
    def from_llm(
        cls,
        llm: LLMClient,
        database: SQLDatabase,
        query_prompt: Optional[PromptTemplate] = None,
        decider_prompt: PromptTemplate = DECIDER_PROMPT,
        **kwargs: Any,
    ) -> "SQLDatabaseSequentialChain":
        """Build both stages on one model. Extra kwargs go to the SQL chain;
        without a query prompt the database dialect picks one."""
        sql_chain = SQLDatabaseChain.from_llm(llm, database, prompt=query_prompt, **kwargs)
        decider_chain = LLMChain(llm, decider_prompt, output_key="table_names")
        return cls(sql_chain, decider_chain)

    @property
    def chain_type(self) -> str:
        return "sql_database_sequential_chain"

    @property
    def input_keys(self) -> list[str]:
        return [self.input_key]

    @property
    def output_keys(self) -> list[str]:
        return self.sql_chain.output_keys

    def _call(self, inputs: dict[str, Any]) -> dict[str, Any]:
        question = inputs[self.input_key]
        table_names = self.sql_chain.database.get_usable_table_names()
        candidates = self.decider_chain.predict_and_parse(
            query=question, table_names=", ".join(table_names)
        )
        if isinstance(candidates, str):
            candidates = CommaSeparatedListOutputParser().parse(candidates)
        known = {name.lower() for name in table_names}
        picked = [name.strip() for name in candidates]
        selected = [name for name in picked if name and name.lower() in known]
        logger.debug("Table names to use: %s", selected)

        sql_inputs = {self.sql_chain.input_key: question, TABLE_NAMES_KEY: selected}
        return self.sql_chain.call(sql_inputs, return_only_outputs=True)
