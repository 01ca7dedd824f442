"""Chain for interacting with a SQL database: question → SQL → result → answer."""

import logging
from typing import Any, Optional

from ..llm.base import LLMClient
from ..prompts.sql import (
    ANSWER_MARKER,
    SQL_QUERY_MARKER,
    SQL_RESULT_MARKER,
    SQL_RESULT_STOP,
    command_prompt_for_dialect,
    prompt_for_dialect,
)
from ..prompts.template import PromptTemplate
from ..sql.database import SQLDatabase
from ..utils.tokens import substitute_tokens

from .base import Chain
from .command_extraction import extract_sql_command, strip_statement_terminators
from .llm_chain import LLMChain

logger = logging.getLogger(__name__)

TABLE_NAMES_KEY = "table_names_to_use"
INTERMEDIATE_STEPS_KEY = "intermediate_steps"


class SQLDatabaseChain(Chain):
    """
    Answer a question from a SQL database.

    Two modes:
      * generation: the model writes the SQL command from the question and
        the schema description (``from_llm``);
      * fixed command: a caller-supplied command with ``{name}`` placeholders
        filled from ``sql_properties`` (``from_sql_cmd``).

    In both modes the command result is either returned directly
    (``return_direct``) or handed back to the model to phrase the answer.
    """

    def __init__(
        self,
        llm_chain: LLMChain,
        database: SQLDatabase,
        *,
        top_k: int = 5,
        input_key: str = "query",
        output_key: str = "result",
        return_direct: bool = False,
        return_intermediate_steps: bool = False,
        sql_cmd: Optional[str] = None,
        sql_properties: Optional[dict[str, Any]] = None,
    ):
        self.llm_chain = llm_chain
        self.database = database
        self.top_k = top_k
        self.input_key = input_key
        self.output_key = output_key
        self.return_direct = return_direct
        self.return_intermediate_steps = return_intermediate_steps
        self.sql_cmd = sql_cmd
        self.sql_properties = dict(sql_properties or {})

    @classmethod
    def from_llm(
        cls,
        llm: LLMClient,
        database: SQLDatabase,
        prompt: Optional[PromptTemplate] = None,
        **kwargs: Any,
    ) -> "SQLDatabaseChain":
        """Generation mode; the prompt defaults to the database dialect's prompt."""
        prompt = prompt or prompt_for_dialect(database.dialect)
        return cls(LLMChain(llm, prompt), database, **kwargs)

    @classmethod
    def from_sql_cmd(
        cls,
        llm: LLMClient,
        database: SQLDatabase,
        sql_cmd: str,
        sql_properties: Optional[dict[str, Any]] = None,
        prompt: Optional[PromptTemplate] = None,
        **kwargs: Any,
    ) -> "SQLDatabaseChain":
        """Fixed-command mode; the model only phrases the answer."""
        prompt = prompt or command_prompt_for_dialect(database.dialect)
        return cls(
            LLMChain(llm, prompt),
            database,
            sql_cmd=sql_cmd,
            sql_properties=sql_properties,
            **kwargs,
        )

    @property
    def chain_type(self) -> str:
        return "sql_database_chain"

    @property
    def input_keys(self) -> list[str]:
        return [self.input_key]

    @property
    def output_keys(self) -> list[str]:
        if self.return_intermediate_steps:
            return [self.output_key, INTERMEDIATE_STEPS_KEY]
        return [self.output_key]

    def _call(self, inputs: dict[str, Any]) -> dict[str, Any]:
        question = str(inputs[self.input_key])
        table_info = self.database.get_table_info(inputs.get(TABLE_NAMES_KEY))
        llm_inputs: dict[str, Any] = {
            "top_k": self.top_k,
            "dialect": self.database.dialect,
            "table_info": table_info,
        }

        input_text = f"{question}\n{SQL_QUERY_MARKER}"
        if self.sql_cmd:
            llm_inputs.update(self.sql_properties)
            sql_cmd = substitute_tokens(self.sql_cmd, self.sql_properties)
        else:
            generated = self.llm_chain.predict(
                {**llm_inputs, "input": input_text}, stop=[SQL_RESULT_STOP]
            )
            sql_cmd = extract_sql_command(generated)

        sql_cmd = strip_statement_terminators(sql_cmd)
        logger.debug("SQL command: %s", sql_cmd)
        result = self.database.run(sql_cmd, include_column_names=True)
        logger.debug("SQL result: %s", result)

        if self.return_direct:
            final_result = result
        else:
            input_text += f"{sql_cmd}\n{SQL_RESULT_MARKER}\n{result}\n{ANSWER_MARKER}"
            final_result = self.llm_chain.predict({**llm_inputs, "input": input_text}).strip()
        logger.debug("Final answer: %s", final_result)

        outputs: dict[str, Any] = {self.output_key: final_result}
        if self.return_intermediate_steps:
            outputs[INTERMEDIATE_STEPS_KEY] = [sql_cmd, result]
        return outputs
