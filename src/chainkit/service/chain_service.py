"""Chain service: completions, single chains and ordered multi-chain pipelines."""

import base64
import logging
from enum import Enum
from typing import Any, Callable, Optional

import httpx

from ..chains.http_request_chain import HttpRequestChain
from ..chains.llm_chain import LLMChain
from ..chains.sql_database_chain import SQLDatabaseChain
from ..chains.sql_database_sequential_chain import SQLDatabaseSequentialChain
from ..config import ChainkitSettings
from ..exceptions import ConfigurationError, MissingInputError, UnsupportedChainTypeError
from ..llm.factory import LLMFactory
from ..llm.parameters import ModelParameters
from ..prompts.template import PromptTemplate
from ..sql.database import SQLDatabase
from ..utils.tokens import merge_prompt_with_properties, properties_to_dict
from .payloads import (
    ChainRequestPayload,
    CompletionRequestPayload,
    HttpRequestPayload,
    MultipleChainsRequestPayload,
    Property,
)

logger = logging.getLogger(__name__)


class ChainKind(str, Enum):
    """Chain kind tags accepted in payloads and in the ``/chain/{chain_type}`` route."""

    LLM = "llm"
    HTTP_REQUEST = "httpRequest"
    ORACLE_DB = "oracleDb"

    @classmethod
    def parse(cls, value: Any) -> "ChainKind":
        """Case-insensitive lookup by value. Raises UnsupportedChainTypeError."""
        if isinstance(value, cls):
            return value
        tag = str(value or "").strip().lower()
        for kind in cls:
            if kind.value.lower() == tag:
                return kind
        raise UnsupportedChainTypeError(str(value), [k.value for k in cls])


def build_authorization_header(request: HttpRequestPayload) -> Optional[str]:
    """Explicit token wins; otherwise Basic auth from username and password, if both are set."""
    if request.authorization_token:
        return request.authorization_token
    if request.username and request.password:
        credentials = f"{request.username}:{request.password}".encode("utf-8")
        return "Basic " + base64.b64encode(credentials).decode("ascii")
    return None


class ChainService:
    """
    Entry point used by the REST API and the CLI.

    Each chain gets its own LLM client (built from that chain's model
    parameters) and its own action adapters; nothing is shared between
    invocations.
    """

    def __init__(
        self,
        settings: ChainkitSettings,
        llm_factory: Optional[LLMFactory] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        engine_args: Optional[dict[str, Any]] = None,
    ):
        """
        transport: httpx transport for HTTP request chains (None = network).
        engine_args: extra ``create_engine`` arguments for database chains.
        """
        self._settings = settings
        self._llm_factory = llm_factory or LLMFactory(settings)
        self._transport = transport
        self._engine_args = engine_args
        self._handlers: dict[ChainKind, Callable[[ChainRequestPayload], str]] = {
            ChainKind.LLM: self._invoke_llm_chain,
            ChainKind.HTTP_REQUEST: self._invoke_http_request_chain,
            ChainKind.ORACLE_DB: self._invoke_database_chain,
        }
        unhandled = [kind.value for kind in ChainKind if kind not in self._handlers]
        if unhandled:
            raise ConfigurationError("chain_handlers", f"No handler for chain kinds: {unhandled}")

    def complete(self, payload: CompletionRequestPayload) -> str:
        """Single model call on the prompt, rendered with the properties."""
        logger.info("Invoke completion API...")
        return self._invoke_llm(payload.prompt, payload.model_parameters, payload.properties)

    def invoke_chain(self, chain_type: Any, payload: ChainRequestPayload) -> str:
        """Run one chain of the given kind and return its text result."""
        kind = ChainKind.parse(chain_type)
        logger.info("Invoke single chain service (%s)...", kind.value)
        return self._handlers[kind](payload)

    def invoke_chains(self, payload: MultipleChainsRequestPayload) -> str:
        """
        Run the chains in order, binding each result to its ``{output_variable}``,
        then answer the shared prompt.

        Step results and global properties are substituted together in one pass
        over the shared prompt, so braces inside a result stay literal. A step
        result wins over a global property of the same name, and the first step
        bound to a name wins over later ones.
        """
        bindings: dict[str, str] = {}
        for step in payload.chains:
            kind = ChainKind.parse(step.chain_type)
            result = self._handlers[kind](step)
            if step.output_variable:
                bindings.setdefault(step.output_variable, result)
                logger.debug("Bound %s output to {%s}", kind.value, step.output_variable)
        return self._invoke_llm(payload.prompt, payload.model_parameters, payload.properties, bindings)

    def _invoke_llm(
        self,
        prompt: str,
        model_parameters: Optional[ModelParameters],
        properties: list[Property],
        bindings: Optional[dict[str, str]] = None,
    ) -> str:
        logger.info("Invoke LLM ...")
        llm = self._llm_factory.create(model_parameters)
        chain = LLMChain(llm, PromptTemplate.from_template(prompt))
        variables = {**properties_to_dict(properties), **(bindings or {})}
        return chain.call(variables, return_only_outputs=True)[chain.output_key]

    def _invoke_llm_chain(self, chain: ChainRequestPayload) -> str:
        logger.info("Invoke LLM chain ...")
        return self._invoke_llm(chain.prompt, chain.model_parameters, chain.properties)

    def _invoke_http_request_chain(self, chain: ChainRequestPayload) -> str:
        logger.info("Invoke HTTP request chain ...")
        request = chain.http_request
        if request is None:
            raise MissingInputError("httpRequest", ChainKind.HTTP_REQUEST.value)
        llm = self._llm_factory.create(chain.model_parameters)
        headers = {
            "Authorization": build_authorization_header(request),
            "Content-Type": request.content_type,
        }
        question = merge_prompt_with_properties(chain.properties, chain.prompt)
        http_chain = HttpRequestChain.using_api_url(
            llm,
            request.api_url,
            request.parameters,
            headers,
            timeout=self._settings.HTTP_TIMEOUT,
            transport=self._transport,
        )
        return http_chain.run(question)

    def _invoke_database_chain(self, chain: ChainRequestPayload) -> str:
        logger.info("Invoke database chain ...")
        request = chain.db_request
        if request is None:
            raise MissingInputError("dbRequest", ChainKind.ORACLE_DB.value)
        llm = self._llm_factory.create(chain.model_parameters)
        settings = self._settings
        sample_rows = (
            request.sample_rows_in_table_info
            if request.sample_rows_in_table_info is not None
            else settings.SQL_SAMPLE_ROWS_IN_TABLE_INFO
        )
        top_k = request.top_k if request.top_k is not None else settings.SQL_TOP_K

        with SQLDatabase.from_uri(
            request.db_connection,
            request.db_username,
            request.db_password,
            engine_args=self._engine_args,
            include_tables=request.include_tables,
            ignore_tables=request.ignore_tables,
            sample_rows_in_table_info=sample_rows,
        ) as database:
            chain_kwargs = {"top_k": top_k, "return_direct": request.return_direct}
            if request.sql_cmd:
                db_chain = SQLDatabaseChain.from_sql_cmd(
                    llm, database, request.sql_cmd, properties_to_dict(chain.properties), **chain_kwargs
                )
            elif request.use_decider:
                db_chain = SQLDatabaseSequentialChain.from_llm(llm, database, **chain_kwargs)
            else:
                db_chain = SQLDatabaseChain.from_llm(llm, database, **chain_kwargs)
            return db_chain.run(chain.prompt)
