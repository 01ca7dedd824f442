"""Chains: the input/output key contract and its LLM, SQL and HTTP implementations."""

from .base import Chain
from .command_extraction import ExtractionStrategy, SQL_EXTRACTION_STRATEGIES, extract_sql_command
from .http_request_chain import HttpRequestChain, build_url_with_parameters
from .llm_chain import LLMChain
from .sql_database_chain import SQLDatabaseChain
from .sql_database_sequential_chain import SQLDatabaseSequentialChain

__all__ = [
    "Chain",
    "LLMChain",
    "SQLDatabaseChain",
    "SQLDatabaseSequentialChain",
    "HttpRequestChain",
    "build_url_with_parameters",
    "ExtractionStrategy",
    "SQL_EXTRACTION_STRATEGIES",
    "extract_sql_command",
]
