"""Prompts: templates and the default SQL / HTTP prompt catalogue."""

from .template import PromptTemplate, find_placeholders
from .sql import (
    CMD_PROMPT,
    DECIDER_PROMPT,
    ORACLE_CMD_PROMPT,
    ORACLE_PROMPT,
    PROMPT,
    SQL_PROMPTS,
    command_prompt_for_dialect,
    prompt_for_dialect,
)
from .http import HTTP_RESPONSE_PROMPT

__all__ = [
    "PromptTemplate",
    "find_placeholders",
    "PROMPT",
    "ORACLE_PROMPT",
    "ORACLE_CMD_PROMPT",
    "CMD_PROMPT",
    "DECIDER_PROMPT",
    "SQL_PROMPTS",
    "prompt_for_dialect",
    "command_prompt_for_dialect",
    "HTTP_RESPONSE_PROMPT",
]
