"""Extract an executable SQL command from free-form model text.

Extraction tries an ordered list of named strategies; the first one that
returns a value wins. Each strategy is a pure function ``text -> str | None``.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

STATEMENT_TERMINATOR = ";"

# One line break directly before "SQLResult:" belongs to the marker.
_BETWEEN_MARKERS_PATTERN = re.compile(r"SQLQuery:(.*?)\n?SQLResult:", re.DOTALL)
_RESULT_BOUNDARY = "\nSQLResult"
_ANSWER_BOUNDARY = "\nAnswer"


@dataclass(frozen=True)
class ExtractionStrategy:
    name: str
    extract: Callable[[str], Optional[str]]


def strip_statement_terminators(command: str) -> str:
    return command.replace(STATEMENT_TERMINATOR, "")


def between_markers(text: str) -> Optional[str]:
    """Text between ``SQLQuery:`` and ``SQLResult:``."""
    match = _BETWEEN_MARKERS_PATTERN.search(text)
    return match.group(1) if match else None


def before_result_or_answer(text: str) -> Optional[str]:
    """Text before the first ``\\nSQLResult`` or ``\\nAnswer``, terminators removed."""
    boundaries = [i for i in (text.find(_RESULT_BOUNDARY), text.find(_ANSWER_BOUNDARY)) if i != -1]
    if not boundaries:
        return None
    return strip_statement_terminators(text[: min(boundaries)])


def whole_text(text: str) -> str:
    return text


SQL_EXTRACTION_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    ExtractionStrategy("between_markers", between_markers),
    ExtractionStrategy("before_result_or_answer", before_result_or_answer),
    ExtractionStrategy("whole_text", whole_text),
)


def extract_sql_command(
    text: str,
    strategies: tuple[ExtractionStrategy, ...] = SQL_EXTRACTION_STRATEGIES,
) -> str:
    """Return the command found by the first matching strategy, or the text itself."""
    for strategy in strategies:
        command = strategy.extract(text)
        if command is not None:
            logger.debug("SQL command extracted with strategy %s", strategy.name)
            return command
    return text
