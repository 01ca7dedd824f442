"""Prompt template: ``{name}`` placeholders rendered from a variables mapping."""

import re
from typing import Any, Optional

from langchain_core.output_parsers import BaseOutputParser

from ..exceptions import TemplateRenderError

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def find_placeholders(template: str) -> list[str]:
    """Placeholder names in order of first appearance, without duplicates."""
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))


class PromptTemplate:
    """Template string with declared input variables and an optional output parser.

    Rendering substitutes every ``{name}`` whose name is declared with ``str(value)``
    in a single pass, so substituted text is never re-scanned for placeholders.
    Placeholders for undeclared names are left as they are, and extra variables
    are ignored.
    """

    def __init__(
        self,
        template: str,
        input_variables: Optional[list[str]] = None,
        output_parser: Optional[BaseOutputParser] = None,
        partial_variables: Optional[dict[str, Any]] = None,
    ):
        """
        Args:
            template: Prompt string with {variable} placeholders.
            input_variables: Names that must be supplied; if None, inferred from {x} in template.
            output_parser: Parser applied by ``LLMChain.predict_and_parse``.
            partial_variables: Values bound ahead of rendering (see ``partial``).
        """
        self.template = template
        self.input_variables = (
            list(input_variables) if input_variables is not None else find_placeholders(template)
        )
        self.output_parser = output_parser
        self.partial_variables = dict(partial_variables or {})

    @classmethod
    def from_template(cls, template: str, output_parser: Optional[BaseOutputParser] = None) -> "PromptTemplate":
        return cls(template, output_parser=output_parser)

    def render(self, **variables: Any) -> str:
        """Render the template. Raises TemplateRenderError if a declared variable has no value."""
        values = {**self.partial_variables, **variables}
        missing = [name for name in self.input_variables if name not in values]
        if missing:
            raise TemplateRenderError(missing)
        declared = set(self.input_variables) | set(self.partial_variables)

        def _substitute(match: re.Match) -> str:
            name = match.group(1)
            if name in declared:
                return str(values[name])
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(_substitute, self.template)

    format = render

    def partial(self, **values: Any) -> "PromptTemplate":
        """Return a copy with some variables bound; they no longer need to be supplied."""
        return PromptTemplate(
            self.template,
            input_variables=[v for v in self.input_variables if v not in values],
            output_parser=self.output_parser,
            partial_variables={**self.partial_variables, **values},
        )

    def __repr__(self) -> str:
        return f"PromptTemplate(input_variables={self.input_variables!r})"
