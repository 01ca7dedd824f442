"""Plain ``{name}`` token substitution used between chains."""

import re
from typing import Any, Iterable, Mapping, Union

PropertyItems = Union[Mapping[str, Any], Iterable[Any]]

TOKEN_PATTERN = re.compile(r"\{(\w+)\}")


def properties_to_dict(properties: PropertyItems | None) -> dict[str, Any]:
    """
    Normalize properties to a dict.

    Accepts a mapping, or an iterable of objects with ``key``/``value``
    attributes (e.g. ``Property`` payload models). Later keys win.
    """
    if not properties:
        return {}
    if isinstance(properties, Mapping):
        return dict(properties)
    return {p.key: p.value for p in properties}


def substitute_tokens(template: str, values: Mapping[str, Any]) -> str:
    """Replace each ``{key}`` with ``str(value)`` in one pass; inserted text is not re-scanned."""

    def _value(match: re.Match) -> str:
        name = match.group(1)
        return str(values[name]) if name in values else match.group(0)

    return TOKEN_PATTERN.sub(_value, template)


def merge_prompt_with_properties(properties: PropertyItems | None, prompt: str) -> str:
    """Replace every ``{key}`` in the prompt with ``str(value)``. Unknown placeholders stay."""
    return substitute_tokens(prompt, properties_to_dict(properties))
