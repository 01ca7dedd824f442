"""Utilities: property normalization and token substitution."""

from .tokens import merge_prompt_with_properties, properties_to_dict, substitute_tokens

__all__ = [
    "merge_prompt_with_properties",
    "properties_to_dict",
    "substitute_tokens",
]
