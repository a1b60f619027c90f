"""Validation result helpers.

A result is a plain ``dict`` holding only failing fields::

    {"title": ["is required"],
     "address": {"zip": ["has to be a number"]}}

An empty dict means the object is valid.
"""

from collections.abc import Mapping
from typing import Any

from warble._types import ValidationResult


def is_valid(result: ValidationResult) -> bool:
    """True when no field failed."""
    return not result


def field_errors(result: Any, path: str) -> list[str]:
    """Messages for one field, or an empty list.

    *path* may be dotted to reach into nested results
    (``"address.zip"``). Safe on None and on missing fields, so it also
    works as a template filter::

        {% for msg in errors | field_errors("address.zip") %}
          <span class="error">{{ msg }}</span>
        {% end %}
    """
    node = result
    for part in path.split("."):
        if not isinstance(node, Mapping):
            return []
        node = node.get(part)
    if isinstance(node, list | tuple):
        return list(node)
    return []
