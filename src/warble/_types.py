"""Shared type aliases used across warble modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Rewrites a resolved failure message, e.g. template substitution or translation
MessageTransform: TypeAlias = Callable[[str, Mapping[str, Any]], str]

# Failure predicate — (value, whole_object, option_fields) -> truthy when invalid
Predicate: TypeAlias = Callable[[Any, Any, Mapping[str, Any]], Any]

# Single check for one field — returns a failure message or None
FieldValidator: TypeAlias = Callable[[Any, Any], str | None]

# All checks for one field — returns ordered failure messages or None
ComposedValidator: TypeAlias = Callable[[Any, Any], list[str] | None]

# Field name -> composed validator, nested rule tree, or pass-through value
RuleTree: TypeAlias = Mapping[str, Any]

# Failing field name -> messages (or a nested result for nested rule trees)
ValidationResult: TypeAlias = dict[str, Any]
