"""Whole-object validation.

``validate(rules)`` returns a function that checks an object and returns
only the fields that failed::

    check_signup = validate({
        "username": v(is_required()),
        "password": v(is_required(), length(length=6)),
        "address": {"zip": v(is_required(), is_number())},
    })

    check_signup({"username": "foo", "password": "", "address": {}})
    # {"password": ["is required"], "address": {"zip": ["is required"]}}

The rule tree, not the data, drives iteration: fields present on the
object but absent from the tree are never looked at.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from warble._types import ComposedValidator, RuleTree, ValidationResult

# ---------------------------------------------------------------------------
# Rule tree entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Leaf:
    """A composed validator for one field."""

    check: ComposedValidator


@dataclass(frozen=True, slots=True)
class Passthrough:
    """Neither callable nor mapping — the input value is copied as-is."""


@dataclass(frozen=True, slots=True)
class Nested:
    """A rule tree applied to a nested object."""

    entries: tuple[tuple[str, Leaf | Nested | Passthrough], ...]


type Entry = Leaf | Nested | Passthrough

_PASSTHROUGH = Passthrough()


def classify(rules: RuleTree) -> Nested:
    """Resolve a raw rule tree into tagged entries, recursively."""
    entries: list[tuple[str, Entry]] = []
    for key, spec in rules.items():
        if callable(spec):
            entries.append((key, Leaf(spec)))
        elif isinstance(spec, Mapping):
            entries.append((key, classify(spec)))
        else:
            entries.append((key, _PASSTHROUGH))
    return Nested(tuple(entries))


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def get_field(obj: Any, key: str) -> Any:
    """Read *key* from a mapping or an attribute-bearing object.

    Missing fields and a missing object both read as None.
    """
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _run(tree: Nested, obj: Any) -> ValidationResult:
    result: ValidationResult = {}
    for key, entry in tree.entries:
        value = get_field(obj, key)
        match entry:
            case Leaf(check=check):
                outcome = check(value, obj)
            case Nested():
                # Nested fields see their own sub-object as context
                outcome = _run(entry, value)
            case Passthrough():
                outcome = value
        if outcome:
            result[key] = outcome
    return result


def validate(rules: RuleTree) -> Callable[[Any], ValidationResult]:
    """Build a validator for objects shaped like *rules*.

    The returned function maps an object (a mapping, any object with
    attributes, or None) to a result holding only the failing fields,
    in rule-tree order. Exceptions raised by predicates propagate.

    Validators inside a nested rule tree receive the nested sub-object,
    not the top-level object, as their whole-object argument.
    """
    tree = classify(rules)

    def run(obj: Any = None) -> ValidationResult:
        return _run(tree, obj)

    return run
