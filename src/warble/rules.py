"""Built-in validation rules.

Each rule is a factory: call it (optionally with a custom message or
rule options) to get a field validator::

    is_required()                          # default message
    is_required("this darn field is needed!")
    length(length=6)                       # or length({"length": 6})
    length(length=5, message="has to be looong!")
    match(field="password")

Default messages live in the defaults store under the rule's name and
are read each time a rule factory is called. Apart from ``is_required``,
rules treat an empty value as valid — combine with ``is_required()``
when the field must be present.
"""

import math
import re
from collections.abc import Mapping, Sized
from typing import Any

from warble.engine import get_field
from warble.factory import rule

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def _missing(value: Any, obj: Any, opts: Mapping[str, Any]) -> bool:
    """Field must be present and non-empty."""
    return not value


is_required = rule("is_required", _missing)


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def _too_short(value: Any, obj: Any, opts: Mapping[str, Any]) -> bool:
    """Value must be at least ``length`` characters long.

    Values without a length (numbers, for instance) always pass.
    """
    minimum = opts.get("length")
    if not value or minimum is None or not isinstance(value, Sized):
        return False
    return len(value) < minimum


length = rule("length", _too_short)


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Anything other than lowercase letters counts as "complex"
_COMPLEXITY_RE = re.compile(r"[^a-z]")


def _too_simple(value: Any, obj: Any, opts: Mapping[str, Any]) -> bool:
    """Value must match ``regex`` (default: one non-lowercase character)."""
    pattern = opts.get("regex") or _COMPLEXITY_RE
    return bool(value) and re.search(pattern, str(value)) is None


password_complexity = rule("password_complexity", _too_simple)


_EMAIL_RE = re.compile(
    r"(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)


def _not_email(value: Any, obj: Any, opts: Mapping[str, Any]) -> bool:
    """Value must be a valid email address (format check only)."""
    return bool(value) and _EMAIL_RE.fullmatch(str(value)) is None


email = rule("email", _not_email)


# ---------------------------------------------------------------------------
# Cross-field
# ---------------------------------------------------------------------------


def _mismatch(value: Any, obj: Any, opts: Mapping[str, Any]) -> bool:
    """Value must equal the sibling field named by ``field``."""
    other = opts.get("field")
    if not value:
        return False
    return other is None or get_field(obj, other) != value


match = rule("match", _mismatch)


# ---------------------------------------------------------------------------
# Type
# ---------------------------------------------------------------------------


def _not_number(value: Any, obj: Any, opts: Mapping[str, Any]) -> bool:
    """Value must be an actual number, not a numeric string.

    ``bool`` values and NaN are rejected as well.
    """
    if not value:
        return False
    if isinstance(value, bool) or not isinstance(value, int | float):
        return True
    return math.isnan(value)


is_number = rule("is_number", _not_number)
