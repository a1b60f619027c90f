"""Warble — functional validation with composable rules.

Usage::

    from warble import email, is_required, is_valid, length, v, validate

    check_signup = validate({
        "username": v(is_required()),
        "password": v(is_required(), length(length=6)),
        "email": v(is_required(), email()),
    })

    errors = check_signup({"username": "foo", "password": "", "email": "anymail"})
    # {"password": ["is required"], "email": ["has to be a valid email address"]}
    if not is_valid(errors):
        ...

Custom rules::

    is_even = create_validation("has to be even")(lambda value, obj, opts: value % 2)
    check = validate({"count": v(is_even())})
"""

from warble.compose import v
from warble.config import (
    Defaults,
    DefaultsStore,
    current_defaults,
    defaults,
    reset_defaults,
    set_defaults,
)
from warble.engine import validate
from warble.errors import ConfigurationError, WarbleError
from warble.factory import create_validation, rule, transform_validator, with_validation
from warble.messages import substitute_tokens
from warble.result import field_errors, is_valid
from warble.rules import email, is_number, is_required, length, match, password_complexity

__all__ = [
    "ConfigurationError",
    "Defaults",
    "DefaultsStore",
    "WarbleError",
    "create_validation",
    "current_defaults",
    "defaults",
    "email",
    "field_errors",
    "is_number",
    "is_required",
    "is_valid",
    "length",
    "match",
    "password_complexity",
    "reset_defaults",
    "rule",
    "set_defaults",
    "substitute_tokens",
    "transform_validator",
    "v",
    "validate",
    "with_validation",
]
