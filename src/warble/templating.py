"""Kida integration — full template rendering for failure messages.

The built-in ``substitute_tokens`` transform only fills the first
``{{name}}`` token. ``kida_transform()`` renders the whole message as a
kida template with the rule options as context, so messages can use
every token, filters, and conditionals::

    from warble import set_defaults
    from warble.templating import kida_transform

    set_defaults(
        message_transforms=[kida_transform()],
        messages={"length": "has to be between {{ length }} and {{ maximum }} characters"},
    )

``register_filters()`` exposes ``field_errors`` to templates rendering
validation results.
"""

from collections.abc import Mapping
from typing import Any

from kida import Environment

from warble._types import MessageTransform
from warble.result import field_errors

VALIDATION_FILTERS = {
    "field_errors": field_errors,
}


def create_environment() -> Environment:
    """Environment for rendering plain-text messages (no HTML escaping)."""
    return Environment(autoescape=False)


def kida_transform(env: Environment | None = None) -> MessageTransform:
    """Build a message transform that renders messages with kida.

    Messages without template markup are returned unchanged. Compiled
    templates are cached per message string.
    """
    environment = env if env is not None else create_environment()
    compiled: dict[str, Any] = {}

    def transform(message: str, fields: Mapping[str, Any]) -> str:
        if "{{" not in message and "{%" not in message:
            return message
        template = compiled.get(message)
        if template is None:
            template = compiled[message] = environment.from_string(message)
        return template.render(dict(fields))

    return transform


def register_filters(env: Environment) -> Environment:
    """Register warble's template filters on a kida Environment.

    Usage::

        env = register_filters(Environment(loader=FileSystemLoader("templates")))
        # {% for msg in errors | field_errors("email") %} ... {% end %}
    """
    env.update_filters(VALIDATION_FILTERS)
    return env
