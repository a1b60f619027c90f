"""Failure message resolution.

A rule factory can be called with nothing, a plain string, or a mapping
of rule options (optionally carrying a ``message`` key). ``parse_options``
turns that into one of four tagged variants so the rest of the engine
never inspects raw option shapes::

    parse_options(None)                      # Absent()
    parse_options("too short!")              # CustomMessage("too short!")
    parse_options({"length": 6})             # PlainOptions({"length": 6})
    parse_options({"length": 6, "message": "x"})
                                             # OptionsWithMessage("x", {...})

``resolve_message`` then picks the override (if any) over the rule's
default and runs it through the transform pipeline.
"""

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from warble._types import MessageTransform

_EMPTY: Mapping[str, Any] = MappingProxyType({})


# ---------------------------------------------------------------------------
# Options variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Absent:
    """No options were supplied."""

    @property
    def fields(self) -> Mapping[str, Any]:
        return _EMPTY


@dataclass(frozen=True, slots=True)
class CustomMessage:
    """A bare string — replaces the default message and nothing else."""

    text: str

    @property
    def fields(self) -> Mapping[str, Any]:
        return _EMPTY


@dataclass(frozen=True, slots=True)
class OptionsWithMessage:
    """Rule options that also override the failure message."""

    message: str
    fields: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PlainOptions:
    """Rule options without a message override."""

    fields: Mapping[str, Any] = field(default_factory=dict)


type Options = Absent | CustomMessage | OptionsWithMessage | PlainOptions

_VARIANTS = (Absent, CustomMessage, OptionsWithMessage, PlainOptions)


def parse_options(raw: Any = None, **overrides: Any) -> Options:
    """Classify whatever a rule factory was called with.

    Keyword *overrides* are merged over a mapping argument, so
    ``length(length=6)`` and ``length({"length": 6})`` are equivalent.
    A string combined with keywords becomes the ``message`` entry.
    """
    if isinstance(raw, _VARIANTS):  # already parsed
        if not overrides:
            return raw
        raw = dict(raw.fields, **_message_entry(raw))

    if raw is None and not overrides:
        return Absent()
    if isinstance(raw, str) and not overrides:
        return CustomMessage(raw)

    if isinstance(raw, str):
        merged: dict[str, Any] = {"message": raw}
    elif isinstance(raw, Mapping):
        merged = dict(raw)
    elif raw is None:
        merged = {}
    else:
        msg = f"Rule options must be a string or a mapping, got {type(raw).__name__}"
        raise TypeError(msg)
    merged.update(overrides)

    message = merged.get("message")
    if message:
        return OptionsWithMessage(message=message, fields=MappingProxyType(merged))
    return PlainOptions(fields=MappingProxyType(merged))


def _message_entry(options: Options) -> dict[str, str]:
    match options:
        case CustomMessage(text=text):
            return {"message": text}
        case OptionsWithMessage(message=message):
            return {"message": message}
        case _:
            return {}


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


def compose(*transforms: MessageTransform) -> MessageTransform:
    """Compose message transforms right to left.

    ``compose(f, g)(message, fields)`` is ``f(g(message, fields), fields)``.
    No transforms is the identity; a single transform is returned as-is.
    """
    if not transforms:
        return lambda message, fields: message
    if len(transforms) == 1:
        return transforms[0]

    def composed(message: str, fields: Mapping[str, Any]) -> str:
        for transform in reversed(transforms):
            message = transform(message, fields)
        return message

    return composed


_TOKEN_RE = re.compile(r"\{\{(\w+)\}\}")


def substitute_tokens(message: str, fields: Mapping[str, Any]) -> str:
    """Replace the first ``{{name}}`` token with ``fields[name]``.

    Single-shot: later tokens are left as written, even when they name
    the same field. A first token naming an unknown field is left as-is.
    """
    match = _TOKEN_RE.search(message)
    if match is None or match.group(1) not in fields:
        return message
    value = str(fields[match.group(1)])
    return message[: match.start()] + value + message[match.end() :]


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve_message(
    default_message: str,
    options: Options,
    transforms: Sequence[MessageTransform] | MessageTransform | None = None,
) -> str:
    """Produce the message surfaced for a failed check.

    Precedence: bare-string options, then an options ``message``, then
    *default_message*. The chosen message is passed through *transforms*
    (rightmost applied first) together with the option fields.
    """
    match options:
        case CustomMessage(text=text):
            message = text
        case OptionsWithMessage(message=override):
            message = override
        case _:
            message = default_message

    if not transforms:
        return message
    transform: Callable[[str, Mapping[str, Any]], str]
    transform = transforms if callable(transforms) else compose(*transforms)
    return transform(message, options.fields)
