"""Validation defaults — messages and the message transform pipeline.

``Defaults`` is a frozen dataclass: a snapshot that rule constructors can
capture without worrying about later mutation. ``DefaultsStore`` holds
the current snapshot and swaps it atomically on ``update()``.

A process-global store (``defaults``) backs the module-level helpers and
the built-in rules. Tests and embedding applications can build their own
``DefaultsStore`` and pass it as ``store=`` to any rule constructor::

    store = DefaultsStore()
    store.update(messages={"is_required": "Bitte ausfüllen"})
    required_de = rule("is_required", lambda value, obj, opts: not value, store=store)
"""

import logging
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from warble._types import MessageTransform
from warble.errors import ConfigurationError
from warble.messages import substitute_tokens

logger = logging.getLogger("warble.config")

GENERIC_MESSAGE = "This field is invalid!"

BUILTIN_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "is_required": "is required",
        "length": "has to be at least {{length}} characters long",
        "password_complexity": "has to contain at least one number or uppercase letter.",
        "email": "has to be a valid email address",
        "match": "has to match the password",
        "is_number": "has to be a number",
    }
)

# camelCase rule names accepted as message keys
MESSAGE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "isRequired": "is_required",
        "passwordComplexity": "password_complexity",
        "isNumber": "is_number",
    }
)


@dataclass(frozen=True, slots=True)
class Defaults:
    """Default failure messages and message transforms. Immutable.

    Override what you need through ``DefaultsStore.update()``::

        set_defaults(messages={"email": "Not an email address"})
    """

    message_transforms: tuple[MessageTransform, ...] = (substitute_tokens,)
    messages: Mapping[str, str] = field(default_factory=lambda: BUILTIN_MESSAGES)

    def message_for(self, name: str) -> str:
        """Default message registered for *name*, or the generic fallback."""
        return self.messages.get(name, GENERIC_MESSAGE)


class DefaultsStore:
    """Holds the current ``Defaults`` snapshot."""

    __slots__ = ("_current", "_lock")

    def __init__(self, initial: Defaults | None = None) -> None:
        self._lock = threading.Lock()
        self._current = initial or Defaults()

    def current(self) -> Defaults:
        """Return the current snapshot."""
        with self._lock:
            return self._current

    def update(
        self,
        *,
        message_transforms: Sequence[MessageTransform] | None = None,
        messages: Mapping[str, str] | None = None,
    ) -> Defaults:
        """Install new defaults and return the resulting snapshot.

        *message_transforms* replaces the pipeline wholesale.
        *messages* is merged key-by-key into the existing messages;
        camelCase names such as ``isRequired`` map to their rule names.
        Validators that already captured a snapshot are unaffected.
        """
        transforms = _check_transforms(message_transforms)
        overrides = _check_messages(messages)

        with self._lock:
            previous = self._current
            merged = dict(previous.messages)
            merged.update(overrides)
            self._current = Defaults(
                message_transforms=(
                    previous.message_transforms if transforms is None else transforms
                ),
                messages=MappingProxyType(merged),
            )
            current = self._current

        logger.debug(
            "Defaults updated: %d transform(s), %d message override(s)",
            len(current.message_transforms),
            len(overrides),
        )
        return current

    def reset(self) -> Defaults:
        """Restore the built-in defaults."""
        with self._lock:
            self._current = Defaults()
            return self._current


def _check_transforms(
    transforms: Sequence[MessageTransform] | None,
) -> tuple[MessageTransform, ...] | None:
    if transforms is None:
        return None
    if callable(transforms):
        transforms = (transforms,)
    result = tuple(transforms)
    for transform in result:
        if not callable(transform):
            msg = f"Message transform must be callable, got {transform!r}"
            raise ConfigurationError(msg)
    return result


def _check_messages(messages: Mapping[str, str] | None) -> dict[str, str]:
    if messages is None:
        return {}
    if not isinstance(messages, Mapping):
        msg = f"messages must be a mapping, got {type(messages).__name__}"
        raise ConfigurationError(msg)
    for name, message in messages.items():
        if not isinstance(message, str):
            msg = f"Default message for {name!r} must be a string, got {message!r}"
            raise ConfigurationError(msg)
    return {MESSAGE_ALIASES.get(name, name): message for name, message in messages.items()}


# Process-global store used when no explicit store is passed
defaults = DefaultsStore()


def resolve_store(store: DefaultsStore | None) -> DefaultsStore:
    """Return *store*, or the process-global store when None."""
    return defaults if store is None else store


def set_defaults(
    *,
    message_transforms: Sequence[MessageTransform] | None = None,
    messages: Mapping[str, str] | None = None,
    store: DefaultsStore | None = None,
) -> Defaults:
    """Update the defaults used by rules constructed from now on.

    Usage::

        set_defaults(messages={"is_required": "i require you to show up!"})
        set_defaults(message_transforms=[translate, substitute_tokens])
    """
    return resolve_store(store).update(
        message_transforms=message_transforms,
        messages=messages,
    )


def current_defaults(store: DefaultsStore | None = None) -> Defaults:
    """Return the current defaults snapshot."""
    return resolve_store(store).current()


def reset_defaults(store: DefaultsStore | None = None) -> Defaults:
    """Restore built-in messages and transforms."""
    return resolve_store(store).reset()
