"""Rule construction — turn failure predicates into reusable rules.

Three layers, each a curried function::

    create_validation(default_message, transforms)   # -> definer
        (is_invalid)                                  # -> rule factory
            (options)                                 # -> field validator
                (value, whole_object)                 # -> message | None

Predicates follow one convention throughout: they return something
truthy when the value is INVALID. ``transform_validator`` adapts the
opposite convention used by most third-party validators.
"""

from collections.abc import Callable, Sequence
from typing import Any

from warble._types import FieldValidator, MessageTransform, Predicate
from warble.config import GENERIC_MESSAGE, DefaultsStore, resolve_store
from warble.messages import Options, parse_options, resolve_message

# (options?, **option_fields) -> FieldValidator
type RuleFactory = Callable[..., FieldValidator]


def create_validation(
    default_message: str,
    transforms: Sequence[MessageTransform] | MessageTransform | None = (),
) -> Callable[[Predicate], RuleFactory]:
    """Build a rule definer with a fixed default message and transforms.

    Both arguments are captured now; later ``set_defaults()`` calls do
    not reach rules defined here.

    Example::

        is_num = create_validation("has to be a num")(
            lambda value, obj, opts: value and not isinstance(value, int | float)
        )
        validate({"age": v(is_num())})({"age": "6"})
        # {"age": ["has to be a num"]}
    """
    if transforms is None:
        pipeline: tuple[MessageTransform, ...] = ()
    elif callable(transforms):
        pipeline = (transforms,)
    else:
        pipeline = tuple(transforms)

    def define(is_invalid: Predicate) -> RuleFactory:
        def factory(options: Any = None, /, **fields: Any) -> FieldValidator:
            return _field_validator(
                is_invalid,
                parse_options(options, **fields),
                default_message,
                pipeline,
            )

        factory.__doc__ = is_invalid.__doc__
        return factory

    return define


def _field_validator(
    is_invalid: Predicate,
    options: Options,
    default_message: str,
    pipeline: tuple[MessageTransform, ...],
) -> FieldValidator:
    def check(value: Any, obj: Any = None) -> str | None:
        if not is_invalid(value, obj, options.fields):
            return None
        return resolve_message(default_message, options, pipeline)

    return check


def rule(
    name: str,
    is_invalid: Predicate,
    *,
    store: DefaultsStore | None = None,
) -> RuleFactory:
    """Define a named rule whose defaults come from a ``DefaultsStore``.

    The default message (``messages[name]``) and the transform pipeline
    are read when the factory is called, so each field validator keeps
    the defaults that were current when it was built.

    Example::

        is_even = rule("is_even", lambda value, obj, opts: value % 2)
        set_defaults(messages={"is_even": "has to be even"})
        validate({"n": v(is_even())})({"n": 3})   # {"n": ["has to be even"]}
    """

    def factory(options: Any = None, /, **fields: Any) -> FieldValidator:
        snapshot = resolve_store(store).current()
        return _field_validator(
            is_invalid,
            parse_options(options, **fields),
            snapshot.message_for(name),
            snapshot.message_transforms,
        )

    factory.__name__ = factory.__qualname__ = name
    factory.__doc__ = is_invalid.__doc__
    return factory


def with_validation(
    is_invalid: Predicate,
    *,
    store: DefaultsStore | None = None,
) -> RuleFactory:
    """Define a one-off inline rule with a generic default message.

    Example::

        validate({
            "age": v(with_validation(lambda value, obj, opts: not value)(
                "This field is required!"
            )),
        })
    """

    def factory(options: Any = None, /, **fields: Any) -> FieldValidator:
        snapshot = resolve_store(store).current()
        return _field_validator(
            is_invalid,
            parse_options(options, **fields),
            GENERIC_MESSAGE,
            snapshot.message_transforms,
        )

    return factory


_RESERVED = frozenset({"message", "native_params", "nativeParams"})


def transform_validator(
    name: str,
    is_valid: Callable[..., Any],
    *,
    store: DefaultsStore | None = None,
) -> RuleFactory:
    """Adapt a ``(value, *args) -> bool`` validity check into a rule.

    ``native_params`` (or ``nativeParams``) lists option keys whose values are passed
    positionally after the value, in order. Without it, any remaining
    option fields are passed as a single mapping (the ``(value, options)``
    shape many validator libraries use). The check's result is negated.

    Unlike ``rule()``, the message and transforms are looked up on every
    failure, so ``set_defaults()`` reaches validators built earlier.

    Example::

        is_length = transform_validator("isLength", validators.is_length)
        is_length(min=4)("a")
        is_length(minimum=4, native_params=["minimum"])("a")
    """

    def factory(options: Any = None, /, **fields: Any) -> FieldValidator:
        parsed = parse_options(options, **fields)
        native_args = _native_args(parsed)

        def check(value: Any, obj: Any = None) -> str | None:
            if is_valid(value, *native_args):
                return None
            snapshot = resolve_store(store).current()
            return resolve_message(
                snapshot.message_for(name),
                parsed,
                snapshot.message_transforms,
            )

        return check

    factory.__name__ = factory.__qualname__ = name
    return factory


def _native_args(options: Options) -> tuple[Any, ...]:
    fields = options.fields
    params = fields.get("native_params", fields.get("nativeParams"))
    if params is not None:
        return tuple(fields.get(key) for key in params)
    rest = {key: value for key, value in fields.items() if key not in _RESERVED}
    return (rest,) if rest else ()
