"""Tests for warble.templating — kida-rendered messages and filters."""

from kida import Environment

from warble import DefaultsStore, length, rule, v, validate
from warble.templating import kida_transform, register_filters


class TestKidaTransform:
    def test_renders_every_token(self) -> None:
        transform = kida_transform()
        message = "between {{ low }} and {{ high }}, not {{ low }}"
        assert transform(message, {"low": 2, "high": 5}) == "between 2 and 5, not 2"

    def test_plain_message_unchanged(self) -> None:
        assert kida_transform()("is required", {}) == "is required"

    def test_no_html_escaping(self) -> None:
        assert kida_transform()("must be {{ op }}", {"op": "<b>"}) == "must be <b>"

    def test_as_default_pipeline(self, store: DefaultsStore) -> None:
        store.update(
            message_transforms=[kida_transform()],
            messages={"between": "has to be {{ low }}-{{ high }} characters"},
        )
        between = rule(
            "between",
            lambda value, obj, opts: not opts["low"] <= len(value) <= opts["high"],
            store=store,
        )

        check = validate({"code": v(between(low=2, high=4))})
        assert check({"code": "abcdef"}) == {"code": ["has to be 2-4 characters"]}

    def test_custom_environment(self) -> None:
        env = Environment(autoescape=False)
        assert kida_transform(env)("{{ n }}", {"n": 7}) == "7"


class TestRegisterFilters:
    def test_field_errors_filter(self) -> None:
        env = register_filters(Environment(autoescape=False))
        errors = validate({"username": v(length(length=6))})({"username": "bob"})

        template = env.from_string(
            '{% for msg in errors | field_errors("username") %}{{ msg }}{% end %}'
        )

        assert template.render({"errors": errors}) == "has to be at least 6 characters long"
