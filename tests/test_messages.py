"""Tests for warble.messages — option variants, transforms, resolution."""

import pytest

from warble.messages import (
    Absent,
    CustomMessage,
    OptionsWithMessage,
    PlainOptions,
    compose,
    parse_options,
    resolve_message,
    substitute_tokens,
)

# ---------------------------------------------------------------------------
# parse_options
# ---------------------------------------------------------------------------


class TestParseOptions:
    def test_nothing(self) -> None:
        assert parse_options() == Absent()
        assert parse_options(None) == Absent()

    def test_string_is_custom_message(self) -> None:
        parsed = parse_options("too short!")
        assert parsed == CustomMessage("too short!")
        assert dict(parsed.fields) == {}

    def test_mapping_without_message(self) -> None:
        parsed = parse_options({"length": 6})
        assert isinstance(parsed, PlainOptions)
        assert parsed.fields["length"] == 6

    def test_mapping_with_message(self) -> None:
        parsed = parse_options({"length": 6, "message": "has to be looong!"})
        assert isinstance(parsed, OptionsWithMessage)
        assert parsed.message == "has to be looong!"
        assert parsed.fields["length"] == 6

    def test_empty_message_is_not_an_override(self) -> None:
        assert isinstance(parse_options({"message": ""}), PlainOptions)

    def test_keywords_merge_over_mapping(self) -> None:
        parsed = parse_options({"length": 6}, length=8, message="x")
        assert isinstance(parsed, OptionsWithMessage)
        assert parsed.fields["length"] == 8

    def test_string_with_keywords(self) -> None:
        parsed = parse_options("custom", length=3)
        assert isinstance(parsed, OptionsWithMessage)
        assert parsed.message == "custom"
        assert parsed.fields["length"] == 3

    def test_parsed_options_pass_through(self) -> None:
        parsed = PlainOptions({"length": 2})
        assert parse_options(parsed) is parsed

    def test_fields_are_read_only(self) -> None:
        parsed = parse_options({"length": 6})
        with pytest.raises(TypeError):
            parsed.fields["length"] = 1  # type: ignore[index]

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="string or a mapping"):
            parse_options(42)


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


class TestSubstituteTokens:
    def test_replaces_token(self) -> None:
        message = "has to be at least {{length}} characters long"
        assert substitute_tokens(message, {"length": 6}) == "has to be at least 6 characters long"

    def test_only_first_token_is_replaced(self) -> None:
        result = substitute_tokens("{{n}} and {{n}}", {"n": 1})
        assert result == "1 and {{n}}"

    def test_second_distinct_token_left_alone(self) -> None:
        result = substitute_tokens("{{a}}-{{b}}", {"a": "x", "b": "y"})
        assert result == "x-{{b}}"

    def test_unknown_token_left_alone(self) -> None:
        assert substitute_tokens("needs {{size}}", {}) == "needs {{size}}"

    def test_no_token(self) -> None:
        assert substitute_tokens("is required", {"x": 1}) == "is required"


class TestCompose:
    def test_empty_is_identity(self) -> None:
        assert compose()("hello", {}) == "hello"

    def test_single_is_returned_directly(self) -> None:
        assert compose(substitute_tokens) is substitute_tokens

    def test_applies_right_to_left(self) -> None:
        def exclaim(message: str, fields: object) -> str:
            return message + "!"

        def upper(message: str, fields: object) -> str:
            return message.upper()

        assert compose(exclaim, upper)("abc", {}) == "ABC!"
        assert compose(upper, exclaim)("abc", {}) == "ABC!"
        assert compose(lambda m, f: m + "2", lambda m, f: m + "1")("x", {}) == "x12"

    def test_every_transform_sees_fields(self) -> None:
        seen: list[object] = []

        def record(message: str, fields: object) -> str:
            seen.append(fields)
            return message

        fields = {"length": 3}
        compose(record, record)("m", fields)
        assert seen == [fields, fields]


# ---------------------------------------------------------------------------
# resolve_message
# ---------------------------------------------------------------------------


class TestResolveMessage:
    def test_default_when_absent(self) -> None:
        assert resolve_message("is required", Absent()) == "is required"

    def test_custom_message_overrides(self) -> None:
        assert resolve_message("is required", CustomMessage("needed!")) == "needed!"

    def test_options_message_overrides(self) -> None:
        options = parse_options({"length": 5, "message": "has to be looong!"})
        assert resolve_message("default", options, (substitute_tokens,)) == "has to be looong!"

    def test_plain_options_keep_default(self) -> None:
        options = parse_options({"length": 6})
        result = resolve_message("at least {{length}}", options, (substitute_tokens,))
        assert result == "at least 6"

    def test_override_is_transformed_too(self) -> None:
        options = parse_options({"length": 4, "message": "min {{length}}"})
        assert resolve_message("x", options, [substitute_tokens]) == "min 4"

    def test_single_callable_transform(self) -> None:
        assert resolve_message("abc", Absent(), lambda m, f: m.upper()) == "ABC"

    def test_no_transforms(self) -> None:
        assert resolve_message("{{length}}", parse_options(length=1), ()) == "{{length}}"
