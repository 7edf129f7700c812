"""Tests for BoundedLengthRule."""

import pytest

from fieldrules.domain.context import MappingValidationContext, ObjectValidationContext
from fieldrules.domain.errors import ConfigurationError, InputKindError
from fieldrules.domain.messages import MessageKey
from fieldrules.domain.rules import BoundedLengthRule, BoundSource
from tests.conftest import Reading


@pytest.fixture
def ctx() -> MappingValidationContext:
    return MappingValidationContext({})


class TestLiteralBounds:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("", False), ("a", False), ("ab", True), ("abcde", True), ("abcdef", False)],
    )
    def test_edges(self, text: str, expected: bool, ctx: MappingValidationContext) -> None:
        assert BoundedLengthRule(2, 5).evaluate(text, ctx).valid is expected

    def test_counts_characters_not_bytes(self, ctx: MappingValidationContext) -> None:
        rule = BoundedLengthRule(1, 3)
        assert rule.evaluate("日本語", ctx).valid
        assert len("日本語".encode()) > 3

    def test_default_message(self, ctx: MappingValidationContext) -> None:
        outcome = BoundedLengthRule(2, 5).evaluate("abcdef", ctx)
        assert outcome.message == "Allowed length between 2 to 5."

    def test_custom_message(self, ctx: MappingValidationContext) -> None:
        rule = BoundedLengthRule(2, 5, "Between two and five letters.")
        assert rule.evaluate("a", ctx).message == "Between two and five letters."

    def test_inverted_literals_always_invalid(self, ctx: MappingValidationContext) -> None:
        rule = BoundedLengthRule(5, 2)
        for text in ("", "ab", "abc", "abcde", "abcdefgh"):
            assert not rule.evaluate(text, ctx).valid

    def test_source(self) -> None:
        assert BoundedLengthRule(0, 1).source is BoundSource.LITERAL


class TestFieldBounds:
    def test_object_attributes(self, reading: Reading) -> None:
        rule = BoundedLengthRule.from_fields("min_len", "max_len")
        context = ObjectValidationContext(reading)
        assert rule.source is BoundSource.FIELD
        assert rule.evaluate(reading.label, context).valid
        assert not rule.evaluate("much too long", context).valid

    def test_message_uses_resolved_bounds(self) -> None:
        rule = BoundedLengthRule.from_fields("lo", "hi")
        context = MappingValidationContext({"lo": 3, "hi": 4})
        assert rule.evaluate("ab", context).message == "Allowed length between 3 to 4."

    def test_missing_field(self) -> None:
        rule = BoundedLengthRule.from_fields("lo", "hi")
        context = MappingValidationContext({"lo": 1})
        with pytest.raises(ConfigurationError) as exc_info:
            rule.evaluate("abc", context)
        assert exc_info.value.key is MessageKey.PROPERTY_NOT_FOUND
        assert str(exc_info.value) == "Property hi not found."

    @pytest.mark.parametrize("bound", [2.0, "2", True, None])
    def test_non_integer_bound(self, bound: object) -> None:
        rule = BoundedLengthRule.from_fields("lo", "hi")
        context = MappingValidationContext({"lo": bound, "hi": 10})
        with pytest.raises(ConfigurationError) as exc_info:
            rule.evaluate("abc", context)
        assert exc_info.value.key is MessageKey.LENGTH_IS_NOT_INTEGER
        assert str(exc_info.value) == "Length value is not integer."


class TestContractViolations:
    def test_none_value(self, ctx: MappingValidationContext) -> None:
        with pytest.raises(InputKindError):
            BoundedLengthRule(0, 5).evaluate(None, ctx)

    def test_none_context(self) -> None:
        with pytest.raises(InputKindError):
            BoundedLengthRule(0, 5).evaluate("abc", None)

    @pytest.mark.parametrize("value", [123, ["a", "b"], b"abc"])
    def test_non_string(self, value: object, ctx: MappingValidationContext) -> None:
        with pytest.raises(InputKindError) as exc_info:
            BoundedLengthRule(0, 5).evaluate(value, ctx)
        assert exc_info.value.key is MessageKey.TARGET_PROPERTY_IS_NOT_STRING


class TestConstruction:
    def test_empty_min_field_fails_fast(self) -> None:
        with pytest.raises(ValueError, match="min_field"):
            BoundedLengthRule.from_fields("", "max_len")

    def test_none_max_field(self) -> None:
        with pytest.raises(ValueError, match="max_field"):
            BoundedLengthRule(min_field="min_len")

    def test_float_literal_rejected(self) -> None:
        with pytest.raises(TypeError, match="maximum"):
            BoundedLengthRule(1, 2.5)  # type: ignore[arg-type]

    def test_bool_literal_rejected(self) -> None:
        with pytest.raises(TypeError, match="minimum"):
            BoundedLengthRule(True, 5)  # type: ignore[arg-type]

    def test_name(self) -> None:
        assert BoundedLengthRule(0, 1).name == "length"


def test_idempotent(ctx: MappingValidationContext) -> None:
    rule = BoundedLengthRule(2, 5)
    assert rule.evaluate("abcdef", ctx) == rule.evaluate("abcdef", ctx)
