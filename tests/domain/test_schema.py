"""Tests for declarative rule specs and the rule registry."""

import tomllib

import pytest
from pydantic import ValidationError

from fieldrules.domain.messages import CatalogMessageProvider
from fieldrules.domain.rules import (
    RULE_REGISTRY,
    BoundedLengthRule,
    BoundedValueRule,
    NumericKind,
    NumericStringFormatRule,
    TypeMatchRule,
)
from fieldrules.domain.schema import RecordSchema
from tests.conftest import PERSON_SCHEMA


class TestRuleRegistry:
    def test_all_rules_registered(self) -> None:
        assert RULE_REGISTRY == {
            "type": TypeMatchRule,
            "numeric_string": NumericStringFormatRule,
            "range": BoundedValueRule,
            "length": BoundedLengthRule,
        }

    def test_names_match_rule_instances(self) -> None:
        assert TypeMatchRule(str).name == "type"
        assert NumericStringFormatRule("int8").name == "numeric_string"
        assert BoundedValueRule(0.0, 1.0).name == "range"
        assert BoundedLengthRule(0, 1).name == "length"


class TestRecordSchema:
    def test_builds_rules_from_toml(self) -> None:
        schema = RecordSchema.from_mapping(tomllib.loads(PERSON_SCHEMA))
        rules = schema.build_rules()
        assert rules["name"] == [TypeMatchRule(str), BoundedLengthRule(2, 5)]
        assert rules["age"] == [BoundedValueRule(0.0, 130.0)]
        assert rules["zip"] == [
            NumericStringFormatRule(NumericKind.UINT32, "Zip must be numeric.")
        ]
        assert rules["score"] == [BoundedValueRule.from_fields("score_min", "score_max")]

    def test_messages_passed_to_rules(self) -> None:
        provider = CatalogMessageProvider({"InvalidType": "nope"})
        schema = RecordSchema.from_mapping(
            {"fields": {"n": {"rules": [{"rule": "numeric_string", "target_type": "int8"}]}}}
        )
        (rule,) = schema.build_rules(provider)["n"]
        assert rule.messages is provider

    def test_empty_schema(self) -> None:
        assert RecordSchema.from_mapping({}).build_rules() == {}

    def test_unknown_rule_name(self) -> None:
        with pytest.raises(ValidationError):
            RecordSchema.from_mapping({"fields": {"a": {"rules": [{"rule": "regex"}]}}})

    def test_unknown_type_name(self) -> None:
        with pytest.raises(ValidationError, match="Unknown type"):
            RecordSchema.from_mapping(
                {"fields": {"a": {"rules": [{"rule": "type", "expected_type": "Decimal"}]}}}
            )

    def test_extra_argument_rejected(self) -> None:
        spec = {"rule": "length", "minimum": 1, "maximum": 2, "x": 1}
        with pytest.raises(ValidationError):
            RecordSchema.from_mapping({"fields": {"a": {"rules": [spec]}}})

    def test_bad_rule_arguments_fail_when_built(self) -> None:
        schema = RecordSchema.from_mapping(
            {"fields": {"a": {"rules": [{"rule": "range", "min_field": "", "max_field": "hi"}]}}}
        )
        with pytest.raises(ValueError, match="min_field"):
            schema.build_rules()

    def test_every_spec_builds_its_registered_class(self) -> None:
        specs = [
            {"rule": "type", "expected_type": "int"},
            {"rule": "numeric_string", "target_type": "float32"},
            {"rule": "range", "minimum": 0, "maximum": 1.5},
            {"rule": "length", "min_field": "lo", "max_field": "hi"},
        ]
        schema = RecordSchema.from_mapping({"fields": {"a": {"rules": specs}}})
        built = schema.build_rules()["a"]
        assert [type(rule) for rule in built] == [
            RULE_REGISTRY[spec["rule"]] for spec in specs
        ]
        assert built[2] == BoundedValueRule(0.0, 1.5)

    @pytest.mark.parametrize(
        "spec",
        [
            {"rule": "range", "minimum": True, "maximum": 5},
            {"rule": "range", "minimum": 0, "maximum": "5"},
            {"rule": "length", "minimum": 0, "maximum": True},
            {"rule": "length", "minimum": 0.0, "maximum": 5},
        ],
    )
    def test_bounds_are_not_coerced(self, spec: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            RecordSchema.from_mapping({"fields": {"a": {"rules": [spec]}}})
