"""Declarative rule specs: attach rules to record fields from data.

A schema maps field names to lists of rule specs. Each spec names its rule
(``type``, ``numeric_string``, ``range``, ``length``) and carries the same
arguments as the rule's constructor::

    [fields.age]
    rules = [
        { rule = "type", expected_type = "int" },
        { rule = "range", minimum = 0, maximum = 130 },
    ]

    [fields.nickname]
    rules = [{ rule = "length", min_field = "nick_min", max_field = "nick_max" }]
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator

from fieldrules.domain.messages import DEFAULT_PROVIDER, MessageProvider
from fieldrules.domain.rules import RULE_REGISTRY, Rule

TYPE_NAMES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "list": list,
    "dict": dict,
}


class _RuleSpecBase(BaseModel):
    """Shared shape of a rule spec: the rule name plus constructor arguments.

    ``rule`` is looked up in :data:`RULE_REGISTRY`; the remaining fields are
    passed to that class as keyword arguments.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    rule: str
    error_message: str | None = None

    def rule_arguments(self) -> dict[str, Any]:
        return self.model_dump(exclude={"rule"})

    def build(self, messages: MessageProvider = DEFAULT_PROVIDER) -> Rule:
        rule_cls = RULE_REGISTRY[self.rule]
        return rule_cls(**self.rule_arguments(), messages=messages)


class TypeRuleSpec(_RuleSpecBase):
    """Spec for :class:`TypeMatchRule`."""

    rule: Literal["type"]
    expected_type: str

    @field_validator("expected_type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        if value not in TYPE_NAMES:
            msg = f"Unknown type {value!r}; expected one of {sorted(TYPE_NAMES)}"
            raise ValueError(msg)
        return value

    def rule_arguments(self) -> dict[str, Any]:
        return {**super().rule_arguments(), "expected_type": TYPE_NAMES[self.expected_type]}


class NumericStringRuleSpec(_RuleSpecBase):
    """Spec for :class:`NumericStringFormatRule`."""

    rule: Literal["numeric_string"]
    target_type: str


class RangeRuleSpec(_RuleSpecBase):
    """Spec for :class:`BoundedValueRule` (literal or field bounds).

    Bounds are strict so a TOML/JSON ``true`` is not read as ``1``.
    """

    rule: Literal["range"]
    minimum: StrictInt | StrictFloat | None = None
    maximum: StrictInt | StrictFloat | None = None
    min_field: str | None = None
    max_field: str | None = None


class LengthRuleSpec(_RuleSpecBase):
    """Spec for :class:`BoundedLengthRule` (literal or field bounds)."""

    rule: Literal["length"]
    minimum: StrictInt | None = None
    maximum: StrictInt | None = None
    min_field: str | None = None
    max_field: str | None = None


RuleSpec = Annotated[
    TypeRuleSpec | NumericStringRuleSpec | RangeRuleSpec | LengthRuleSpec,
    Field(discriminator="rule"),
]


class FieldSpec(BaseModel):
    """Rules attached to one field."""

    model_config = {"frozen": True, "extra": "forbid"}

    rules: list[RuleSpec] = Field(default_factory=list)


class RecordSchema(BaseModel):
    """Field name to rule specs for one kind of record."""

    model_config = {"frozen": True, "extra": "forbid"}

    fields: dict[str, FieldSpec] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> RecordSchema:
        return cls.model_validate(data)

    def build_rules(self, messages: MessageProvider = DEFAULT_PROVIDER) -> dict[str, list[Rule]]:
        """Construct the rule objects, failing fast on bad rule arguments."""
        return {
            name: [spec.build(messages) for spec in field_spec.rules]
            for name, field_spec in self.fields.items()
        }
