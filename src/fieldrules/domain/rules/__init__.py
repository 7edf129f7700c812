"""The four field-validation rules and the registry that names them.

RULE_REGISTRY maps the rule name used in declarative schemas to the rule
class, so a schema entry ``{rule = "range", ...}`` builds a
:class:`BoundedValueRule`.
"""

from __future__ import annotations

from fieldrules.domain.rules.base import Rule
from fieldrules.domain.rules.bounded_length import BoundedLengthRule
from fieldrules.domain.rules.bounded_value import BoundedValueRule
from fieldrules.domain.rules.bounds import BoundSource
from fieldrules.domain.rules.numeric_string import NumericKind, NumericStringFormatRule
from fieldrules.domain.rules.type_match import TypeMatchRule

RULE_REGISTRY: dict[str, type[Rule]] = {
    "type": TypeMatchRule,
    "numeric_string": NumericStringFormatRule,
    "range": BoundedValueRule,
    "length": BoundedLengthRule,
}

__all__ = [
    "RULE_REGISTRY",
    "BoundSource",
    "BoundedLengthRule",
    "BoundedValueRule",
    "NumericKind",
    "NumericStringFormatRule",
    "Rule",
    "TypeMatchRule",
]
