"""fieldrules: declarative field-validation rules."""

from __future__ import annotations

from fieldrules.domain.context import (
    FieldLookup,
    MappingValidationContext,
    ObjectValidationContext,
    ValidationContext,
)
from fieldrules.domain.errors import ConfigurationError, InputKindError, RuleContractError
from fieldrules.domain.outcome import VALID, Outcome
from fieldrules.domain.rules import (
    BoundedLengthRule,
    BoundedValueRule,
    NumericKind,
    NumericStringFormatRule,
    Rule,
    TypeMatchRule,
)

__version__ = "0.1.0"

__all__ = [
    "VALID",
    "BoundedLengthRule",
    "BoundedValueRule",
    "ConfigurationError",
    "FieldLookup",
    "InputKindError",
    "MappingValidationContext",
    "NumericKind",
    "NumericStringFormatRule",
    "ObjectValidationContext",
    "Outcome",
    "Rule",
    "RuleContractError",
    "TypeMatchRule",
    "ValidationContext",
    "__version__",
]
