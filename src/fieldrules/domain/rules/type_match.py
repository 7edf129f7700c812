"""TypeMatchRule: the value's runtime type must be exactly the expected type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from fieldrules.domain.messages import DEFAULT_PROVIDER, MessageProvider
from fieldrules.domain.outcome import VALID, Outcome
from fieldrules.domain.rules.base import Rule

if TYPE_CHECKING:
    from fieldrules.domain.context import ValidationContext


@dataclass(frozen=True)
class TypeMatchRule(Rule):
    """Exact type identity check. Subclasses do not match.

    ``None`` is never valid. Without an ``error_message`` a failure
    carries an empty message.
    """

    expected_type: type
    error_message: str | None = None
    messages: MessageProvider = field(
        default=DEFAULT_PROVIDER, kw_only=True, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.expected_type is None:
            msg = "expected_type must not be None"
            raise ValueError(msg)
        if not isinstance(self.expected_type, type):
            msg = f"expected_type must be a type, got {type(self.expected_type).__name__}"
            raise TypeError(msg)

    @property
    def name(self) -> str:
        return "type"

    def evaluate(self, value: Any, context: ValidationContext | None = None) -> Outcome:
        if value is not None and type(value) is self.expected_type:
            return VALID
        return Outcome.failure(self.error_message or "")
