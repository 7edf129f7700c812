"""BoundedValueRule: a number must lie in a closed interval."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from fieldrules.domain.errors import InputKindError
from fieldrules.domain.messages import DEFAULT_PROVIDER, MessageKey, MessageProvider
from fieldrules.domain.outcome import VALID, Outcome
from fieldrules.domain.rules.base import Rule
from fieldrules.domain.rules.bounds import (
    BoundSource,
    bound_source,
    is_real,
    resolve_field_bound,
)

if TYPE_CHECKING:
    from fieldrules.domain.context import ValidationContext


@dataclass(frozen=True)
class BoundedValueRule(Rule):
    """``minimum <= value <= maximum``, inclusive at both ends.

    Bounds are either literals (``BoundedValueRule(0.0, 100.0)``) or the
    values of two sibling fields read on every call
    (``BoundedValueRule.from_fields("low", "high")``).

    Inverted bounds are accepted and produce an interval nothing satisfies.
    """

    minimum: float | None = None
    maximum: float | None = None
    error_message: str | None = None
    min_field: str | None = field(default=None, kw_only=True)
    max_field: str | None = field(default=None, kw_only=True)
    messages: MessageProvider = field(
        default=DEFAULT_PROVIDER, kw_only=True, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        source = bound_source(self.minimum, self.maximum, self.min_field, self.max_field)
        if source is BoundSource.LITERAL:
            for label, bound in (("minimum", self.minimum), ("maximum", self.maximum)):
                if not is_real(bound):
                    msg = f"'{label}' must be a number, got {type(bound).__name__}"
                    raise TypeError(msg)
                object.__setattr__(self, label, float(bound))

    @classmethod
    def from_fields(
        cls,
        min_field: str,
        max_field: str,
        error_message: str | None = None,
        *,
        messages: MessageProvider = DEFAULT_PROVIDER,
    ) -> BoundedValueRule:
        """Build a rule whose bounds come from two sibling fields."""
        return cls(
            error_message=error_message,
            min_field=min_field,
            max_field=max_field,
            messages=messages,
        )

    @property
    def name(self) -> str:
        return "range"

    @property
    def source(self) -> BoundSource:
        return BoundSource.LITERAL if self.min_field is None else BoundSource.FIELD

    def resolve_bounds(self, context: ValidationContext) -> tuple[float, float]:
        """Return ``(minimum, maximum)`` for this evaluation."""
        if self.source is BoundSource.LITERAL:
            return self.minimum, self.maximum  # type: ignore[return-value]
        minimum = resolve_field_bound(
            context,
            self.min_field,  # type: ignore[arg-type]
            accepts=is_real,
            wrong_kind=MessageKey.RANGE_IS_NOT_DOUBLE,
            messages=self.messages,
        )
        maximum = resolve_field_bound(
            context,
            self.max_field,  # type: ignore[arg-type]
            accepts=is_real,
            wrong_kind=MessageKey.RANGE_IS_NOT_DOUBLE,
            messages=self.messages,
        )
        return minimum, maximum

    def evaluate(self, value: Any, context: ValidationContext | None = None) -> Outcome:
        self._require_value_and_context(value, context)
        if not is_real(value):
            self._violation(InputKindError, MessageKey.TARGET_PROPERTY_IS_NOT_DOUBLE)

        minimum, maximum = self.resolve_bounds(context)  # type: ignore[arg-type]
        if minimum <= value <= maximum:
            return VALID
        return self._failure(MessageKey.INVALID_RANGE, minimum, maximum)
