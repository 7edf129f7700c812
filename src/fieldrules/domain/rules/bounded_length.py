"""BoundedLengthRule: a string's length must lie in a closed interval."""

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
    is_integer,
    resolve_field_bound,
)

if TYPE_CHECKING:
    from fieldrules.domain.context import ValidationContext


@dataclass(frozen=True)
class BoundedLengthRule(Rule):
    """``minimum <= len(value) <= maximum`` counted in characters.

    Length is the number of code points (``len``), not encoded bytes.
    Bound configuration works as for
    :class:`~fieldrules.domain.rules.bounded_value.BoundedValueRule`,
    with integer bounds.
    """

    minimum: int | None = None
    maximum: int | None = None
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
                if not is_integer(bound):
                    msg = f"'{label}' must be an integer, got {type(bound).__name__}"
                    raise TypeError(msg)

    @classmethod
    def from_fields(
        cls,
        min_field: str,
        max_field: str,
        error_message: str | None = None,
        *,
        messages: MessageProvider = DEFAULT_PROVIDER,
    ) -> BoundedLengthRule:
        """Build a rule whose length limits come from two sibling fields."""
        return cls(
            error_message=error_message,
            min_field=min_field,
            max_field=max_field,
            messages=messages,
        )

    @property
    def name(self) -> str:
        return "length"

    @property
    def source(self) -> BoundSource:
        return BoundSource.LITERAL if self.min_field is None else BoundSource.FIELD

    def resolve_bounds(self, context: ValidationContext) -> tuple[int, int]:
        """Return ``(minimum, maximum)`` lengths for this evaluation."""
        if self.source is BoundSource.LITERAL:
            return self.minimum, self.maximum  # type: ignore[return-value]
        minimum = resolve_field_bound(
            context,
            self.min_field,  # type: ignore[arg-type]
            accepts=is_integer,
            wrong_kind=MessageKey.LENGTH_IS_NOT_INTEGER,
            messages=self.messages,
        )
        maximum = resolve_field_bound(
            context,
            self.max_field,  # type: ignore[arg-type]
            accepts=is_integer,
            wrong_kind=MessageKey.LENGTH_IS_NOT_INTEGER,
            messages=self.messages,
        )
        return minimum, maximum

    def evaluate(self, value: Any, context: ValidationContext | None = None) -> Outcome:
        self._require_value_and_context(value, context)
        if not isinstance(value, str):
            self._violation(InputKindError, MessageKey.TARGET_PROPERTY_IS_NOT_STRING)

        minimum, maximum = self.resolve_bounds(context)  # type: ignore[arg-type]
        if minimum <= len(value) <= maximum:
            return VALID
        return self._failure(MessageKey.INVALID_LENGTH, minimum, maximum)
