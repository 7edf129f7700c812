"""Bound configuration shared by the range and length rules.

A bounded rule takes its ``minimum``/``maximum`` either from literals fixed
at construction or from two sibling fields named at construction and read
through the :class:`~fieldrules.domain.context.ValidationContext` on every
evaluation. The source never changes for a given rule instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from fieldrules.domain.errors import ConfigurationError
from fieldrules.domain.messages import MessageKey

if TYPE_CHECKING:
    from fieldrules.domain.context import ValidationContext
    from fieldrules.domain.messages import MessageProvider

logger = logging.getLogger(__name__)


class BoundSource(StrEnum):
    """Where a bounded rule reads its limits from."""

    LITERAL = "literal"
    FIELD = "field"


def is_real(value: Any) -> bool:
    """True for ints and floats, excluding bools."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def check_field_names(min_field: Any, max_field: Any) -> None:
    """Reject missing or blank bound field names at construction."""
    for label, field_name in (("min_field", min_field), ("max_field", max_field)):
        if not isinstance(field_name, str) or not field_name.strip():
            msg = f"'{label}' cannot be None, empty, or whitespace."
            raise ValueError(msg)


def bound_source(
    minimum: Any,
    maximum: Any,
    min_field: str | None,
    max_field: str | None,
) -> BoundSource:
    """Decide the bound source and enforce literal XOR field configuration."""
    if min_field is None and max_field is None:
        if minimum is None or maximum is None:
            msg = "Both 'minimum' and 'maximum' are required for literal bounds."
            raise ValueError(msg)
        return BoundSource.LITERAL
    check_field_names(min_field, max_field)
    if minimum is not None or maximum is not None:
        msg = "Literal bounds and field bounds cannot be combined."
        raise ValueError(msg)
    return BoundSource.FIELD


def resolve_field_bound(
    context: ValidationContext,
    field_name: str,
    *,
    accepts: Callable[[Any], bool],
    wrong_kind: MessageKey,
    messages: MessageProvider,
) -> Any:
    """Read one bound from *context*, raising ConfigurationError on misuse."""
    lookup = context.resolve_field(field_name)
    if not lookup.found:
        msg = messages.format(MessageKey.PROPERTY_NOT_FOUND, field_name)
        logger.debug("Bound field %r not found on %s", field_name, context.object_type.__name__)
        raise ConfigurationError(msg, key=MessageKey.PROPERTY_NOT_FOUND)
    if not accepts(lookup.value):
        msg = messages.format(wrong_kind)
        logger.debug("Bound field %r has unsupported value %r", field_name, lookup.value)
        raise ConfigurationError(msg, key=wrong_kind)
    return lookup.value
