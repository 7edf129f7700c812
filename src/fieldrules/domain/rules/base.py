"""Rule ABC shared by every field-validation rule.

INVARIANT: Rules are immutable after construction. Each concrete rule is a
frozen dataclass, so one instance can be shared across threads and
evaluated any number of times with identical results.

INVARIANT: A failed validation is returned as ``Outcome.failure``; only
contract violations (wrong value kind, broken bound configuration) raise.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, NoReturn

from fieldrules.domain.errors import InputKindError, RuleContractError
from fieldrules.domain.outcome import Outcome

if TYPE_CHECKING:
    from fieldrules.domain.context import ValidationContext
    from fieldrules.domain.messages import MessageKey, MessageProvider

logger = logging.getLogger(__name__)


class Rule(ABC):
    """Abstract base class for field-validation rules.

    Concrete rules declare ``error_message`` (shown to end users instead of
    the default text when set) and ``messages`` (the provider used for
    default and developer-facing text).
    """

    error_message: str | None
    messages: MessageProvider

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule identifier (e.g. 'range', 'length')."""
        ...

    @abstractmethod
    def evaluate(self, value: Any, context: ValidationContext | None = None) -> Outcome:
        """Check *value*, resolving any field bounds through *context*."""
        ...

    def is_valid(self, value: Any, context: ValidationContext | None = None) -> bool:
        """Shorthand for ``evaluate(value, context).valid``."""
        return self.evaluate(value, context).valid

    def _failure(self, key: MessageKey, *args: object) -> Outcome:
        if self.error_message is not None:
            return Outcome.failure(self.error_message)
        return Outcome.failure(self.messages.format(key, *args))

    def _require_value_and_context(self, value: Any, context: ValidationContext | None) -> None:
        for label, argument in (("value", value), ("context", context)):
            if argument is None:
                msg = f"'{label}' must not be None"
                logger.debug("Contract violation in %s rule: %s", self.name, msg)
                raise InputKindError(msg)

    def _violation(
        self,
        error_cls: type[RuleContractError],
        key: MessageKey,
        *args: object,
    ) -> NoReturn:
        msg = self.messages.format(key, *args)
        logger.debug("Contract violation in %s rule: %s", self.name, msg)
        raise error_cls(msg, key=key)
