"""Contract-violation errors raised by rules.

Validation failures are never raised: they come back as an
:class:`~fieldrules.domain.outcome.Outcome`. These exceptions signal a
caller or rule-author defect instead, and are meant for developers,
not end users.
"""

from __future__ import annotations

from fieldrules.domain.messages import MessageKey


class RuleContractError(Exception):
    """Base class for misuse of a rule.

    Attributes:
        key: Message key the error text was produced from.
    """

    def __init__(self, message: str, *, key: MessageKey | None = None) -> None:
        super().__init__(message)
        self.key = key


class InputKindError(RuleContractError, TypeError):
    """The value or context handed to ``evaluate`` has the wrong kind."""


class ConfigurationError(RuleContractError, ValueError):
    """A field-bound rule points at a missing or mistyped sibling field."""
