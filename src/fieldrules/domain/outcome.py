"""Outcome: the result of evaluating one rule against one value."""

from __future__ import annotations

from pydantic import BaseModel


class Outcome(BaseModel):
    """Tagged result of a rule evaluation.

    Attributes:
        valid: Whether the value satisfied the rule.
        message: End-user text for a failure; empty when valid.
    """

    model_config = {"frozen": True}

    valid: bool
    message: str = ""

    @classmethod
    def success(cls) -> Outcome:
        return VALID

    @classmethod
    def failure(cls, message: str) -> Outcome:
        return cls(valid=False, message=message)

    def __bool__(self) -> bool:
        return self.valid


VALID = Outcome(valid=True)
