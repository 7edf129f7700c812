"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: Every service method returns a ServiceResult. Invalid data is a
successful operation with ``data["valid"] = False``; ``ok`` is False only
when the operation itself could not run (missing field, misconfigured rule).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation ran to completion.
        op: Name of the operation (e.g. ``"validate_record"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None


class ValidationReport(BaseModel):
    """Payload of the validate operations, stored in ``ServiceResult.data``.

    Attributes:
        valid: True when no rule produced a failure.
        checked: Number of fields that had rules attached.
        error_count: Total failure messages across all fields.
        errors: Failure messages per field, in rule order.
    """

    model_config = {"frozen": True}

    valid: bool
    checked: int
    error_count: int
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: dict[str, list[str]], *, checked: int) -> ValidationReport:
        return cls(
            valid=not errors,
            checked=checked,
            error_count=sum(len(messages) for messages in errors.values()),
            errors=errors,
        )

    @classmethod
    def from_result(cls, result: ServiceResult) -> ValidationReport:
        """Read the report back out of a successful validate result."""
        return cls.model_validate(result.data)
