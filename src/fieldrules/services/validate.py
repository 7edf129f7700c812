"""ValidateService: apply attached rules to one object or record.

This is the host side of the rule contract. It reads each field's value
through a :class:`~fieldrules.domain.context.ValidationContext`, evaluates
every rule attached to that field, and collects the failure messages.

Contract violations raised by a rule (wrong value kind, broken bound
configuration) stop the run and come back as a ``CONTRACT_VIOLATION``
error rather than as field messages.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from fieldrules.domain.context import (
    MappingValidationContext,
    ObjectValidationContext,
    ValidationContext,
)
from fieldrules.domain.errors import RuleContractError
from fieldrules.domain.messages import DEFAULT_PROVIDER, MessageProvider
from fieldrules.domain.rules import Rule
from fieldrules.domain.schema import RecordSchema
from fieldrules.services.result import ServiceError, ServiceResult, ValidationReport

logger = logging.getLogger(__name__)


def read_data_file(path: Path) -> dict[str, Any]:
    """Parse a ``.json`` or ``.toml`` file into a dict.

    Raises:
        ValueError: Unsupported suffix, malformed content, or a top level
            that is not a table/object.
    """
    raw = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        try:
            data: Any = tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise ValueError(msg) from exc
    elif suffix == ".json":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {path}: {exc}"
            raise ValueError(msg) from exc
    else:
        msg = f"Unsupported file type {path.suffix!r} for {path}; use .json or .toml"
        raise ValueError(msg)
    if not isinstance(data, dict):
        msg = f"Top level of {path} must be an object"
        raise ValueError(msg)
    return data


def load_schema(path: Path) -> RecordSchema:
    """Read and validate a record schema file."""
    return RecordSchema.from_mapping(read_data_file(path))


class ValidateService:
    """Evaluates attached rules against a single object or record.

    Usage::

        rules = {"age": [BoundedValueRule(0, 130)]}
        result = ValidateService().validate_object(person, rules)
        report = ValidationReport.from_result(result)
        if not report.valid:
            show(report.errors)
    """

    def __init__(self, messages: MessageProvider = DEFAULT_PROVIDER) -> None:
        self._messages = messages

    def validate_object(
        self,
        instance: object,
        rules: Mapping[str, Sequence[Rule]],
    ) -> ServiceResult:
        """Validate attributes of *instance* (or keys, for a mapping)."""
        if isinstance(instance, Mapping):
            context: ValidationContext = MappingValidationContext(instance)
        else:
            context = ObjectValidationContext(instance)
        return self._run("validate_object", context, rules)

    def validate_record(self, record: Mapping[str, Any], schema: RecordSchema) -> ServiceResult:
        """Validate a mapping record against a declarative schema."""
        op = "validate_record"
        try:
            rules = schema.build_rules(self._messages)
        except (TypeError, ValueError) as exc:
            return _error(op, "INVALID_SCHEMA", str(exc))
        return self._run(op, MappingValidationContext(record), rules)

    def check_files(self, schema_path: Path, record_path: Path) -> ServiceResult:
        """Load a schema file and a record file, then validate the record."""
        op = "check"
        for path in (schema_path, record_path):
            if not path.is_file():
                return _error(op, "FILE_NOT_FOUND", f"No such file: {path}", path=str(path))

        try:
            schema = load_schema(schema_path)
        except ValueError as exc:
            return _error(op, "INVALID_SCHEMA", str(exc), path=str(schema_path))
        try:
            record = read_data_file(record_path)
        except ValueError as exc:
            return _error(op, "INVALID_RECORD", str(exc), path=str(record_path))

        result = self.validate_record(record, schema)
        return result.model_copy(update={"op": op})

    def _run(
        self,
        op: str,
        context: ValidationContext,
        rules: Mapping[str, Sequence[Rule]],
    ) -> ServiceResult:
        errors: dict[str, list[str]] = {}
        for field_name, field_rules in rules.items():
            lookup = context.resolve_field(field_name)
            if not lookup.found:
                return _error(
                    op,
                    "FIELD_NOT_FOUND",
                    f"Field {field_name!r} not found on {context.object_type.__name__}",
                    field=field_name,
                )
            for rule in field_rules:
                try:
                    outcome = rule.evaluate(lookup.value, context)
                except RuleContractError as exc:
                    logger.warning(
                        "Rule %s on field %s violated its contract: %s",
                        rule.name,
                        field_name,
                        exc,
                    )
                    return _error(
                        op,
                        "CONTRACT_VIOLATION",
                        str(exc),
                        field=field_name,
                        rule=rule.name,
                        key=str(exc.key) if exc.key else None,
                    )
                if not outcome.valid:
                    logger.debug("Field %s failed %s rule: %s", field_name, rule.name, outcome)
                    errors.setdefault(field_name, []).append(outcome.message)

        return ServiceResult(
            ok=True,
            op=op,
            data=ValidationReport.from_errors(errors, checked=len(rules)).model_dump(),
        )


def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
