"""Human and JSON rendering of ServiceResult.

Human mode prints an ``OK``/``INVALID``/``ERROR`` headline followed by the
payload; per-field validation messages are listed one per line so they
can be read straight off a terminal. JSON mode dumps the whole result.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fieldrules.services.result import ServiceResult


def _format_errors(errors: dict[str, list[str]]) -> list[str]:
    lines: list[str] = []
    for field_name, messages in errors.items():
        for message in messages:
            lines.append(f"  {field_name}: {message}" if message else f"  {field_name}")
    return lines


def _format_data_human(data: dict[str, Any]) -> list[str]:
    lines: list[str] = []
    for key, value in data.items():
        if key == "errors":
            continue
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return lines


def format_result(result: ServiceResult, *, json_output: bool = False, quiet: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: Return JSON instead of human-readable text.
        quiet: Human mode only; print just the headline and field errors.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {error_msg}"

    valid = result.data.get("valid", True)
    parts = [f"{'OK' if valid else 'INVALID'}: {result.op}"]
    if not quiet:
        parts.extend(_format_data_human(result.data))
    parts.extend(_format_errors(result.data.get("errors", {})))
    return "\n".join(parts)
