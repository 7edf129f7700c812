"""Command: validate a record file against a rule schema."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from fieldrules.commands._base import FieldrulesCommand

if TYPE_CHECKING:
    from fieldrules.commands._context import AppContext


@click.command(
    cls=FieldrulesCommand,
    examples="""\
  fieldrules check person.json --schema person.schema.toml
  fieldrules --json check order.toml -s order.schema.toml
  fieldrules check person.json            # schema from [check] schema_path
  fieldrules check person.json --no-fail""",
)
@click.argument("record", type=click.Path(path_type=Path))
@click.option(
    "-s",
    "--schema",
    "schema_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Schema file (.toml or .json). Defaults to [check] schema_path.",
)
@click.option(
    "--fail/--no-fail",
    "fail_on_invalid",
    default=None,
    help="Exit 1 when the record is invalid. Defaults to [check] fail_on_invalid.",
)
@click.pass_obj
def check(
    app: AppContext,
    record: Path,
    schema_path: Path | None,
    fail_on_invalid: bool | None,
) -> None:
    """Validate RECORD against the rules in a schema file."""
    from fieldrules.services.validate import ValidateService

    config = app.settings.check
    if schema_path is None:
        if config.schema_path is None:
            raise click.UsageError("No schema given; pass --schema or set [check] schema_path.")
        schema_path = Path(config.schema_path)
    if fail_on_invalid is None:
        fail_on_invalid = config.fail_on_invalid

    svc = ValidateService(app.messages)
    app.emit(svc.check_files(schema_path, record), fail_on_invalid=fail_on_invalid)
