"""Command: show the active message table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fieldrules.commands._base import FieldrulesCommand
from fieldrules.services.result import ServiceResult

if TYPE_CHECKING:
    from fieldrules.commands._context import AppContext


@click.command(
    cls=FieldrulesCommand,
    examples="""\
  fieldrules messages
  fieldrules --json messages
  FIELDRULES_MESSAGES__OVERRIDES='{"InvalidType": "Not a number."}' fieldrules messages""",
)
@click.pass_obj
def messages(app: AppContext) -> None:
    """List message templates, with configured overrides applied."""
    table = app.messages.table()
    overridden = sorted(app.settings.messages.overrides)
    app.emit(ServiceResult(ok=True, op="messages", data={**table, "overridden": overridden}))
