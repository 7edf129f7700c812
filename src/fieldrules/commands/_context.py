"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging and centralizes result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fieldrules.config.logging import configure_logging
from fieldrules.output.formatters import format_result

if TYPE_CHECKING:
    from fieldrules.config.settings import FieldrulesSettings
    from fieldrules.domain.messages import CatalogMessageProvider
    from fieldrules.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FieldrulesSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def messages(self) -> CatalogMessageProvider:
        """Message provider with the configured overrides."""
        return self.settings.message_provider()

    def emit(self, result: ServiceResult, *, fail_on_invalid: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Operation error: written to stderr, exit code 1.
        * Invalid data: written to stdout, exit code 1 when
          *fail_on_invalid* is set.
        * Otherwise: written to stdout, returns normally.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        click.echo(output)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if fail_on_invalid and not result.data.get("valid", True):
            raise SystemExit(1)
