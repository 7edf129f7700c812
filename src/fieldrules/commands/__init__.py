"""Subcommand modules for fieldrules.

register_commands() uses deferred imports so ``fieldrules --help`` stays
fast and never loads the service layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from fieldrules.commands.check import check
    from fieldrules.commands.messages import messages

    cli.add_command(check)
    cli.add_command(messages)
