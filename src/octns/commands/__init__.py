"""Subcommand modules for octns.

Provides register_commands() which uses deferred imports to keep
``octns --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from octns.commands.check_name import check_name
    from octns.commands.lookup import lookup, reverse
    from octns.commands.resolve import resolve

    cli.add_command(check_name)
    cli.add_command(lookup)
    cli.add_command(reverse)
    cli.add_command(resolve)
