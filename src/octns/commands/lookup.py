"""Commands: forward and reverse registry lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from octns.commands._base import OctnsCommand

if TYPE_CHECKING:
    from octns.commands._context import AppContext


@click.command(
    cls=OctnsCommand,
    examples="""\
  octns lookup alice.oct
  octns -q lookup alice.oct
  octns --registry-url https://names.example.org lookup alice.oct""",
)
@click.argument("domain")
@click.pass_obj
def lookup(app: AppContext, domain: str) -> None:
    """Show the address registered for DOMAIN."""
    from octns.services.resolver import ResolverService

    app.emit(ResolverService(app.registry).lookup(domain))


@click.command(
    cls=OctnsCommand,
    examples="""\
  octns reverse oct1234567890abcdef1234567890abcdef12345678
  octns --json reverse oct1234567890abcdef1234567890abcdef12345678""",
)
@click.argument("address")
@click.pass_obj
def reverse(app: AppContext, address: str) -> None:
    """Show the domain registered for ADDRESS."""
    from octns.services.resolver import ResolverService

    app.emit(ResolverService(app.registry).reverse(address))
