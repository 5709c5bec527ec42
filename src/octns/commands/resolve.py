"""Command: resolve an address or a .oct domain to an address."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from octns.commands._base import OctnsCommand

if TYPE_CHECKING:
    from octns.commands._context import AppContext


@click.command(
    cls=OctnsCommand,
    examples="""\
  octns resolve alice.oct
  octns -q resolve alice.oct
  octns resolve oct1234567890abcdef1234567890abcdef12345678""",
)
@click.argument("value")
@click.pass_obj
def resolve(app: AppContext, value: str) -> None:
    """Resolve VALUE (an address or a .oct domain) to an address.

    Addresses are echoed back unchanged without contacting the registry.
    """
    from octns.services.resolver import ResolverService

    app.emit(ResolverService(app.registry).resolve(value))
