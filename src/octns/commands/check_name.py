"""Command: offline domain syntax check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from octns.commands._base import OctnsCommand

if TYPE_CHECKING:
    from octns.commands._context import AppContext


@click.command(
    "check-name",
    cls=OctnsCommand,
    examples="""\
  octns check-name alice.oct
  octns --json check-name -- -bad-.oct""",
)
@click.argument("domain")
@click.pass_obj
def check_name(app: AppContext, domain: str) -> None:
    """Check that DOMAIN is a well-formed .oct name (no network)."""
    from octns.services.resolver import check_name as run_check

    app.emit(run_check(domain))
