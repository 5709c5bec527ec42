"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the registry client lazily and centralizes
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from octns.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from octns.config.settings import OctnsSettings
    from octns.infrastructure.registry import RegistryClient
    from octns.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry client is created on first use so ``--help``,
    ``--version`` and ``check-name`` never open an HTTP connection.
    """

    def __init__(self, settings: OctnsSettings) -> None:
        self.settings = settings
        self._registry: RegistryClient | None = None

        from octns.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> RegistryClient:
        """The registry client (created lazily on first access)."""
        if self._registry is None:
            from octns.infrastructure.registry import RegistryClient

            self._registry = RegistryClient.from_config(self.settings.registry)
        return self._registry

    def close(self) -> None:
        if self._registry is not None:
            self._registry.close()
            self._registry = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            raise SystemExit(1)
