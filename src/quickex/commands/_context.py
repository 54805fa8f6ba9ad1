"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Ledger initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickex.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from quickex.config.settings import QuickexSettings
    from quickex.infrastructure.ledger import Ledger
    from quickex.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The ledger is lazily opened on first use so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: QuickexSettings) -> None:
        self.settings = settings
        self._ledger: Ledger | None = None

        from quickex.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, log_json=settings.log_json, ledger=settings.ledger
        )

        if settings.verbose:
            from quickex.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def ledger(self) -> Ledger:
        """The ledger instance (created lazily on first access)."""
        if self._ledger is None:
            from quickex.infrastructure.ledger import Ledger

            self._ledger = Ledger(self.settings)
            if self.settings.events.enabled:
                self._ledger.init_event_bus(sync=self.settings.dispatch_sync)
        return self._ledger

    def close(self) -> None:
        """Flush in-flight event deliveries and release the database."""
        if self._ledger is not None:
            self._ledger.close()
            self._ledger = None

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
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
