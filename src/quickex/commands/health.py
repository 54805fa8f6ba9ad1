"""Command: liveness check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickex.commands._base import QxCommand

if TYPE_CHECKING:
    from quickex.commands._context import AppContext


@click.command(cls=QxCommand, examples="  quickex health\n  quickex --json health")
@click.pass_obj
def health(app: AppContext) -> None:
    """Report that the ledger is operational."""
    from quickex.services.health import HealthService

    app.emit(HealthService(app.ledger).health_check())
