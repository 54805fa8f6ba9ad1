"""Command group: placeholder escrow records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickex.commands._base import QxGroup

if TYPE_CHECKING:
    from quickex.commands._context import AppContext


@click.group(
    cls=QxGroup,
    examples="""\
  quickex escrow create GFROM... GTO... 1000
  quickex escrow show 1""",
)
def escrow() -> None:
    """Record escrow placeholders (no release or dispute logic)."""


@escrow.command()
@click.argument("from_", metavar="FROM")
@click.argument("to")
@click.argument("amount", type=int)
@click.pass_obj
def create(app: AppContext, from_: str, to: str, amount: int) -> None:
    """Store an escrow record from FROM to TO and print its id."""
    from quickex.services.escrow import EscrowService

    app.emit(EscrowService(app.ledger).create_escrow(from_, to, amount))


@escrow.command()
@click.argument("escrow_id", type=int)
@click.pass_obj
def show(app: AppContext, escrow_id: int) -> None:
    """Show the escrow record ESCROW_ID."""
    from quickex.services.escrow import EscrowService

    app.emit(EscrowService(app.ledger).get_escrow(escrow_id))
