"""Command group: the observable event log."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickex.commands._base import QxGroup
from quickex.domain.events import EVENT_TYPES

if TYPE_CHECKING:
    from quickex.commands._context import AppContext


@click.group(
    cls=QxGroup,
    examples="""\
  quickex events list
  quickex events list --name AdminChanged
  quickex events list --topic GOWNER... --limit 10
  quickex events drain""",
)
def events() -> None:
    """Inspect published events and retry failed deliveries."""


@events.command("list")
@click.option("--name", type=click.Choice(sorted(EVENT_TYPES)), default=None, help="Event name.")
@click.option("--topic", default=None, help="Identity indexed by the event.")
@click.option("--limit", type=click.IntRange(min=1), default=50, show_default=True)
@click.pass_obj
def list_cmd(app: AppContext, name: str | None, topic: str | None, limit: int) -> None:
    """List events, newest first."""
    from quickex.services.events import EventService

    app.emit(EventService(app.ledger).list_events(name=name, topic=topic, limit=limit))


@events.command()
@click.pass_obj
def drain(app: AppContext) -> None:
    """Retry pending and failed deliveries synchronously."""
    from quickex.services.events import EventService

    app.emit(EventService(app.ledger).drain())
