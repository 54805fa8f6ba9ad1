"""Command group: per-account privacy flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickex.commands._base import QxGroup

if TYPE_CHECKING:
    from quickex.commands._context import AppContext


@click.group(
    cls=QxGroup,
    examples="""\
  quickex privacy set GOWNER... on
  quickex privacy set GOWNER... off
  quickex privacy get GOWNER...""",
)
def privacy() -> None:
    """Set and read account privacy flags."""


@privacy.command("set")
@click.argument("owner")
@click.argument("state", type=click.Choice(["on", "off"]))
@click.pass_obj
def set_cmd(app: AppContext, owner: str, state: str) -> None:
    """Enable (on) or disable (off) privacy for OWNER."""
    from quickex.services.privacy import PrivacyService

    app.emit(PrivacyService(app.ledger).set_privacy(owner, state == "on"))


@privacy.command("get")
@click.argument("owner")
@click.pass_obj
def get_cmd(app: AppContext, owner: str) -> None:
    """Show whether privacy is enabled for OWNER."""
    from quickex.services.privacy import PrivacyService

    app.emit(PrivacyService(app.ledger).show_privacy(owner))
