"""Command group: contract administration and the pause switch."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickex.commands._base import QxGroup

if TYPE_CHECKING:
    from quickex.commands._context import AppContext

_ADMIN_EXAMPLES = """\
  quickex admin init GADMIN...
  quickex admin status
  quickex admin pause --caller GADMIN...
  quickex admin unpause --caller GADMIN...
  quickex admin transfer GNEWADMIN... --caller GADMIN..."""

_caller_option = click.option(
    "--caller",
    required=True,
    help="Identity asserting the call (must be the administrator).",
)


@click.group(cls=QxGroup, examples=_ADMIN_EXAMPLES)
def admin() -> None:
    """Initialize the contract, pause it, and transfer admin rights."""


@admin.command(
    "init",
    examples="""\
  quickex admin init GADMIN...
  quickex --json admin init GADMIN...""",
)
@click.argument("admin_identity", metavar="ADMIN")
@click.pass_obj
def init_cmd(app: AppContext, admin_identity: str) -> None:
    """Bootstrap the contract with ADMIN as administrator (once only)."""
    from quickex.services.admin import AdminService

    app.emit(AdminService(app.ledger).initialize(admin_identity))


@admin.command(examples="  quickex admin status\n  quickex --json admin status")
@click.pass_obj
def status(app: AppContext) -> None:
    """Show lifecycle state, administrator, and paused flag."""
    from quickex.services.admin import AdminService

    app.emit(AdminService(app.ledger).status())


@admin.command(examples="  quickex admin pause --caller GADMIN...")
@_caller_option
@click.pass_obj
def pause(app: AppContext, caller: str) -> None:
    """Pause the contract (administrator only)."""
    from quickex.services.admin import AdminService

    app.emit(AdminService(app.ledger).set_paused(caller, True))


@admin.command(examples="  quickex admin unpause --caller GADMIN...")
@_caller_option
@click.pass_obj
def unpause(app: AppContext, caller: str) -> None:
    """Unpause the contract (administrator only)."""
    from quickex.services.admin import AdminService

    app.emit(AdminService(app.ledger).set_paused(caller, False))


@admin.command(examples="  quickex admin transfer GNEWADMIN... --caller GADMIN...")
@click.argument("new_admin")
@_caller_option
@click.pass_obj
def transfer(app: AppContext, new_admin: str, caller: str) -> None:
    """Transfer administrative rights to NEW_ADMIN (administrator only)."""
    from quickex.services.admin import AdminService

    app.emit(AdminService(app.ledger).set_admin(caller, new_admin))
