"""Subcommand modules for quickex.

Provides register_commands() which uses deferred imports to keep
``quickex --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from quickex.commands.admin import admin
    from quickex.commands.commitment import commitment
    from quickex.commands.escrow import escrow
    from quickex.commands.events import events
    from quickex.commands.privacy import privacy

    cli.add_command(admin)
    cli.add_command(privacy)
    cli.add_command(commitment)
    cli.add_command(escrow)
    cli.add_command(events)

    # --- Standalone commands ---
    from quickex.commands.health import health

    cli.add_command(health)
