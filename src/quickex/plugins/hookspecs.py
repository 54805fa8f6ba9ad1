"""Pluggy hook specifications for quickex contract events.

One hook per published event. Observers implement any subset with
``pluggy.HookimplMarker("quickex")``. Keyword names match the event
payload fields exactly.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("quickex")


class QuickexHookSpec:
    """Hook specifications for the quickex observer system."""

    @hookspec
    def privacy_toggled(self, owner: str, enabled: bool, timestamp: int) -> None:
        """Called after an account's privacy flag is written."""

    @hookspec
    def contract_paused(self, paused: bool, timestamp: int) -> None:
        """Called after the administrator sets the paused flag."""

    @hookspec
    def admin_changed(self, old_admin: str, new_admin: str, timestamp: int) -> None:
        """Called after administrative rights are transferred."""
