"""Built-in observer that writes every delivered event to the structured log."""

from __future__ import annotations

import pluggy
import structlog

hookimpl = pluggy.HookimplMarker("quickex")


class EventLogObserver:
    """Log contract events at INFO via structlog."""

    def __init__(self) -> None:
        self._log = structlog.get_logger("quickex.events")

    @hookimpl
    def privacy_toggled(self, owner: str, enabled: bool, timestamp: int) -> None:
        self._log.info("PrivacyToggled", owner=owner, enabled=enabled, timestamp=timestamp)

    @hookimpl
    def contract_paused(self, paused: bool, timestamp: int) -> None:
        self._log.info("ContractPaused", paused=paused, timestamp=timestamp)

    @hookimpl
    def admin_changed(self, old_admin: str, new_admin: str, timestamp: int) -> None:
        self._log.info(
            "AdminChanged", old_admin=old_admin, new_admin=new_admin, timestamp=timestamp
        )
