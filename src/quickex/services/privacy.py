"""PrivacyService — per-account privacy preference flags.

Any caller may set any account's flag: no ownership check is made on
*owner*. Absence of an entry reads as disabled.
"""

from __future__ import annotations

from quickex.domain.events import PrivacyToggled
from quickex.domain.identity import validate_identity
from quickex.services._helpers import invalid_input, now_iso
from quickex.services.base import BaseService
from quickex.services.result import ServiceResult
from quickex.services.telemetry import traced


class PrivacyService(BaseService):
    """Read and write privacy flags."""

    @traced
    def set_privacy(self, owner: str, enabled: bool) -> ServiceResult:
        """Create or overwrite the privacy flag for *owner*."""
        op = "set_privacy"
        try:
            validate_identity(owner)
        except ValueError as exc:
            return invalid_input(op, str(exc), field="owner")

        with self._ledger.transaction() as txn:
            txn.set_privacy(owner, enabled, now_iso())

        warnings: list[str] = []
        timestamp = self._ledger.timestamp()
        self._publish(PrivacyToggled(owner=owner, enabled=enabled, timestamp=timestamp), warnings)

        return ServiceResult(
            ok=True,
            op=op,
            data={"owner": owner, "enabled": enabled, "timestamp": timestamp},
            warnings=warnings,
        )

    def get_privacy(self, owner: str) -> bool:
        """Stored flag for *owner*; False when none was ever set."""
        with self._ledger.transaction() as txn:
            value = txn.get_privacy(owner)
        return bool(value)

    @traced
    def show_privacy(self, owner: str) -> ServiceResult:
        """``get_privacy`` wrapped as a ServiceResult for the CLI."""
        return ServiceResult(
            ok=True,
            op="get_privacy",
            data={"owner": owner, "enabled": self.get_privacy(owner)},
        )
