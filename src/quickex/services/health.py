"""HealthService — liveness check."""

from __future__ import annotations

from quickex import __version__
from quickex.services.base import BaseService
from quickex.services.result import ServiceResult
from quickex.services.telemetry import traced


class HealthService(BaseService):
    @traced
    def health_check(self) -> ServiceResult:
        """Always healthy: reaching this code means the ledger opened.

        Reports which deployment answered, from the ``[ledger]`` section.
        """
        ledger = self._ledger.settings.ledger
        return ServiceResult(
            ok=True,
            op="health_check",
            data={
                "healthy": True,
                "version": __version__,
                "ledger": ledger.name,
                "network": ledger.network,
            },
        )
