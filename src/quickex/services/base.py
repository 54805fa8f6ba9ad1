"""BaseService — abstract foundation for all quickex services.

Every service receives a :class:`Ledger` at construction time. The
Ledger provides transactional access to persisted state, the caller
authorizer, the ledger clock, and the event bus.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quickex.domain.events import ContractEvent
    from quickex.infrastructure.ledger import Ledger

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class PrivacyService(BaseService):
            def set_privacy(self, owner: str, enabled: bool) -> ServiceResult:
                with self._ledger.transaction() as txn:
                    ...
                self._publish(PrivacyToggled(...), warnings)
    """

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger

    def _publish(self, event: ContractEvent, warnings: list[str]) -> None:
        """Publish a contract event. No-op if the event bus is not initialized.

        Called only after the triggering transaction has committed.

        INVARIANT: Publishing failures are warnings, never errors.
        """
        bus = self._ledger.event_bus
        if bus is None:
            return
        try:
            bus.publish(event)
        except Exception:
            logger.debug("Event publish failed for %s", event.name, exc_info=True)
            warnings.append(f"Event publish failed for {event.name}")
