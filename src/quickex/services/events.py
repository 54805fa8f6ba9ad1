"""EventService — read the observable event log and retry deliveries."""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import or_, select

from quickex.domain.events import EVENT_TYPES
from quickex.infrastructure.database.schema import event_log
from quickex.services._helpers import invalid_input
from quickex.services.base import BaseService
from quickex.services.result import ServiceError, ServiceResult
from quickex.services.telemetry import traced


class EventService(BaseService):
    """Query published events by name and by indexed topic."""

    @traced
    def list_events(
        self,
        *,
        name: str | None = None,
        topic: str | None = None,
        limit: int = 50,
    ) -> ServiceResult:
        """List events, newest first.

        Args:
            name: Only events with this name (e.g. ``"AdminChanged"``).
            topic: Only events indexed by this identity in any topic slot.
            limit: Maximum number of events returned.
        """
        op = "list_events"
        if name is not None and name not in EVENT_TYPES:
            return invalid_input(
                op, f"Unknown event name: {name!r}", expected=sorted(EVENT_TYPES)
            )
        if limit < 1:
            return invalid_input(op, "limit must be positive")

        stmt = select(event_log).order_by(event_log.c.id.desc()).limit(limit)
        if name is not None:
            stmt = stmt.where(event_log.c.name == name)
        if topic is not None:
            stmt = stmt.where(or_(event_log.c.topic_1 == topic, event_log.c.topic_2 == topic))

        with self._ledger.engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()

        items: list[dict[str, Any]] = []
        for row in rows:
            topics = [t for t in (row.topic_1, row.topic_2) if t is not None]
            items.append(
                {
                    "id": row.id,
                    "name": row.name,
                    "topics": topics,
                    "data": json.loads(row.payload),
                    "timestamp": row.ledger_timestamp,
                    "status": row.status,
                }
            )

        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})

    @traced
    def drain(self) -> ServiceResult:
        """Retry undelivered events synchronously."""
        op = "drain_events"
        bus = self._ledger.event_bus
        if bus is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="EVENTS_DISABLED", message="Event bus is not enabled"),
            )
        results = bus.drain()
        return ServiceResult(ok=True, op=op, data={"count": len(results), "items": results})
