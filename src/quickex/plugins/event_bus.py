"""Append-only event log with pluggy delivery.

Every published event is first appended to the ``event_log`` table (the
observable log), then delivered to observers synchronously or on a
ThreadPoolExecutor. ``drain()`` retries undelivered events synchronously.

INVARIANT: Observer failures are warnings, never errors. Publishing
never fails the operation that produced the event.
"""

from __future__ import annotations

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update

from quickex.infrastructure.database.schema import event_log
from quickex.services._helpers import now_iso

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from quickex.domain.events import ContractEvent
    from quickex.plugins.manager import ObserverManager

logger = logging.getLogger(__name__)


class EventBus:
    """Event log writer and observer dispatcher.

    Parameters:
        engine: SQLAlchemy engine with the ``event_log`` table.
        plugin_manager: ObserverManager with observers registered.
        sync: Deliver synchronously (tests / ``--sync``).
        max_retries: Attempts before an event is marked ``dead_letter``.
        max_workers: ThreadPoolExecutor worker count.
    """

    def __init__(
        self,
        engine: Engine,
        plugin_manager: ObserverManager,
        *,
        sync: bool = False,
        max_retries: int = 3,
        max_workers: int = 2,
    ) -> None:
        self._engine = engine
        self._pm = plugin_manager
        self._sync = sync
        self._max_retries = max_retries
        self._executor: ThreadPoolExecutor | None = (
            None if sync else ThreadPoolExecutor(max_workers=max_workers)
        )
        self._futures: list[Future[None]] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def publish(self, event: ContractEvent) -> int:
        """Append *event* to the log, then deliver it. Returns the log row id."""
        payload = event.hook_kwargs()
        event_id = self._append(event, payload)

        if self._sync:
            self._deliver(event_id, event.hook_name, payload)
        else:
            assert self._executor is not None
            future = self._executor.submit(self._deliver, event_id, event.hook_name, payload)
            self._futures.append(future)

        return event_id

    def drain(self) -> list[dict[str, Any]]:
        """Retry pending/failed deliveries synchronously.

        Returns ``{id, name, status}`` for each retried event.
        """
        self._wait_futures()

        with self._engine.connect() as conn:
            rows = conn.execute(
                select(event_log.c.id, event_log.c.name, event_log.c.hook_name, event_log.c.payload)
                .where(event_log.c.status.in_(["pending", "failed"]))
                .order_by(event_log.c.id)
            ).fetchall()

        results: list[dict[str, Any]] = []
        for row in rows:
            self._deliver(row.id, row.hook_name, json.loads(row.payload))
            with self._engine.connect() as conn:
                status = conn.execute(
                    select(event_log.c.status).where(event_log.c.id == row.id)
                ).scalar_one()
            results.append({"id": row.id, "name": row.name, "status": status})

        return results

    def shutdown(self) -> None:
        """Shutdown the executor, waiting for in-flight deliveries."""
        self._wait_futures()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _append(self, event: ContractEvent, payload: dict[str, Any]) -> int:
        topics = event.topics()
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(event_log).values(
                    name=event.name,
                    hook_name=event.hook_name,
                    topic_1=topics[0] if len(topics) > 0 else None,
                    topic_2=topics[1] if len(topics) > 1 else None,
                    payload=json.dumps(payload),
                    ledger_timestamp=event.timestamp,
                    status="pending",
                    retries=0,
                    created=now_iso(),
                )
            )
            assert result.lastrowid is not None
            return result.lastrowid

    def _deliver(self, event_id: int, hook_name: str, payload: dict[str, Any]) -> None:
        """Call the hook for one event and record the outcome."""
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            self._mark_completed(event_id)
            return

        try:
            hook_fn(**payload)
        except Exception as exc:
            logger.debug("Hook %s failed: %s", hook_name, exc)
            self._mark_failed(event_id, str(exc))
        else:
            self._mark_completed(event_id)

    def _mark_completed(self, event_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                update(event_log)
                .where(event_log.c.id == event_id)
                .values(status="completed", completed=now_iso())
            )

    def _mark_failed(self, event_id: int, error: str) -> None:
        """Increment retries, mark failed or dead_letter."""
        with self._engine.begin() as conn:
            retries = conn.execute(
                select(event_log.c.retries).where(event_log.c.id == event_id)
            ).scalar_one()

            new_retries = retries + 1
            new_status = "dead_letter" if new_retries >= self._max_retries else "failed"

            conn.execute(
                update(event_log)
                .where(event_log.c.id == event_id)
                .values(
                    status=new_status,
                    error=error,
                    retries=new_retries,
                    completed=now_iso() if new_status == "dead_letter" else None,
                )
            )

    def _wait_futures(self) -> None:
        for future in self._futures:
            try:
                future.result(timeout=30)
            except Exception:
                logger.debug("Event delivery future raised", exc_info=True)
        self._futures.clear()
