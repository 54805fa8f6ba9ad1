"""Ledger — repository pattern with atomic transaction boundaries.

The Ledger is the single dependency injected into every service. It owns
the database engine, the caller authorizer, the ledger clock, and the
event bus. Each contract operation runs inside :meth:`Ledger.transaction`,
so a failing operation leaves persisted state exactly as it was.

The admin singleton is never cached here: services load it as an
optional :class:`AdminState` at the start of every privileged call.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from quickex.domain.admin import AdminState
from quickex.infrastructure.auth import Authorizer, build_authorizer
from quickex.infrastructure.database.counters import next_counter_value
from quickex.infrastructure.database.engine import init_database
from quickex.infrastructure.database.schema import (
    ADMIN_SINGLETON_ID,
    admin_state,
    escrows,
    privacy_flags,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from quickex.config.settings import QuickexSettings
    from quickex.plugins.event_bus import EventBus

logger = logging.getLogger(__name__)


def system_clock() -> int:
    """Ledger timestamp: whole seconds since the Unix epoch."""
    return int(time.time())


# ---------------------------------------------------------------------------
# LedgerTransaction — yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class LedgerTransaction:
    """Active transaction with consolidated data-access helpers."""

    conn: Connection

    # -- admin singleton ------------------------------------------------

    def load_admin_state(self) -> AdminState | None:
        """Return the admin singleton, or None before ``initialize``."""
        row = self.conn.execute(
            select(admin_state.c.administrator, admin_state.c.paused).where(
                admin_state.c.id == ADMIN_SINGLETON_ID
            )
        ).first()
        if row is None:
            return None
        return AdminState(administrator=row.administrator, paused=bool(row.paused))

    def insert_admin_state(self, state: AdminState, now: str) -> None:
        """Create the singleton. Raises IntegrityError if it already exists."""
        self.conn.execute(
            insert(admin_state).values(
                id=ADMIN_SINGLETON_ID,
                administrator=state.administrator,
                paused=int(state.paused),
                created=now,
                modified=now,
            )
        )

    def save_paused(self, paused: bool, now: str) -> None:
        """Write only the paused flag of the existing singleton."""
        self.conn.execute(
            update(admin_state)
            .where(admin_state.c.id == ADMIN_SINGLETON_ID)
            .values(paused=int(paused), modified=now)
        )

    def save_administrator(self, administrator: str, now: str) -> None:
        """Write only the administrator of the existing singleton."""
        self.conn.execute(
            update(admin_state)
            .where(admin_state.c.id == ADMIN_SINGLETON_ID)
            .values(administrator=administrator, modified=now)
        )

    # -- privacy flags --------------------------------------------------

    def get_privacy(self, owner: str) -> bool | None:
        """Stored flag for *owner*, or None when no entry exists."""
        value = self.conn.execute(
            select(privacy_flags.c.enabled).where(privacy_flags.c.owner == owner)
        ).scalar()
        return None if value is None else bool(value)

    def set_privacy(self, owner: str, enabled: bool, now: str) -> None:
        """Create or overwrite the flag for *owner* in a single upsert."""
        stmt = sqlite_insert(privacy_flags).values(
            owner=owner, enabled=int(enabled), modified=now
        )
        self.conn.execute(
            stmt.on_conflict_do_update(
                index_elements=[privacy_flags.c.owner],
                set_={"enabled": stmt.excluded.enabled, "modified": stmt.excluded.modified},
            )
        )

    # -- escrow placeholder ---------------------------------------------

    def insert_escrow(self, from_address: str, to_address: str, now: str) -> int:
        """Claim the next escrow id and store the ``{from, to}`` record."""
        escrow_id = next_counter_value(self.conn, "escrow")
        self.conn.execute(
            insert(escrows).values(
                id=escrow_id,
                from_address=from_address,
                to_address=to_address,
                created=now,
            )
        )
        return escrow_id

    def get_escrow(self, escrow_id: int) -> dict[str, Any] | None:
        row = self.conn.execute(select(escrows).where(escrows.c.id == escrow_id)).first()
        if row is None:
            return None
        return {
            "id": row.id,
            "from": row.from_address,
            "to": row.to_address,
            "created": row.created,
        }


# ---------------------------------------------------------------------------
# Ledger — the repository
# ---------------------------------------------------------------------------


class Ledger:
    """Repository encapsulating persisted contract state.

    Constructed once at CLI startup from :class:`QuickexSettings` and
    stored on the Click context. Services receive the Ledger via their
    :class:`BaseService` constructor.

    Args:
        settings: Resolved settings (root directory, auth, events).
        authorizer: Override the authorizer built from ``[auth]``.
        clock: Override the ledger clock (seconds since the epoch).
    """

    def __init__(
        self,
        settings: QuickexSettings,
        *,
        authorizer: Authorizer | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._settings = settings
        self._engine: Engine = init_database(self.root)
        self._authorizer: Authorizer = authorizer or build_authorizer(settings.auth)
        self._clock = clock or system_clock
        self._event_bus: EventBus | None = None

    @property
    def root(self) -> Path:
        """The directory holding ``.quickex/``."""
        return self._settings.root

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def settings(self) -> QuickexSettings:
        return self._settings

    @property
    def authorizer(self) -> Authorizer:
        return self._authorizer

    @property
    def event_bus(self) -> EventBus | None:
        """The event bus (None if not initialized)."""
        return self._event_bus

    def timestamp(self) -> int:
        """Current ledger timestamp in seconds."""
        return self._clock()

    def require_auth(self, identity: str) -> bool:
        """Whether *identity* is authenticated for the current invocation."""
        return self._authorizer.require_auth(identity)

    def init_event_bus(self, *, sync: bool = False) -> EventBus:
        """Initialize the event bus and its observers.

        Creates an ObserverManager, discovers entry-point and local observers,
        registers the built-in log observer, and wires up the EventBus.
        Called by AppContext when the ledger is first accessed.
        """
        from quickex.plugins.builtins.event_log import EventLogObserver
        from quickex.plugins.event_bus import EventBus
        from quickex.plugins.manager import ObserverManager

        cfg = self._settings.events
        pm = ObserverManager()
        pm.discover(local_dir=self.root / ".quickex" / "plugins")
        if cfg.log_observer:
            pm.register(EventLogObserver(), name="event-log-builtin")

        self._event_bus = EventBus(
            self._engine,
            pm,
            sync=sync,
            max_retries=cfg.max_retries,
            max_workers=cfg.max_workers,
        )
        return self._event_bus

    def attach_event_bus(self, bus: EventBus | None) -> None:
        """Install a pre-built event bus (or detach with None)."""
        self._event_bus = bus

    @contextmanager
    def transaction(self) -> Iterator[LedgerTransaction]:
        """Run one contract operation atomically.

        Commits when the block exits normally; rolls back on any
        exception, so partial writes never become visible.

        Usage::

            with ledger.transaction() as txn:
                state = txn.load_admin_state()
                txn.save_paused(True, now)
        """
        with self._engine.begin() as conn:
            yield LedgerTransaction(conn=conn)

    def close(self) -> None:
        """Shut down the event bus and release database connections."""
        if self._event_bus is not None:
            self._event_bus.shutdown()
        self._engine.dispose()
