"""Database engine setup for SQLite with WAL mode.

SQLite is the persistence layer: WAL mode for concurrent reads and
ACID transactions so that every contract operation commits or rolls
back as one unit. The DB is stored at {root}/.quickex/quickex.db.

SQLAlchemy Core (not ORM) is used because quickex is a short-lived
CLI process — no benefit from session management or identity maps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import Connection, create_engine, event, insert, select
from sqlalchemy.engine import Engine

from quickex.infrastructure.database.schema import counters, metadata

SEEDED_COUNTERS = ("escrow",)


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and immediate write transactions.

    pysqlite's own transaction handling is switched off and every
    transaction opens with ``BEGIN IMMEDIATE``, so the reserved lock is
    held from the first read of an operation until its commit. Concurrent
    writers on the same database file wait (up to the busy timeout)
    instead of interleaving their read-check-write steps.
    """
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        dbapi_conn.isolation_level = None
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn: Connection) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


def init_database(root: Path) -> Engine:
    """Initialize the quickex database at ``{root}/.quickex/quickex.db``.

    Creates the ``.quickex/`` directory, all tables from
    :data:`schema.metadata`, and seeds the ``counters`` table.

    Idempotent — safe to call on an existing ledger. Does not create the
    admin singleton; that only happens through ``initialize``.

    Returns the engine ready for use.
    """
    state_dir = root / ".quickex"
    state_dir.mkdir(parents=True, exist_ok=True)
    (state_dir / "plugins").mkdir(exist_ok=True)

    engine = create_db_engine(state_dir / "quickex.db")
    metadata.create_all(engine)
    _seed_counters(engine)
    return engine


def _seed_counters(engine: Engine) -> None:
    """Insert zeroed counter rows if they don't exist."""
    with engine.begin() as conn:
        for name in SEEDED_COUNTERS:
            row = conn.execute(select(counters.c.name).where(counters.c.name == name)).first()
            if row is None:
                conn.execute(insert(counters).values(name=name, value=0))
