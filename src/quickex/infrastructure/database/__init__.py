"""SQLite database engine, schema, and counters via SQLAlchemy Core."""

from quickex.infrastructure.database.counters import next_counter_value
from quickex.infrastructure.database.engine import create_db_engine, init_database
from quickex.infrastructure.database.schema import (
    admin_state,
    counters,
    escrows,
    event_log,
    metadata,
    privacy_flags,
)

__all__ = [
    "admin_state",
    "counters",
    "create_db_engine",
    "escrows",
    "event_log",
    "init_database",
    "metadata",
    "next_counter_value",
    "privacy_flags",
]
