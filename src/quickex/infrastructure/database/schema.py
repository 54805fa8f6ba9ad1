"""SQLAlchemy Core table definitions for the quickex ledger database.

Persisted contract state is the ``admin_state`` singleton and one
``privacy_flags`` row per account. ``counters`` and ``escrows`` back the
placeholder escrow feature. ``event_log`` is the append-only log of
published events and their delivery status.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)

metadata = MetaData()

ADMIN_SINGLETON_ID = 1

admin_state = Table(
    "admin_state",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("administrator", Text, nullable=False),
    Column("paused", Integer, nullable=False, default=0, server_default="0"),
    Column("created", Text, nullable=False),
    Column("modified", Text, nullable=False),
    CheckConstraint(f"id = {ADMIN_SINGLETON_ID}", name="ck_admin_state_singleton"),
)

privacy_flags = Table(
    "privacy_flags",
    metadata,
    Column("owner", Text, primary_key=True),
    Column("enabled", Integer, nullable=False),
    Column("modified", Text, nullable=False),
)

counters = Table(
    "counters",
    metadata,
    Column("name", Text, primary_key=True),
    Column("value", Integer, nullable=False, default=0, server_default="0"),
)

escrows = Table(
    "escrows",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("from_address", Text, nullable=False),
    Column("to_address", Text, nullable=False),
    Column("created", Text, nullable=False),
)

event_log = Table(
    "event_log",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("hook_name", Text, nullable=False),
    Column("topic_1", Text),  # first indexed identity (owner / old_admin)
    Column("topic_2", Text),  # second indexed identity (new_admin)
    Column("payload", Text, nullable=False),  # JSON, full event body
    Column("ledger_timestamp", Integer, nullable=False),
    Column("status", Text, nullable=False),
    Column("error", Text),
    Column("retries", Integer, default=0, server_default="0"),
    Column("created", Text, nullable=False),
    Column("completed", Text),
)

Index("ix_event_log_name", event_log.c.name)
Index("ix_event_log_topic_1", event_log.c.topic_1)
Index("ix_event_log_topic_2", event_log.c.topic_2)
Index("ix_event_log_status", event_log.c.status)
