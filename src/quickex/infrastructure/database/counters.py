"""Atomic monotonically increasing counters (escrow ids).

The caller owns the transaction — pass a ``Connection`` obtained from
``engine.begin()`` so the increment participates in the same atomic
transaction as the surrounding writes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select, update

from quickex.infrastructure.database.engine import SEEDED_COUNTERS
from quickex.infrastructure.database.schema import counters

if TYPE_CHECKING:
    from sqlalchemy import Connection

_VALID_COUNTERS = frozenset(SEEDED_COUNTERS)


def next_counter_value(conn: Connection, name: str) -> int:
    """Increment counter *name* and return its new value (first value is 1).

    Raises:
        ValueError: If *name* is not a known counter.
    """
    if name not in _VALID_COUNTERS:
        msg = f"Unknown counter: {name!r}. Expected one of {sorted(_VALID_COUNTERS)}"
        raise ValueError(msg)

    current: int = conn.execute(select(counters.c.value).where(counters.c.name == name)).scalar_one()
    new_value = current + 1
    conn.execute(update(counters).where(counters.c.name == name).values(value=new_value))
    return new_value
