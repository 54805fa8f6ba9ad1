"""Tests for atomic counters."""

import pytest
from sqlalchemy import select
from sqlalchemy.engine import Engine

from quickex.infrastructure.database.counters import next_counter_value
from quickex.infrastructure.database.schema import counters


def _stored(engine: Engine, name: str) -> int:
    with engine.connect() as conn:
        return conn.execute(select(counters.c.value).where(counters.c.name == name)).scalar_one()


class TestNextCounterValue:
    def test_first_value_is_one(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            assert next_counter_value(conn, "escrow") == 1

    def test_sequential_increment(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            values = [next_counter_value(conn, "escrow") for _ in range(4)]
        assert values == [1, 2, 3, 4]
        assert _stored(db_engine, "escrow") == 4

    def test_rollback_discards_increment(self, db_engine: Engine) -> None:
        with pytest.raises(RuntimeError):
            with db_engine.begin() as conn:
                next_counter_value(conn, "escrow")
                raise RuntimeError("abort")
        assert _stored(db_engine, "escrow") == 0

    def test_unknown_counter_raises(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            with pytest.raises(ValueError, match="Unknown counter"):
                next_counter_value(conn, "nope")
