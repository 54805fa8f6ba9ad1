"""Shared pytest fixtures for quickex tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pluggy
import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from quickex.config.settings import QuickexSettings
from quickex.domain.identity import generate_identity
from quickex.infrastructure.database.engine import init_database
from quickex.infrastructure.ledger import Ledger
from quickex.plugins.event_bus import EventBus
from quickex.plugins.manager import ObserverManager
from quickex.services.telemetry import disable_telemetry

hookimpl = pluggy.HookimplMarker("quickex")

FIXED_TIMESTAMP = 1_700_000_000


class RecordingObserver:
    """Observer that records every hook call as ``(hook_name, kwargs)``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    @hookimpl
    def privacy_toggled(self, owner: str, enabled: bool, timestamp: int) -> None:
        self.calls.append(
            ("privacy_toggled", {"owner": owner, "enabled": enabled, "timestamp": timestamp})
        )

    @hookimpl
    def contract_paused(self, paused: bool, timestamp: int) -> None:
        self.calls.append(("contract_paused", {"paused": paused, "timestamp": timestamp}))

    @hookimpl
    def admin_changed(self, old_admin: str, new_admin: str, timestamp: int) -> None:
        self.calls.append(
            (
                "admin_changed",
                {"old_admin": old_admin, "new_admin": new_admin, "timestamp": timestamp},
            )
        )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def ledger_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty ledger root, isolated from any ambient quickex config."""
    monkeypatch.delenv("QUICKEX_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def ledger(ledger_root: Path) -> Iterator[Ledger]:
    """Ledger with mock-all authentication, a fixed clock, and no event bus."""
    settings = QuickexSettings.from_cli(root=ledger_root)
    lg = Ledger(settings, clock=lambda: FIXED_TIMESTAMP)
    try:
        yield lg
    finally:
        lg.close()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def evented_ledger(ledger: Ledger, observer: RecordingObserver) -> Ledger:
    """The ``ledger`` fixture wired to a synchronous bus with a recording observer."""
    pm = ObserverManager()
    pm.register(observer, name="recorder")
    ledger.attach_event_bus(EventBus(ledger.engine, pm, sync=True))
    return ledger


@pytest.fixture
def admin_id() -> str:
    return generate_identity()


@pytest.fixture
def other_id() -> str:
    return generate_identity()


@pytest.fixture
def _isolated_ledger(ledger_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp root so the CLI creates an isolated ledger.

    Events are delivered synchronously so CLI tests can read them back.
    """
    monkeypatch.chdir(ledger_root)
    monkeypatch.setenv("QUICKEX_EVENTS__SYNC", "true")
    monkeypatch.setenv("QUICKEX_EVENTS__LOG_OBSERVER", "false")


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Iterator[None]:
    """``-v`` enables telemetry process-wide; keep it from leaking between tests."""
    yield
    disable_telemetry()
