"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, quickex.toml only contains
overrides. A fresh ledger needs no config file at all.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class AuthMode(StrEnum):
    """How the hosting boundary authenticates an asserted caller identity."""

    MOCK_ALL = "mock_all"
    SIGNERS = "signers"


# --- quickex.toml sections ---


class LedgerConfig(BaseModel):
    """[ledger] section: names the deployment in health output and log lines."""

    model_config = {"frozen": True}

    name: str = "quickex"
    network: str = "local"


class AuthConfig(BaseModel):
    """[auth] section.

    ``mock_all`` trusts every asserted caller, as a local test network
    does. ``signers`` authenticates only the identities listed in
    ``signers``.
    """

    model_config = {"frozen": True}

    mode: AuthMode = AuthMode.MOCK_ALL
    signers: list[str] = Field(default_factory=list)


class EventsConfig(BaseModel):
    """[events] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    sync: bool = False
    max_retries: int = Field(default=3, ge=1)
    max_workers: int = Field(default=2, ge=1)
    log_observer: bool = True
