"""QuickexSettings — one frozen object for CLI flags, env vars, and quickex.toml.

Precedence, highest first: keyword arguments from Click, ``QUICKEX_*``
environment variables (``__`` descends into a section, e.g.
``QUICKEX_AUTH__MODE=signers``), the ``quickex.toml`` that governs the
ledger root, then the defaults in :mod:`quickex.config.models`.

The ledger root is the directory holding ``quickex.toml``; without a
config file it is the working directory. ``.quickex/`` state lives there.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from quickex.config.models import AuthConfig, EventsConfig, LedgerConfig

CONFIG_FILENAME = "quickex.toml"
CONFIG_ENV_VAR = "QUICKEX_CONFIG"

# The TOML file chosen by ``from_cli`` for the settings instance being built.
_config_file: ContextVar[Path | None] = ContextVar("_config_file", default=None)


def find_config(start: Path | None = None) -> Path | None:
    """Locate the governing ``quickex.toml``.

    ``$QUICKEX_CONFIG`` wins when set (None if it names no file). Otherwise
    *start* (default: the working directory) and each of its parents are
    searched, nearest first.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class QuickexSettings(BaseSettings):
    """Resolved settings for one CLI invocation.

    Attributes:
        root: Directory holding ``.quickex/``.
        config_path: The ``quickex.toml`` in effect, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="QUICKEX_",
        env_nested_delimiter="__",
    )

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    sync: bool = False

    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    events: EventsConfig = Field(default_factory=EventsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Kwargs, then env vars, then the chosen TOML file. No dotenv."""
        config_file = _config_file.get()
        if config_file is None:
            return (init_settings, env_settings)
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=config_file),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **flags: Any,
    ) -> QuickexSettings:
        """Build settings for a CLI run.

        An explicit *config_path* (``--config``) is used only if it exists;
        otherwise ``quickex.toml`` is searched for from *root* upwards.
        Malformed TOML is reported as a :class:`click.ClickException`.
        """
        if config_path:
            candidate = Path(config_path)
            config_file = candidate if candidate.is_file() else None
        else:
            config_file = find_config(root)

        if root is None:
            root = config_file.parent if config_file else Path.cwd()

        token = _config_file.set(config_file)
        try:
            return cls(root=root, config_path=config_file, **flags)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {config_file}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _config_file.reset(token)

    @property
    def dispatch_sync(self) -> bool:
        """Synchronous event delivery, from ``--sync`` or ``[events] sync``."""
        return self.sync or self.events.sync
