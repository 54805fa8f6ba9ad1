"""structlog setup for the quickex CLI.

Records from structlog loggers and from plain ``logging.getLogger``
calls share one stderr handler and one processor chain. Every line is
tagged with the ledger it was written for (``ledger`` and ``network``
from ``[ledger]``), so logs from several deployments can share a sink.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

    from quickex.config.models import LedgerConfig


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _render_chain(log_json: bool) -> list[Processor]:
    if log_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    ledger: LedgerConfig | None = None,
) -> None:
    """Route all logging to stderr through structlog.

    Args:
        verbose: ``quickex.*`` loggers emit DEBUG; otherwise WARNING and up.
        log_json: One JSON object per line instead of console output.
        ledger: Deployment identity bound to every line.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_render_chain(log_json),
            ],
        )
    )
    logging.basicConfig(handlers=[handler], level=logging.WARNING, force=True)
    logging.getLogger("quickex").setLevel(logging.DEBUG if verbose else logging.WARNING)

    structlog.contextvars.clear_contextvars()
    if ledger is not None:
        structlog.contextvars.bind_contextvars(ledger=ledger.name, network=ledger.network)
