"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`. Unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from quickex.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from quickex.services.result import ServiceResult

_IDENTITY_KEYS = frozenset(
    {"owner", "administrator", "old_admin", "new_admin", "caller", "from", "to"}
)

# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "commitment" in data and result.op == "create_amount_commitment":
        return str(data["commitment"])
    if "valid" in data:
        return "true" if data["valid"] else "false"
    if result.op == "get_privacy":
        return "true" if data["enabled"] else "false"
    if result.op == "create_escrow":
        return str(data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="qx.ok"), Text(f"  {result.op}", style="qx.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="qx.key")
    if key in _IDENTITY_KEYS:
        v = Text(str(value), style="qx.identity")
    elif key == "commitment":
        v = Text(str(value), style="qx.digest")
    elif isinstance(value, bool):
        v = Text(str(value).lower(), style="qx.true" if value else "qx.false")
    elif value is None:
        v = Text("none", style="dim")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    telemetry = result.meta.get("telemetry")
    if telemetry:
        console.print(
            Text(f"  {telemetry['name']}: {telemetry['duration_ms']}ms", style="dim")
        )


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    code = error.code if error else "UNKNOWN"
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="qx.error"),
        Text(f"  {result.op}", style="qx.op"),
        Text(f"  [{code}] {message}"),
        sep="",
    )
    if verbose and error and error.detail:
        for key, value in error.detail.items():
            _field(console, key, value)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    for warning in result.warnings:
        console.print(Text(f"  ! {warning}", style="qx.warning"))


def _render_verify(result: ServiceResult, console: Console) -> None:
    valid = bool(result.data.get("valid"))
    label = Text("VALID", style="qx.ok") if valid else Text("MISMATCH", style="qx.error")
    console.print(label, Text("  verify_amount_commitment", style="qx.op"), sep="")
    _field(console, "owner", result.data.get("owner"))
    _field(console, "commitment", result.data.get("commitment"))


def _render_events(result: ServiceResult, console: Console) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    _status_line(console, result)
    if not items:
        console.print(Text("  no events", style="dim"))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Event", style="qx.op")
    table.add_column("Topics", style="qx.identity")
    table.add_column("Data")
    table.add_column("Timestamp", justify="right")
    table.add_column("Status")
    for item in items:
        data = {k: v for k, v in item.get("data", {}).items() if k != "timestamp"}
        table.add_row(
            str(item.get("id", "")),
            str(item.get("name", "")),
            ", ".join(item.get("topics", [])),
            ", ".join(f"{k}={v}" for k, v in data.items()),
            str(item.get("timestamp", "")),
            str(item.get("status", "")),
        )
    console.print(table)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "verify_amount_commitment": _render_verify,
    "list_events": _render_events,
}
