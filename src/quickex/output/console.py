"""Rich Console factory and theme for quickex output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

QX_THEME = Theme(
    {
        "qx.ok": "bold green",
        "qx.error": "bold red",
        "qx.warning": "bold yellow",
        "qx.op": "bold cyan",
        "qx.key": "dim",
        "qx.identity": "bold blue",
        "qx.digest": "magenta",
        "qx.true": "green",
        "qx.false": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=QX_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
