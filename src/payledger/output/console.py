"""Rich Console factory and theme for payledger output.

Creates Console instances that render to a StringIO buffer, so renderers
return plain strings and the caller decides where to echo them.  In
non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PAYLEDGER_THEME = Theme(
    {
        "pay.ok": "bold green",
        "pay.error": "bold red",
        "pay.op": "bold cyan",
        "pay.header": "bold",
        "pay.key": "dim",
        "pay.id": "bold blue",
        "pay.amount": "green",
        "pay.total": "bold green",
        "pay.kind.salaried": "cyan",
        "pay.kind.hourly": "yellow",
        "pay.kind.contractual": "magenta",
    }
)

CONSOLE_WIDTH = 120

_KIND_STYLES: dict[str, str] = {
    "salaried": "pay.kind.salaried",
    "hourly": "pay.kind.hourly",
    "contractual": "pay.kind.contractual",
}


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer at a fixed width."""
    return Console(
        file=StringIO(),
        theme=PAYLEDGER_THEME,
        highlight=False,
        width=CONSOLE_WIDTH,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a pay-model kind."""
    return _KIND_STYLES.get(kind, "")
