"""Rich Console factory and theme for warungctl output.

Consoles render to a StringIO buffer so every renderer keeps the
``render_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WARUNG_THEME = Theme(
    {
        "warung.ok": "bold green",
        "warung.error": "bold red",
        "warung.warning": "bold yellow",
        "warung.op": "bold cyan",
        "warung.key": "dim",
        "warung.path": "dim",
        "warung.money": "bold magenta",
        "warung.label": "bold",
        "warung.url": "underline blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=WARUNG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
