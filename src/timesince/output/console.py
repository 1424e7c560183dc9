"""Rich consoles that render into memory, plus the timesince colour theme.

Renderers return strings, so every Console writes to a StringIO.  Rich
drops colour codes on its own when stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TIMESINCE_THEME = Theme(
    {
        "ts.ok": "bold green",
        "ts.error": "bold red",
        "ts.op": "bold cyan",
        "ts.key": "dim",
        "ts.value": "bold",
        "ts.past": "magenta",
        "ts.future": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TIMESINCE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_direction(is_future: bool) -> str:
    """Return the Rich style name for a past or future duration."""
    return "ts.future" if is_future else "ts.past"
