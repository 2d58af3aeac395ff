"""Rich Console factory and theme for roadctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROAD_THEME = Theme(
    {
        "road.ok": "bold green",
        "road.error": "bold red",
        "road.warning": "bold yellow",
        "road.op": "bold cyan",
        "road.key": "dim",
        "road.index": "bold blue",
        "road.city": "bold",
        "road.budget": "magenta",
        "road.connected": "green",
        "road.empty": "dim",
        "road.title": "bold italic",
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
        theme=ROAD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError(f"Console writes to {type(buffer).__name__}, not a StringIO buffer")
    return buffer.getvalue()
