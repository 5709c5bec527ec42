"""Rich Console factory and theme for octns output.

Consoles render to a StringIO buffer so renderers keep a
``render(...) -> str`` contract. In non-TTY environments (tests, pipes)
Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

OCTNS_THEME = Theme(
    {
        "octns.ok": "bold green",
        "octns.error": "bold red",
        "octns.warning": "bold yellow",
        "octns.op": "bold cyan",
        "octns.key": "dim",
        "octns.domain": "bold magenta",
        "octns.address": "bold blue",
        "octns.hash": "dim",
    }
)

_KEY_STYLES: dict[str, str] = {
    "domain": "octns.domain",
    "address": "octns.address",
    "tx_hash": "octns.hash",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=OCTNS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_key(key: str) -> str:
    """Return the Rich style name for a payload key."""
    return _KEY_STYLES.get(key, "")
