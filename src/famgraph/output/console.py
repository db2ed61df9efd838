"""Rich Console factory and theme for famgraph output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FAM_THEME = Theme(
    {
        "fam.ok": "bold green",
        "fam.error": "bold red",
        "fam.warning": "bold yellow",
        "fam.op": "bold cyan",
        "fam.key": "dim",
        "fam.id": "bold blue",
        "fam.path": "dim",
        "fam.name": "bold",
    }
)


def create_console() -> Console:
    """Create a 120-column Console that renders to a StringIO buffer."""
    return Console(file=StringIO(), theme=FAM_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
