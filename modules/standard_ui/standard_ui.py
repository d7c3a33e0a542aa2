"""
standard_ui.py

Console helpers shared by the clipboard tools.
Built on Rich, it provides:
  - Standard logging functions: log_info, log_warning.
  - A verbosity switch (set_verbose / is_verbose); log_info is silent unless verbose.
  - print_table for the optional run statistics.

Everything here writes to stderr so stdout stays reserved for the status line
a script prints for its caller.
"""

from __future__ import annotations

import os
from typing import Iterable, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------- Console + Theme ----------

_THEME = Theme(
    {
        "ui.info": "cyan",
        "ui.warn": "yellow bold",
    }
)

console = Console(theme=_THEME, stderr=True, highlight=False)

# ---------- Global State ----------

VERBOSE = False


def _ascii_ui() -> bool:
    return os.environ.get("FORCE_ASCII_UI") == "1"


def set_verbose(verbose: bool) -> None:
    """Set global verbosity. If False, log_info is suppressed."""
    global VERBOSE
    VERBOSE = bool(verbose)


def is_verbose() -> bool:
    return VERBOSE


# ---------- Basic Logging ----------


def _emit(style: str, icon: str, fallback: str, message: str) -> None:
    # Text() keeps paths like "[abc].txt" from being read as markup.
    prefix = fallback if _ascii_ui() else icon
    console.print(Text(f"{prefix} {message}", style=style))


def log_info(message: str) -> None:
    """Info is suppressed unless VERBOSE is True."""
    if VERBOSE:
        _emit("ui.info", "ℹ ", "[INFO]", message)


def log_warning(message: str) -> None:
    _emit("ui.warn", "⚠️ ", "[WARNING]", message)


# ---------- Tables ----------


def print_table(columns: List[str], rows: List[Iterable], title: Optional[str] = None) -> None:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for c in columns:
        table.add_column(str(c), overflow="fold")
    for r in rows:
        table.add_row(*[str(x) for x in r])
    console.print(table)
