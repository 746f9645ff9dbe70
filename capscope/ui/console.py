"""Shared Rich consoles and style definitions."""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

CAPSCOPE_THEME = Theme(
    {
        "info": "cyan",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "heading": "bold cyan",
        "muted": "dim",
        "severity.low": "green",
        "severity.medium": "yellow",
        "severity.high": "red",
        "highlight.blue": "blue",
        "highlight.green": "green",
        "highlight.yellow": "yellow",
        "health.good": "bold green",
        "health.warning": "bold yellow",
        "health.error": "bold red",
        "scope.user": "magenta",
        "scope.project": "cyan",
        "scope.local": "white",
    }
)

console = Console(theme=CAPSCOPE_THEME)
err_console = Console(stderr=True, theme=CAPSCOPE_THEME)
