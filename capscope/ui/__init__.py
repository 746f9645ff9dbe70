"""Terminal output for capscope.

Tables go to stdout through ``console``; log records and errors go to stderr.
"""

from __future__ import annotations

from capscope.ui.console import console, err_console

__all__ = ["console", "err_console"]
