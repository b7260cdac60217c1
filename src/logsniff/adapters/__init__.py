"""Adapter implementations for the logsniff ports."""

from __future__ import annotations

from .console.rich_console import COLOR_POLICIES, RichConsoleAdapter, resolve_colorize
from .console.rich_renderer import RichRenderer
from .sources import iter_raw_lines, read_paths

__all__ = [
    "COLOR_POLICIES",
    "RichConsoleAdapter",
    "RichRenderer",
    "iter_raw_lines",
    "read_paths",
    "resolve_colorize",
]
