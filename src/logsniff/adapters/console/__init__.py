"""Rich-based renderer and console sink."""

from __future__ import annotations

from .rich_console import RichConsoleAdapter, resolve_colorize
from .rich_renderer import RichRenderer

__all__ = ["RichConsoleAdapter", "RichRenderer", "resolve_colorize"]
