"""Protocols separating the pipeline from its adapters."""

from __future__ import annotations

from .console import ConsolePort
from .renderer import RendererPort

__all__ = ["ConsolePort", "RendererPort"]
