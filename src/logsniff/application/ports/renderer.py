"""Renderer port turning classified lines into display text."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from logsniff.domain.lines import ClassifiedLine
from logsniff.domain.modes import RenderMode


@runtime_checkable
class RendererPort(Protocol):
    """Render a classified line in the requested mode."""

    def render(self, line: ClassifiedLine, mode: RenderMode, *, colorize: bool) -> str:
        """Return non-empty text without a trailing newline."""


__all__ = ["RendererPort"]
