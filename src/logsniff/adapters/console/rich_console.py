"""Rich-backed console sink implementing :class:`ConsolePort`.

Purpose
-------
Write rendered blocks to standard output (or any text stream), one block per
accepted line, flushing after each so ``tail -f | logsniff`` stays live.

Contents
--------
* :data:`COLOR_POLICIES` - accepted ``--color`` values.
* :func:`resolve_colorize` - turn a colour policy into a yes/no decision.
* :class:`RichConsoleAdapter` - sink constructed by :func:`logsniff.runtime.build_pipeline`.

System Role
-----------
Primary human-facing sink and the only place that inspects the terminal.
Blocks arrive fully rendered; the adapter writes them verbatim.
"""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console

from logsniff.application.ports.console import ConsolePort

COLOR_POLICIES: tuple[str, ...] = ("auto", "always", "never")


def resolve_colorize(policy: str, stream: TextIO | None = None) -> bool:
    """Return whether ANSI styling should be applied for ``policy``.

    ``auto`` defers to Rich's terminal detection for ``stream`` (which honours
    ``FORCE_COLOR``, ``NO_COLOR`` and ``TERM=dumb``).

    Examples
    --------
    >>> resolve_colorize("always")
    True
    >>> import io
    >>> resolve_colorize("auto", io.StringIO())
    False
    """
    normalized = policy.strip().lower()
    if normalized == "always":
        return True
    if normalized == "never":
        return False
    if normalized != "auto":
        raise ValueError(f"Unknown color policy: {policy!r}. Expected one of {', '.join(COLOR_POLICIES)}")
    console = Console(file=stream if stream is not None else sys.stdout)
    return console.is_terminal and console.color_system is not None and not console.no_color


class RichConsoleAdapter(ConsolePort):
    """Write rendered blocks to a text stream with per-block flushing."""

    def __init__(self, *, stream: TextIO | None = None, console: Console | None = None) -> None:
        """Bind the adapter to ``stream`` (default: current ``sys.stdout``) or a Rich ``console``."""
        self._console = console
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        if self._console is not None:
            return self._console.file
        return self._stream if self._stream is not None else sys.stdout

    def color_system(self) -> str:
        """Return the richest colour system the target supports, ``standard`` as floor."""

        console = self._console or Console(file=self.stream, force_terminal=True)
        return console.color_system or "standard"

    def write(self, block: str) -> None:
        """Write ``block`` and a newline, then flush.

        Examples
        --------
        >>> import io
        >>> buffer = io.StringIO()
        >>> RichConsoleAdapter(stream=buffer).write('{"a":1}')
        >>> buffer.getvalue()
        '{"a":1}\\n'
        """
        stream = self.stream
        stream.write(block)
        stream.write("\n")
        stream.flush()


__all__ = ["COLOR_POLICIES", "RichConsoleAdapter", "resolve_colorize"]
