"""Console port describing the output sink contract.

Purpose
-------
Define the abstraction for adapters that write rendered blocks to a terminal
or pipe, letting the pipeline depend on a narrow protocol.

Contents
--------
* :class:`ConsolePort` - runtime-checkable protocol with a single ``write``
  method.

System Role
-----------
Clarifies the sink boundary so the Rich adapter (or a test double) can plug
in without the pipeline knowing about streams or flushing.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Write one rendered block, terminated and flushed by the adapter."""

    def write(self, block: str) -> None:
        """Emit ``block`` followed by a newline."""


__all__ = ["ConsolePort"]
