"""Line sources reading NDJSON from files or standard input.

Sources are lazy generators: exactly one line is held in memory at a time and
files are closed as soon as they are exhausted. Failures to open or read are
raised as :class:`~logsniff.application.errors.StreamError` naming the source.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

import click

from logsniff.application.errors import StreamError
from logsniff.domain.lines import RawLine

STDIN_MARKER = "-"
STDIN_ORIGIN = "<stdin>"


def iter_raw_lines(stream: TextIO, origin: str = STDIN_ORIGIN) -> Iterator[RawLine]:
    """Yield :class:`RawLine` objects from ``stream`` with 1-based numbering."""

    number = 0
    while True:
        try:
            text = stream.readline()
        except OSError as exc:
            raise StreamError("read", origin, number, exc) from exc
        if not text:
            return
        number += 1
        yield RawLine(text=text.rstrip("\r\n"), number=number, origin=origin)


def _stdin() -> TextIO:
    return click.open_file(STDIN_MARKER, encoding="utf-8", errors="replace")


def read_paths(paths: Iterable[str | Path] = ()) -> Iterator[RawLine]:
    """Yield lines from each path in order; standard input when ``paths`` is empty.

    ``-`` stands for standard input. Undecodable bytes are replaced rather than
    aborting the stream, since such lines can never parse as JSON anyway.
    """
    selected = list(paths)
    if not selected:
        selected = [STDIN_MARKER]
    for entry in selected:
        if str(entry) == STDIN_MARKER:
            yield from iter_raw_lines(_stdin(), STDIN_ORIGIN)
            continue
        origin = str(entry)
        try:
            handle = open(entry, encoding="utf-8", errors="replace", newline="")
        except OSError as exc:
            raise StreamError("open", origin, 0, exc) from exc
        with handle:
            yield from iter_raw_lines(handle, origin)


__all__ = ["STDIN_MARKER", "STDIN_ORIGIN", "iter_raw_lines", "read_paths"]
