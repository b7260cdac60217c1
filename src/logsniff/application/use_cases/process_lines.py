"""Use case driving raw lines through parse, detect, extract and render.

Purpose
-------
Tie the four per-line stages together and hand every rendered block to the
console port, one line in flight at a time.

Contents
--------
* :func:`classify` - parse, detect and extract for a single raw line.
* :class:`ProcessStats` - counters returned at end of stream.
* :func:`create_process_lines` factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator invoked by :mod:`logsniff.runtime`. Non-JSON
lines are dropped silently (DEBUG only); I/O failures stop the run as a single
:class:`~logsniff.application.errors.StreamError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from logsniff.application.errors import StreamError
from logsniff.application.ports import ConsolePort, RendererPort
from logsniff.domain import PARSE_FAILURE, ClassifiedLine, ProfileSet, RawLine, RenderMode
from logsniff.domain.profiles import DEFAULT_PROFILES

from .detect_format import detect
from .extract_severity import extract
from .parse_line import parse_line

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProcessStats:
    """Per-run counters; ``rendered + dropped == seen`` always holds."""

    seen: int = 0
    rendered: int = 0
    dropped: int = 0


def classify(raw: RawLine, profiles: ProfileSet = DEFAULT_PROFILES) -> ClassifiedLine | None:
    """Return the classified form of ``raw`` or ``None`` when it is not JSON."""

    value = parse_line(raw.text)
    if value is PARSE_FAILURE:
        return None
    profile = detect(value, profiles)
    return ClassifiedLine(value=value, profile=profile, severity=extract(value, profile), raw=raw)


def create_process_lines(
    *,
    renderer: RendererPort,
    console: ConsolePort,
    mode: RenderMode = RenderMode.EXPANDED,
    colorize: bool = False,
    profiles: ProfileSet = DEFAULT_PROFILES,
) -> Callable[[Iterable[RawLine]], ProcessStats]:
    """Build the driver capturing the current renderer, sink and settings.

    Parameters
    ----------
    renderer:
        Adapter implementing :class:`RendererPort`.
    console:
        Sink implementing :class:`ConsolePort`.
    mode:
        Layout applied to every accepted line.
    colorize:
        Colour decision already resolved by the caller.
    profiles:
        Ordered profile set consulted by the detector.
    """

    def process(lines: Iterable[RawLine]) -> ProcessStats:
        stats = ProcessStats()
        origin = "<input>"
        iterator = iter(lines)
        while True:
            try:
                raw = next(iterator)
            except StopIteration:
                break
            except OSError as exc:
                raise StreamError("read", origin, stats.seen, exc) from exc
            stats.seen += 1
            origin = raw.origin
            classified = classify(raw, profiles)
            if classified is None:
                stats.dropped += 1
                logger.debug("dropping non-JSON line %s:%d", raw.origin, raw.number)
                continue
            block = renderer.render(classified, mode, colorize=colorize)
            try:
                console.write(block)
            except OSError as exc:
                raise StreamError("write output for", raw.origin, raw.number, exc) from exc
            stats.rendered += 1
        logger.debug("end of stream: %d rendered, %d dropped", stats.rendered, stats.dropped)
        return stats

    return process


__all__ = ["ProcessStats", "classify", "create_process_lines"]
