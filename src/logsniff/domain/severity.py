"""Canonical severity abstraction used to pick a display colour.

Purpose
-------
Offer a closed, totally ordered set of severities that every detected log
format is normalised into, together with the alias table translating the
level spellings found in the wild.

Contents
--------
* :class:`Severity` enum with alias and HTTP-status conversion helpers.
* ``_ALIAS_TABLE`` constant mapping lowercase spellings to severities.

System Role
-----------
Used by the severity extractor to normalise raw level values and by the
renderer to look up styles. Severity never filters lines.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Severity(Enum):
    """Canonical log severities ordered by conventional importance."""

    UNKNOWN = 0
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value >= other.value

    @property
    def label(self) -> str:
        """Return the upper-case label shown in summary lines."""

        return self.name

    @classmethod
    def from_alias(cls, raw: Any) -> "Severity":
        """Normalise ``raw`` through the alias table.

        Only strings are eligible; numbers, booleans and containers map to
        :attr:`UNKNOWN` so callers never have to guard the lookup.

        Examples
        --------
        >>> Severity.from_alias("WARNING")
        <Severity.WARN: 30>
        >>> Severity.from_alias(40)
        <Severity.UNKNOWN: 0>
        """
        if not isinstance(raw, str):
            return cls.UNKNOWN
        return _ALIAS_TABLE.get(raw.strip().lower(), cls.UNKNOWN)

    @classmethod
    def from_http_status(cls, status: Any) -> "Severity":
        """Map an access-log status code onto a severity.

        ``5xx`` is an error, ``4xx`` a warning, everything else (including
        missing or non-numeric statuses) informational.
        """
        code = _coerce_status(status)
        if code is None:
            return cls.INFO
        if 500 <= code <= 599:
            return cls.ERROR
        if 400 <= code <= 499:
            return cls.WARN
        return cls.INFO


def _coerce_status(status: Any) -> int | None:
    if isinstance(status, bool):
        return None
    if isinstance(status, int):
        return status
    if isinstance(status, float) and status.is_integer():
        return int(status)
    if isinstance(status, str) and status.strip().isdigit():
        return int(status.strip())
    return None


_ALIAS_TABLE: dict[str, Severity] = {
    "trace": Severity.TRACE,
    "trc": Severity.TRACE,
    "debug": Severity.DEBUG,
    "dbg": Severity.DEBUG,
    "debg": Severity.DEBUG,
    "info": Severity.INFO,
    "information": Severity.INFO,
    "informational": Severity.INFO,
    "notice": Severity.INFO,
    "warn": Severity.WARN,
    "warning": Severity.WARN,
    "wrn": Severity.WARN,
    "err": Severity.ERROR,
    "error": Severity.ERROR,
    "erro": Severity.ERROR,
    "crit": Severity.FATAL,
    "critical": Severity.FATAL,
    "fatal": Severity.FATAL,
    "panic": Severity.FATAL,
    "emerg": Severity.FATAL,
    "alert": Severity.FATAL,
}
# Lowercase level spellings accepted from structured log producers.


__all__ = ["Severity"]
