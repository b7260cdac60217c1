"""Value objects describing a line on its way through the pipeline.

Purpose
-------
Give each processing stage an immutable, explicit input: the raw text with
its origin, the parse outcome, and the classified, severity-tagged record.

Contents
--------
* :data:`PARSE_FAILURE` - sentinel distinguishing "not JSON" from JSON ``null``.
* :class:`JsonObject` - decoded object keeping duplicate members in order.
* :class:`RawLine` - text plus 1-based position for diagnostics.
* :class:`ClassifiedLine` - parsed value bound to its profile and severity.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Final

from .profiles import FormatProfile
from .severity import Severity


class _ParseFailure:
    """Marker returned when a line is not a single well-formed JSON value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "PARSE_FAILURE"

    def __bool__(self) -> bool:
        return False


PARSE_FAILURE: Final = _ParseFailure()


class JsonObject(dict):
    """Decoded JSON object that remembers every member in source order.

    Lookups behave like a plain ``dict`` (the last duplicate wins), while
    :meth:`items` replays the members exactly as written, duplicates included.
    :mod:`json` serializes dict subclasses through ``items()``, so rendering
    a ``JsonObject`` never reorders or drops fields. Instances are treated as
    read-only once decoded.

    Examples
    --------
    >>> obj = JsonObject([("a", 1), ("b", 2), ("a", 3)])
    >>> obj["a"], len(obj)
    (3, 2)
    >>> obj.items()
    [('a', 1), ('b', 2), ('a', 3)]
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, Any]] = ()) -> None:
        members = list(pairs)
        super().__init__(members)
        self._pairs = members

    def items(self) -> list[tuple[str, Any]]:  # type: ignore[override]
        return list(self._pairs)

    @property
    def has_duplicates(self) -> bool:
        return len(self._pairs) != len(self)


@dataclass(slots=True, frozen=True)
class RawLine:
    """Immutable input line.

    ``number`` is 1-based within ``origin`` and only ever used for
    diagnostics.
    """

    text: str
    number: int
    origin: str = "<stdin>"

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError("line number must be 1-based")


@dataclass(slots=True, frozen=True)
class ClassifiedLine:
    """A parsed JSON value with its matched profile and severity."""

    value: Any
    profile: FormatProfile
    severity: Severity
    raw: RawLine | None = None


__all__ = ["ClassifiedLine", "JsonObject", "PARSE_FAILURE", "RawLine"]
