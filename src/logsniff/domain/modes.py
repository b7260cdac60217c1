"""Rendering mode enumeration.

Purpose
-------
Name the layouts the renderer can produce so the CLI, configuration and
adapters agree on a single vocabulary.

Contents
--------
* :class:`RenderMode` enumeration with a parsing helper.
"""

from __future__ import annotations

from enum import Enum


class RenderMode(Enum):
    """Define how an accepted record is laid out.

    ``EXPANDED`` indents the JSON over several lines, ``COMPACT`` minifies it
    onto a single line, ``SUMMARY`` writes one human-oriented line using the
    detected profile.

    Examples
    --------
    >>> RenderMode.COMPACT.value
    'compact'
    """

    EXPANDED = "expanded"
    COMPACT = "compact"
    SUMMARY = "summary"

    @classmethod
    def from_name(cls, name: str) -> "RenderMode":
        """Return the matching enum member for a case-insensitive name.

        Examples
        --------
        >>> RenderMode.from_name(' Summary ') is RenderMode.SUMMARY
        True
        >>> RenderMode.from_name('yaml')
        Traceback (most recent call last):
        ...
        ValueError: Unsupported render mode: 'yaml'
        """

        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported render mode: {name!r}")


__all__ = ["RenderMode"]
