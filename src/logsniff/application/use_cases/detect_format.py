"""Classify a parsed JSON value against the ordered profile set."""

from __future__ import annotations

from typing import Any

from logsniff.domain.profiles import DEFAULT_PROFILES, FormatProfile, ProfileSet


def detect(value: Any, profiles: ProfileSet = DEFAULT_PROFILES) -> FormatProfile:
    """Return the first profile whose required keys all appear in ``value``.

    Only JSON objects can match a named profile; arrays, scalars and ``null``
    resolve to the generic profile, as does any object no profile claims.

    Examples
    --------
    >>> detect({"timestamp": "t", "level": "INFO", "target": "app", "fields": {}}).name
    'tracing'
    >>> detect([1, 2]).name
    'generic'
    """
    if not isinstance(value, dict):
        return profiles.generic
    for profile in profiles:
        if profile.matches(value.keys()):
            return profile
    return profiles.generic


__all__ = ["detect"]
