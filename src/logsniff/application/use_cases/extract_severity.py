"""Resolve the canonical severity of a classified JSON value."""

from __future__ import annotations

from typing import Any

from logsniff.domain.fields import MISSING, first_present, lookup
from logsniff.domain.profiles import FormatProfile, ProfileKind
from logsniff.domain.severity import Severity


def extract(value: Any, profile: FormatProfile) -> Severity:
    """Return the :class:`Severity` carried by ``value`` under ``profile``.

    The first of the profile's level fields present in the object is
    normalised through the alias table. Access-log profiles fall back to the
    HTTP status when no explicit level is recognised. Every other miss yields
    :attr:`Severity.UNKNOWN`; this function never raises.

    Examples
    --------
    >>> from logsniff.domain.profiles import GENERIC_PROFILE
    >>> extract({"severity": "Warning"}, GENERIC_PROFILE)
    <Severity.WARN: 30>
    >>> extract({"msg": "no level"}, GENERIC_PROFILE)
    <Severity.UNKNOWN: 0>
    """
    if not isinstance(value, dict):
        return Severity.UNKNOWN
    raw = first_present(value, profile.level_fields)
    severity = Severity.UNKNOWN if raw is MISSING else Severity.from_alias(raw)
    if severity is Severity.UNKNOWN and profile.kind is ProfileKind.ACCESS:
        status = lookup(value, profile.status_field) if profile.status_field else MISSING
        return Severity.from_http_status(None if status is MISSING else status)
    return severity


__all__ = ["extract"]
