"""Format profiles describing how known log sources shape their JSON.

Purpose
-------
Capture the field-shape rules used to recognise a log source (web-server
access log, tracing event, anything else) and the fields carrying its
timestamp, level and message.

Contents
--------
* :class:`ProfileKind` - closed set of rendering families.
* :class:`FormatProfile` - immutable rule set for one source format.
* :class:`ProfileSet` - ordered, most-specific-first collection ending in the
  generic profile.
* :data:`GENERIC_PROFILE` / :data:`DEFAULT_PROFILES` - built-in definitions.

System Role
-----------
Pure data consulted read-only by the format detector, the severity extractor
and the renderer. Profile sets are built once at start-up.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ProfileKind(Enum):
    """Rendering family a profile belongs to."""

    ACCESS = "access"
    TRACING = "tracing"
    GENERIC = "generic"

    @classmethod
    def from_name(cls, name: str) -> "ProfileKind":
        normalized = name.strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown profile kind: {name!r}") from exc


@dataclass(slots=True, frozen=True)
class FormatProfile:
    """Immutable recognition rule for a structured log format.

    Attributes
    ----------
    name:
        Stable identifier used in diagnostics and tests.
    kind:
        :class:`ProfileKind` selecting the severity and summary rules.
    required:
        Keys that must all be present for a JSON object to match.
    timestamp_fields / level_fields / message_fields:
        Candidate keys (dotted paths for nested objects) tried in order.
    status_field:
        Key carrying the HTTP status for access profiles.
    """

    name: str
    kind: ProfileKind
    required: frozenset[str] = field(default_factory=frozenset)
    timestamp_fields: tuple[str, ...] = ()
    level_fields: tuple[str, ...] = ("level",)
    message_fields: tuple[str, ...] = ()
    status_field: str | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("profile name must not be empty")
        object.__setattr__(self, "required", frozenset(self.required))
        object.__setattr__(self, "timestamp_fields", tuple(self.timestamp_fields))
        object.__setattr__(self, "level_fields", tuple(self.level_fields))
        object.__setattr__(self, "message_fields", tuple(self.message_fields))

    @property
    def specificity(self) -> int:
        """Number of required keys; larger means more specific."""

        return len(self.required)

    def matches(self, keys: Iterable[str]) -> bool:
        """Return ``True`` when every required key is present in ``keys``."""

        return self.required.issubset(keys)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FormatProfile":
        """Build a profile from a plain mapping (e.g. a TOML table).

        Examples
        --------
        >>> profile = FormatProfile.from_dict({"name": "svc", "kind": "tracing", "required": ["ts", "lvl"]})
        >>> sorted(profile.required)
        ['lvl', 'ts']
        """
        try:
            name = payload["name"]
        except KeyError as exc:
            raise ValueError("profile definition is missing 'name'") from exc
        kind = ProfileKind.from_name(str(payload.get("kind", ProfileKind.GENERIC.value)))
        status = payload.get("status")
        if status is not None and not isinstance(status, str):
            raise ValueError("profile field 'status' must be a string")
        return cls(
            name=str(name),
            kind=kind,
            required=frozenset(_as_strings(payload.get("required", ()), "required")),
            timestamp_fields=_as_strings(payload.get("timestamp", ()), "timestamp"),
            level_fields=_as_strings(payload.get("level", ("level",)), "level"),
            message_fields=_as_strings(payload.get("message", ()), "message"),
            status_field=status,
        )


def _as_strings(value: Any, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ValueError(f"profile field {key!r} must be a string or a list of strings")


GENERIC_PROFILE = FormatProfile(
    name="generic",
    kind=ProfileKind.GENERIC,
    timestamp_fields=("timestamp", "ts", "time"),
    level_fields=("level", "severity", "lvl"),
    message_fields=("msg", "message"),
)


class ProfileSet:
    """Ordered, read-only collection of profiles evaluated top to bottom.

    Profiles are kept most specific first (stable for equal specificity) and
    the generic profile always closes the list, so detection can stop at the
    first match.
    """

    __slots__ = ("_profiles",)

    def __init__(self, profiles: Iterable[FormatProfile], *, generic: FormatProfile = GENERIC_PROFILE) -> None:
        named = [profile for profile in profiles if profile.name != generic.name]
        names = [profile.name for profile in named]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate profile names: {', '.join(duplicates)}")
        named.sort(key=lambda profile: -profile.specificity)
        self._profiles: tuple[FormatProfile, ...] = (*named, generic)

    def __iter__(self) -> Iterator[FormatProfile]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    @property
    def generic(self) -> FormatProfile:
        return self._profiles[-1]

    def names(self) -> list[str]:
        return [profile.name for profile in self._profiles]

    def get(self, name: str) -> FormatProfile:
        for profile in self._profiles:
            if profile.name == name:
                return profile
        raise KeyError(f"Unknown profile: {name!r}. Available: {self.names()}")


DEFAULT_PROFILES = ProfileSet(
    [
        FormatProfile(
            name="nginx_split",
            kind=ProfileKind.ACCESS,
            required=frozenset({"method", "path", "status"}),
            timestamp_fields=("ts", "time_local", "time_iso8601"),
            message_fields=("path",),
            status_field="status",
        ),
        FormatProfile(
            name="nginx_combined",
            kind=ProfileKind.ACCESS,
            required=frozenset({"remote_addr", "request", "status"}),
            timestamp_fields=("time_local", "time_iso8601", "ts"),
            message_fields=("request",),
            status_field="status",
        ),
        FormatProfile(
            name="tracing",
            kind=ProfileKind.TRACING,
            required=frozenset({"timestamp", "level", "target"}),
            timestamp_fields=("timestamp",),
            message_fields=("fields.message", "message"),
        ),
    ]
)
# Built-in profiles for nginx JSON access logs and Rust ``tracing`` events.


__all__ = [
    "DEFAULT_PROFILES",
    "FormatProfile",
    "GENERIC_PROFILE",
    "ProfileKind",
    "ProfileSet",
]
