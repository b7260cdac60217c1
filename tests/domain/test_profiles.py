from __future__ import annotations

import pytest

from logsniff.domain.profiles import DEFAULT_PROFILES, GENERIC_PROFILE, FormatProfile, ProfileKind, ProfileSet


def test_default_profiles_end_with_generic() -> None:
    profiles = list(DEFAULT_PROFILES)
    assert profiles[-1] is GENERIC_PROFILE
    assert DEFAULT_PROFILES.generic is GENERIC_PROFILE


def test_default_profiles_are_ordered_most_specific_first() -> None:
    counts = [profile.specificity for profile in DEFAULT_PROFILES]
    assert counts == sorted(counts, reverse=True)


def test_profile_set_sorts_by_specificity_stably() -> None:
    loose = FormatProfile(name="loose", kind=ProfileKind.GENERIC, required=frozenset({"a"}))
    first = FormatProfile(name="first", kind=ProfileKind.TRACING, required=frozenset({"a", "b"}))
    second = FormatProfile(name="second", kind=ProfileKind.ACCESS, required=frozenset({"c", "d"}))

    profiles = ProfileSet([loose, first, second])

    assert profiles.names() == ["first", "second", "loose", "generic"]


def test_profile_set_rejects_duplicate_names() -> None:
    one = FormatProfile(name="dup", kind=ProfileKind.ACCESS, required=frozenset({"a"}))
    two = FormatProfile(name="dup", kind=ProfileKind.TRACING, required=frozenset({"b"}))
    with pytest.raises(ValueError, match="Duplicate profile names: dup"):
        ProfileSet([one, two])


def test_profile_set_get_unknown_name() -> None:
    with pytest.raises(KeyError, match="Unknown profile"):
        DEFAULT_PROFILES.get("syslog")


def test_matches_requires_every_key() -> None:
    profile = DEFAULT_PROFILES.get("tracing")
    assert profile.matches({"timestamp", "level", "target", "fields"})
    assert not profile.matches({"timestamp", "level"})


def test_generic_profile_matches_anything() -> None:
    assert GENERIC_PROFILE.matches(set())


def test_from_dict_builds_profile() -> None:
    profile = FormatProfile.from_dict(
        {
            "name": "caddy",
            "kind": "ACCESS",
            "required": ["request", "status", "duration"],
            "timestamp": "ts",
            "level": ["level", "severity"],
            "status": "status",
        }
    )

    assert profile.kind is ProfileKind.ACCESS
    assert profile.required == frozenset({"request", "status", "duration"})
    assert profile.timestamp_fields == ("ts",)
    assert profile.level_fields == ("level", "severity")
    assert profile.status_field == "status"


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"kind": "access"}, "missing 'name'"),
        ({"name": "x", "kind": "syslog"}, "Unknown profile kind"),
        ({"name": "x", "required": [1, 2]}, "'required' must be a string or a list of strings"),
        ({"name": "x", "status": 3}, "'status' must be a string"),
        ({"name": "  "}, "name must not be empty"),
    ],
)
def test_from_dict_rejects_invalid_definitions(payload: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        FormatProfile.from_dict(payload)


def test_profiles_are_immutable() -> None:
    with pytest.raises(AttributeError):
        GENERIC_PROFILE.name = "other"  # type: ignore[misc]
