"""Domain value objects used by the classification and rendering pipeline."""

from __future__ import annotations

from .lines import PARSE_FAILURE, ClassifiedLine, JsonObject, RawLine
from .modes import RenderMode
from .palettes import CONSOLE_STYLE_THEMES, DEFAULT_THEME, resolve_styles
from .profiles import DEFAULT_PROFILES, GENERIC_PROFILE, FormatProfile, ProfileKind, ProfileSet
from .severity import Severity

__all__ = [
    "CONSOLE_STYLE_THEMES",
    "ClassifiedLine",
    "DEFAULT_PROFILES",
    "DEFAULT_THEME",
    "FormatProfile",
    "GENERIC_PROFILE",
    "JsonObject",
    "PARSE_FAILURE",
    "ProfileKind",
    "ProfileSet",
    "RawLine",
    "RenderMode",
    "Severity",
    "resolve_styles",
]
