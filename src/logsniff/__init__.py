"""Public package surface of logsniff.

The per-line stages (:func:`parse_line`, :func:`detect`, :func:`extract`) and
:class:`RichRenderer` are importable directly so host code can classify and
render single records; :func:`run` processes whole streams.
"""

from __future__ import annotations

from .adapters import RichConsoleAdapter, RichRenderer, read_paths, resolve_colorize
from .application.errors import StreamError
from .application.use_cases import ProcessStats, classify, create_process_lines, detect, extract, parse_line
from .domain import (
    DEFAULT_PROFILES,
    GENERIC_PROFILE,
    PARSE_FAILURE,
    ClassifiedLine,
    FormatProfile,
    ProfileKind,
    ProfileSet,
    RawLine,
    RenderMode,
    Severity,
)
from .runtime import RuntimeConfig, build_pipeline, run

__all__ = [
    "ClassifiedLine",
    "DEFAULT_PROFILES",
    "FormatProfile",
    "GENERIC_PROFILE",
    "PARSE_FAILURE",
    "ProcessStats",
    "ProfileKind",
    "ProfileSet",
    "RawLine",
    "RenderMode",
    "RichConsoleAdapter",
    "RichRenderer",
    "RuntimeConfig",
    "Severity",
    "StreamError",
    "build_pipeline",
    "classify",
    "create_process_lines",
    "detect",
    "extract",
    "parse_line",
    "read_paths",
    "resolve_colorize",
    "run",
]
