"""Per-line pipeline stages and the driver combining them."""

from __future__ import annotations

from .detect_format import detect
from .extract_severity import extract
from .parse_line import parse_line
from .process_lines import ProcessStats, classify, create_process_lines

__all__ = ["ProcessStats", "classify", "create_process_lines", "detect", "extract", "parse_line"]
