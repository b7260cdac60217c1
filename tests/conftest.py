from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from logsniff.domain import ClassifiedLine, GENERIC_PROFILE, Severity


@pytest.fixture
def record_console() -> Console:
    """Rich console writing to memory with recording enabled."""

    return Console(file=StringIO(), record=True, force_terminal=False, color_system=None, width=120)


@pytest.fixture
def make_line():
    def factory(value, *, profile=GENERIC_PROFILE, severity: Severity = Severity.UNKNOWN) -> ClassifiedLine:
        return ClassifiedLine(value=value, profile=profile, severity=severity)

    return factory


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host colour and logsniff settings from leaking into assertions."""

    for name in ("LOGSNIFF_COLOR", "LOGSNIFF_THEME", "LOGSNIFF_PROFILES", "LOGSNIFF_USE_DOTENV", "FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(name, raising=False)
