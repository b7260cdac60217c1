"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate a :class:`RuntimeConfig` into the renderer, console sink, profile
set and driver callable the CLI runs. The helpers keep wiring small,
declarative, and testable.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TextIO

from logsniff.adapters import RichConsoleAdapter, RichRenderer, resolve_colorize
from logsniff.application.ports import ConsolePort
from logsniff.application.use_cases.process_lines import ProcessStats, create_process_lines
from logsniff.config import EnvSettings, load_profiles
from logsniff.domain import DEFAULT_PROFILES, DEFAULT_THEME, ProfileSet, RawLine, RenderMode


@dataclass(frozen=True)
class RuntimeConfig:
    """Resolved options for one logsniff run.

    Attributes
    ----------
    mode:
        Layout applied to every accepted line.
    color:
        ``auto``, ``always`` or ``never``.
    theme:
        Name of a palette in :data:`~logsniff.domain.CONSOLE_STYLE_THEMES`.
    highlight:
        Colour JSON keys and values individually in expanded mode.
    show_timestamp:
        Prefix summary lines with the record timestamp.
    profiles_path:
        Optional TOML file replacing the built-in profiles.
    """

    mode: RenderMode = RenderMode.EXPANDED
    color: str = "auto"
    theme: str = DEFAULT_THEME
    highlight: bool = False
    show_timestamp: bool = True
    profiles_path: Path | None = None

    def with_env(self, env: EnvSettings, *, explicit: Iterable[str] = ()) -> "RuntimeConfig":
        """Return a copy where environment overrides fill options not given explicitly."""

        given = set(explicit)
        changes: dict[str, object] = {}
        if env.color is not None and "color" not in given:
            changes["color"] = env.color
        if env.theme is not None and "theme" not in given:
            changes["theme"] = env.theme
        if env.profiles is not None and "profiles_path" not in given:
            changes["profiles_path"] = env.profiles
        if not changes:
            return self
        return replace(self, **changes)  # type: ignore[arg-type]


@dataclass(slots=True)
class Pipeline:
    """Live collaborators assembled for a run."""

    process: Callable[[Iterable[RawLine]], ProcessStats]
    renderer: RichRenderer
    console: ConsolePort
    profiles: ProfileSet
    colorize: bool


def select_profiles(config: RuntimeConfig) -> ProfileSet:
    if config.profiles_path is None:
        return DEFAULT_PROFILES
    return load_profiles(config.profiles_path)


def build_pipeline(config: RuntimeConfig, *, stream: TextIO | None = None) -> Pipeline:
    """Assemble the renderer, sink and driver described by ``config``."""

    console = RichConsoleAdapter(stream=stream)
    colorize = resolve_colorize(config.color, console.stream)
    renderer = RichRenderer(
        theme=config.theme,
        highlight=config.highlight,
        show_timestamp=config.show_timestamp,
        color_system=console.color_system() if colorize else "standard",
    )
    profiles = select_profiles(config)
    process = create_process_lines(
        renderer=renderer,
        console=console,
        mode=config.mode,
        colorize=colorize,
        profiles=profiles,
    )
    return Pipeline(process=process, renderer=renderer, console=console, profiles=profiles, colorize=colorize)


__all__ = ["Pipeline", "RuntimeConfig", "build_pipeline", "select_profiles"]
