"""Built-in Rich style palettes keyed by severity name."""

from __future__ import annotations

from collections.abc import Mapping

from .severity import Severity

CONSOLE_STYLE_THEMES: dict[str, dict[str, str]] = {
    "classic": {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "green",
        "WARN": "yellow",
        "ERROR": "red",
        "FATAL": "bold red",
        "UNKNOWN": "",
        "STATUS_3XX": "cyan",
    },
    "dark": {
        "TRACE": "grey35",
        "DEBUG": "grey42",
        "INFO": "bright_white",
        "WARN": "bold gold3",
        "ERROR": "bold red3",
        "FATAL": "bold white on red3",
        "UNKNOWN": "",
        "STATUS_3XX": "steel_blue1",
    },
    "neon": {
        "TRACE": "#5f87af",
        "DEBUG": "#00ffd5",
        "INFO": "#39ff14",
        "WARN": "#fff700",
        "ERROR": "#ff073a",
        "FATAL": "bold #ff00ff on black",
        "UNKNOWN": "",
        "STATUS_3XX": "#00bfff",
    },
    "pastel": {
        "TRACE": "grey70",
        "DEBUG": "aquamarine1",
        "INFO": "light_sky_blue1",
        "WARN": "khaki1",
        "ERROR": "light_salmon1",
        "FATAL": "bold plum1",
        "UNKNOWN": "",
        "STATUS_3XX": "light_cyan1",
    },
}
"""Console palettes selectable through ``--theme`` or ``LOGSNIFF_THEME``.

Keys are severity names plus ``STATUS_3XX``, the label style for access
records answered with a redirect.
"""

DEFAULT_THEME = "classic"
STATUS_3XX = "STATUS_3XX"


def _palette(theme: str | None) -> dict[str, str]:
    name = (theme or DEFAULT_THEME).strip().lower()
    try:
        return CONSOLE_STYLE_THEMES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown theme: {theme!r}. Available: {', '.join(sorted(CONSOLE_STYLE_THEMES))}") from exc


def resolve_styles(theme: str | None = None, overrides: Mapping[Severity | str, str] | None = None) -> dict[Severity, str]:
    """Return a complete severity-to-style table for ``theme``.

    ``overrides`` may be keyed by :class:`Severity` or by its name in any case.

    Examples
    --------
    >>> resolve_styles()[Severity.ERROR]
    'red'
    >>> resolve_styles("classic", {"error": "magenta"})[Severity.ERROR]
    'magenta'
    """
    palette = _palette(theme)
    styles = {severity: palette.get(severity.name, "") for severity in Severity}
    for key, value in (overrides or {}).items():
        if isinstance(key, Severity):
            styles[key] = value
            continue
        try:
            styles[Severity[key.strip().upper()]] = value
        except KeyError as exc:
            raise ValueError(f"Unknown severity in style override: {key!r}") from exc
    return styles


def status_3xx_style(theme: str | None = None) -> str:
    """Return the label style for redirect statuses, falling back to the INFO style."""

    palette = _palette(theme)
    return palette.get(STATUS_3XX, palette.get(Severity.INFO.name, ""))


__all__ = ["CONSOLE_STYLE_THEMES", "DEFAULT_THEME", "STATUS_3XX", "resolve_styles", "status_3xx_style"]
