"""Configuration helpers: ``.env`` loading, environment overrides, profile files.

Purpose
-------
Collect every way logsniff can be configured outside of CLI flags in one
module so the CLI and the runtime share a single precedence order:
explicit argument, then environment variable, then built-in default.

Contents
--------
* :data:`DOTENV_ENV_VAR`, :func:`should_use_dotenv`, :func:`enable_dotenv` -
  opt-in ``.env`` support backed by ``python-dotenv``.
* :class:`EnvSettings` / :func:`load_settings` - environment overrides.
* :func:`load_profiles` - read profile definitions from a TOML file.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv

from logsniff.domain.profiles import FormatProfile, ProfileSet

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOGSNIFF_USE_DOTENV"
COLOR_ENV_VAR = "LOGSNIFF_COLOR"
THEME_ENV_VAR = "LOGSNIFF_THEME"
PROFILES_ENV_VAR = "LOGSNIFF_PROFILES"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI choice wins; otherwise the environment toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upward from ``search_from`` (default: the working
    directory). Returns the resolved path that was loaded, or ``None``.
    Only the first successful call loads anything; later calls return the
    path already loaded.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED
    if search_from is not None:
        candidate = _find_upwards(search_from)
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    if candidate is None:
        logger.debug("no .env file found")
        return None
    resolved = candidate.resolve()
    load_dotenv(resolved, override=False)
    _DOTENV_LOADED = resolved
    logger.debug("loaded environment from %s", resolved)
    return resolved


def _find_upwards(start: Path) -> Path | None:
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


@dataclass(frozen=True)
class EnvSettings:
    """Overrides read from the environment; ``None`` means "not set"."""

    color: str | None = None
    theme: str | None = None
    profiles: Path | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> EnvSettings:
    """Read ``LOGSNIFF_*`` overrides from ``environ`` (default: ``os.environ``)."""

    env = os.environ if environ is None else environ
    color = env.get(COLOR_ENV_VAR, "").strip().lower() or None
    theme = env.get(THEME_ENV_VAR, "").strip().lower() or None
    profiles_raw = env.get(PROFILES_ENV_VAR, "").strip()
    return EnvSettings(color=color, theme=theme, profiles=Path(profiles_raw) if profiles_raw else None)


def load_profiles(path: Path) -> ProfileSet:
    """Load a :class:`ProfileSet` from the ``[[profile]]`` tables of a TOML file.

    Example file::

        [[profile]]
        name = "nginx_combined"
        kind = "access"
        required = ["remote_addr", "request", "status"]
        timestamp = ["time_local"]
        status = "status"

    The generic profile is always appended; profile files replace the
    built-in set rather than extending it.
    """
    try:
        with path.open("rb") as handle:
            document: dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ValueError(f"cannot read profile file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid profile file {path}: {exc}") from exc

    entries = document.get("profile", [])
    if not isinstance(entries, list) or not all(isinstance(entry, dict) for entry in entries):
        raise ValueError(f"invalid profile file {path}: 'profile' must be an array of tables")
    profiles = [FormatProfile.from_dict(entry) for entry in entries]
    logger.debug("loaded %d profile(s) from %s", len(profiles), path)
    return ProfileSet(profiles)


__all__ = [
    "COLOR_ENV_VAR",
    "DOTENV_ENV_VAR",
    "EnvSettings",
    "PROFILES_ENV_VAR",
    "THEME_ENV_VAR",
    "enable_dotenv",
    "load_profiles",
    "load_settings",
    "should_use_dotenv",
]
