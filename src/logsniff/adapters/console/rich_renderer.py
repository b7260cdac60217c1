"""Rich-powered renderer implementing :class:`RendererPort`.

Purpose
-------
Turn classified, severity-tagged records into expanded, compact or summary
text, styling them with the severity palette through Rich.

Contents
--------
* :class:`RichRenderer` - renderer constructed by :func:`logsniff.runtime.build_pipeline`.

System Role
-----------
Holds the severity-to-style table. The colour decision itself arrives as the
``colorize`` flag; the renderer never inspects the terminal. Styled text is
captured from an off-screen Rich console so the result is a plain ``str``
(with or without ANSI escapes) that any sink can write.
"""

from __future__ import annotations

import io
import json
from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.json import JSON
from rich.text import Text

from logsniff.adapters._formatting import build_access_payload, build_tracing_payload
from logsniff.application.ports.renderer import RendererPort
from logsniff.domain.lines import ClassifiedLine
from logsniff.domain.modes import RenderMode
from logsniff.domain.palettes import resolve_styles, status_3xx_style
from logsniff.domain.profiles import ProfileKind
from logsniff.domain.severity import Severity

_FAINT = "dim"


def _is_redirect(status: str) -> bool:
    return len(status) == 3 and status.isdigit() and status.startswith("3")


class RichRenderer(RendererPort):
    """Render classified lines using Rich styles."""

    def __init__(
        self,
        *,
        theme: str | None = None,
        styles: Mapping[Severity | str, str] | None = None,
        highlight: bool = False,
        show_timestamp: bool = True,
        indent: int = 2,
        color_system: str = "standard",
    ) -> None:
        """Configure the palette, structural highlighting and summary options."""
        self._style_map = resolve_styles(theme, styles)
        self._redirect_style = status_3xx_style(theme)
        self._highlight = highlight
        self._show_timestamp = show_timestamp
        self._indent = indent
        self._color_console = self._capture_console(color_system)
        self._plain_console = self._capture_console(None)

    @staticmethod
    def _capture_console(color_system: str | None) -> Console:
        return Console(
            file=io.StringIO(),
            force_terminal=color_system is not None,
            color_system=color_system,  # type: ignore[arg-type]
            no_color=color_system is None,
            highlight=False,
            markup=False,
            emoji=False,
            legacy_windows=False,
        )

    def style_for(self, severity: Severity) -> str:
        """Return the Rich style string configured for ``severity``."""

        return self._style_map.get(severity, "")

    def render(self, line: ClassifiedLine, mode: RenderMode, *, colorize: bool) -> str:
        """Return ``line`` rendered in ``mode``.

        Examples
        --------
        >>> from logsniff.domain.profiles import GENERIC_PROFILE
        >>> line = ClassifiedLine({"b": 1, "a": 2}, GENERIC_PROFILE, Severity.UNKNOWN)
        >>> RichRenderer().render(line, RenderMode.COMPACT, colorize=False)
        '{"b":1,"a":2}'
        """
        if mode is RenderMode.EXPANDED:
            text = self._expanded(line)
        elif mode is RenderMode.SUMMARY:
            text = self._summary(line)
        else:
            text = self._compact(line)
        return self._to_str(text, colorize=colorize)

    def _to_str(self, text: Text, *, colorize: bool) -> str:
        console = self._color_console if colorize else self._plain_console
        with console.capture() as capture:
            console.print(text, end="", soft_wrap=True)
        return capture.get()

    def _expanded(self, line: ClassifiedLine) -> Text:
        style = self.style_for(line.severity)
        if self._highlight:
            text = JSON.from_data(line.value, indent=self._indent, highlight=True, ensure_ascii=False).text
            text.style = style
            return text
        body = json.dumps(line.value, indent=self._indent, ensure_ascii=False)
        return Text(body, style=style)

    def _compact(self, line: ClassifiedLine) -> Text:
        body = json.dumps(line.value, separators=(",", ":"), ensure_ascii=False)
        return Text(body, style=self.style_for(line.severity))

    def _summary(self, line: ClassifiedLine) -> Text:
        if isinstance(line.value, dict):
            if line.profile.kind is ProfileKind.ACCESS:
                return self._access_summary(line.value, line)
            if line.profile.kind is ProfileKind.TRACING:
                return self._tracing_summary(line.value, line)
        return self._compact(line)

    def _timestamp_prefix(self, text: Text, timestamp: str) -> None:
        if self._show_timestamp and timestamp:
            text.append(f"[{timestamp}] ")

    def _access_summary(self, value: dict[str, Any], line: ClassifiedLine) -> Text:
        payload = build_access_payload(value, line.profile)
        text = Text()
        self._timestamp_prefix(text, payload["timestamp"])
        label_style = self.style_for(line.severity)
        if line.severity is Severity.INFO and _is_redirect(payload["status"]):
            label_style = self._redirect_style
        text.append(line.severity.label, style=label_style)
        text.append(" ")
        if payload["status"]:
            text.append(f"{payload['status']} ")
        if payload["method"]:
            text.append(payload["method"], style=_FAINT)
            text.append(" ")
        if payload["host"]:
            text.append(f"{payload['host']} ")
        text.append(payload["path"])
        if payload["query"]:
            text.append(f"?{payload['query']}")
        if payload["protocol"]:
            text.append(" ")
            text.append(payload["protocol"], style=_FAINT)
        if payload["details"]:
            text.append(" —")
            for key, item in payload["details"]:
                text.append(f" {key}={item}")
        return text

    def _tracing_summary(self, value: dict[str, Any], line: ClassifiedLine) -> Text:
        payload = build_tracing_payload(value, line.profile)
        text = Text()
        self._timestamp_prefix(text, payload["timestamp"])
        if line.severity is Severity.UNKNOWN:
            label, style = payload["level"] or line.severity.label, _FAINT
        else:
            label, style = line.severity.label, self.style_for(line.severity)
        text.append(f"{label:<5}", style=style)
        if payload["message"]:
            text.append(f" {payload['message']}")
        if payload["target"]:
            text.append(f" logger={payload['target']}")
        if payload["span"]:
            text.append(f" span={payload['span']}")
        if payload["thread_id"]:
            text.append(f" threadId={payload['thread_id']}")
        for key, item in payload["fields"]:
            text.append(f" {key}={item}")
        if payload["spans"]:
            text.append(f" spans={payload['spans']}")
        return text


__all__ = ["RichRenderer"]
