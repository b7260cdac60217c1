"""Static package metadata surfaced by the CLI."""

from __future__ import annotations

name = "logsniff"
title = "Pretty-print NDJSON logs with severity colours"
version = "0.3.0"
homepage = "https://github.com/logsniff/logsniff"
author = "logsniff contributors"
shell_command = "logsniff"


def summary_info() -> str:
    """Return the metadata banner printed by ``logsniff --info``.

    Examples
    --------
    >>> summary_info().splitlines()[0]
    'Info for logsniff:'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    return "\n".join(lines) + "\n"
