"""Utilities that flatten classified records into summary-line fields.

Why
---
The summary layout of access and tracing records is assembled from the same
handful of lookups (timestamp, request line, ``key=value`` tail). Producing
them in one place keeps the renderer focused on styling.

Contents
--------
* :func:`format_atom` - compact, shell-friendly rendering of a JSON value.
* :func:`split_request` - split an nginx ``$request`` line.
* :func:`build_access_payload` / :func:`build_tracing_payload` - field maps
  consumed by :class:`~logsniff.adapters.console.rich_renderer.RichRenderer`.
"""

from __future__ import annotations

import json
from typing import Any

from logsniff.domain.fields import MISSING, first_present, lookup
from logsniff.domain.profiles import FormatProfile

_ACCESS_DETAILS: tuple[tuple[str, str], ...] = (
    ("bytes", "bytes_sent"),
    ("rt", "req_time"),
    ("up", "upstream_time"),
    ("up_addr", "upstream_addr"),
    ("req", "req_id"),
    ("trace", "traceparent"),
    ("xff", "xff"),
    ("client", "remote_addr"),
    ("referer", "referer"),
    ("ua", "user_agent"),
    ("cache", "cache"),
)
# (label, source key) pairs appended after the request line, in display order.


def format_atom(value: Any) -> str:
    """Return ``value`` as a short token for ``key=value`` pairs.

    Examples
    --------
    >>> format_atom("plain")
    'plain'
    >>> format_atom("two words")
    '"two words"'
    >>> format_atom({"a": [1, 2]})
    '{"a":[1,2]}'
    """
    if isinstance(value, str):
        if value and not any(ch.isspace() or ch in '="' for ch in value):
            return value
        return json.dumps(value, ensure_ascii=False)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _text(value: Any) -> str:
    if value is MISSING or value is None:
        return ""
    if isinstance(value, str):
        return value
    return format_atom(value)


def split_request(request: str) -> tuple[str, str, str, str]:
    """Split ``"GET /p?q=1 HTTP/1.1"`` into method, path, query and protocol.

    Examples
    --------
    >>> split_request("GET /p?q=1 HTTP/1.1")
    ('GET', '/p', 'q=1', 'HTTP/1.1')
    >>> split_request("garbage")
    ('', 'garbage', '', '')
    """
    parts = request.split()
    if len(parts) == 3:
        method, target, protocol = parts
    elif len(parts) == 2:
        method, target, protocol = parts[0], parts[1], ""
    else:
        return "", request.strip(), "", ""
    path, _, query = target.partition("?")
    return method, path, query, protocol


def timestamp_of(value: Any, profile: FormatProfile) -> str:
    return _text(first_present(value, profile.timestamp_fields))


def build_access_payload(value: dict[str, Any], profile: FormatProfile) -> dict[str, Any]:
    """Return the fields of an access-log summary line."""

    method = _text(lookup(value, "method"))
    path = _text(lookup(value, "path"))
    query = _text(lookup(value, "query"))
    protocol = _text(lookup(value, "protocol"))
    request = lookup(value, "request")
    if not path and isinstance(request, str):
        method, path, query, protocol = split_request(request)
    status = lookup(value, profile.status_field) if profile.status_field else MISSING

    details: list[tuple[str, str]] = []
    for label, key in _ACCESS_DETAILS:
        found = lookup(value, key)
        text = _text(found)
        if text:
            details.append((label, text))

    return {
        "timestamp": timestamp_of(value, profile),
        "status": _text(status),
        "method": method,
        "host": _text(lookup(value, "host")),
        "path": path,
        "query": query,
        "protocol": protocol,
        "details": details,
    }


def build_tracing_payload(value: dict[str, Any], profile: FormatProfile) -> dict[str, Any]:
    """Return the fields of a tracing-event summary line."""

    fields = lookup(value, "fields")
    extras: list[tuple[str, str]] = []
    if isinstance(fields, dict):
        extras = [(key, format_atom(item)) for key, item in fields.items() if key != "message"]
    span = lookup(value, "span.name")
    thread_id = lookup(value, "threadId")
    spans = lookup(value, "spans")

    return {
        "timestamp": timestamp_of(value, profile),
        "level": _text(first_present(value, profile.level_fields)),
        "message": _text(first_present(value, profile.message_fields)),
        "target": _text(lookup(value, "target")),
        "span": _text(span),
        "thread_id": _text(thread_id),
        "fields": extras,
        "spans": len(spans) if isinstance(spans, list) else 0,
    }


__all__ = [
    "build_access_payload",
    "build_tracing_payload",
    "format_atom",
    "split_request",
    "timestamp_of",
]
