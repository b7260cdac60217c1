"""Best-effort JSON decoding of a single input line."""

from __future__ import annotations

import json
import math
from typing import Any

from logsniff.domain.lines import PARSE_FAILURE, JsonObject


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _finite_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"number out of range: {text}")
    return number


_DECODER = json.JSONDecoder(
    object_pairs_hook=JsonObject,
    parse_constant=_reject_constant,
    parse_float=_finite_float,
)


def _has_lone_surrogate(value: Any) -> bool:
    pending = [value]
    while pending:
        item = pending.pop()
        if isinstance(item, JsonObject):
            for key, member in item.items():
                pending.append(key)
                pending.append(member)
        elif isinstance(item, list):
            pending.extend(item)
        elif isinstance(item, str):
            try:
                item.encode("utf-8")
            except UnicodeEncodeError:
                return True
    return False


def parse_line(line: str) -> Any:
    """Decode ``line`` as exactly one JSON value.

    Leading and trailing whitespace (line terminators included) is ignored.
    Empty lines, malformed JSON, trailing data, the non-standard
    ``NaN``/``Infinity`` constants, numbers too large for a float and
    ``\\uD800``-style escapes that leave a lone surrogate all return
    :data:`PARSE_FAILURE`; that is an expected outcome, never an exception.
    Objects decode to :class:`~logsniff.domain.lines.JsonObject` so duplicate
    keys survive in source order.

    Examples
    --------
    >>> parse_line('  {"a": 1}\\n')
    {'a': 1}
    >>> parse_line('not json {')
    PARSE_FAILURE
    >>> parse_line('null') is None
    True
    >>> parse_line('1e400')
    PARSE_FAILURE
    """
    text = line.strip()
    if not text:
        return PARSE_FAILURE
    try:
        value = _DECODER.decode(text)
    except (ValueError, RecursionError):
        return PARSE_FAILURE
    if not text.isascii() or "\\u" in text:
        if _has_lone_surrogate(value):
            return PARSE_FAILURE
    return value


__all__ = ["parse_line"]
