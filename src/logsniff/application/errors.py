"""Terminal failures surfaced by the pipeline."""

from __future__ import annotations


class StreamError(RuntimeError):
    """Reading the source or writing the sink failed; the run cannot continue.

    The underlying :class:`OSError` is chained as ``__cause__`` and also kept
    on :attr:`cause` so callers can report it without unwrapping.
    """

    def __init__(self, action: str, origin: str, line_number: int, cause: BaseException) -> None:
        self.action = action
        self.origin = origin
        self.line_number = line_number
        self.cause = cause
        super().__init__(f"cannot {action} {origin} (after line {line_number}): {cause}")


__all__ = ["StreamError"]
