"""Runtime façade composing the logsniff pipeline.

Purpose
-------
Expose a stable entry point (:func:`run`, :func:`build_pipeline`) that the CLI
and host applications use instead of wiring the inner layers directly.

Contents
--------
* :class:`RuntimeConfig` - resolved run options.
* :func:`build_pipeline` - composition root returning live collaborators.
* :func:`run` - read the given sources to end of stream and render them.

System Role
-----------
Forms the outer shell: policy lives in :mod:`logsniff.application`, while
stream selection, colour detection and configuration loading happen here.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from logsniff.adapters import read_paths
from logsniff.application.use_cases.process_lines import ProcessStats

from ._composition import Pipeline, RuntimeConfig, build_pipeline, select_profiles


def run(paths: Iterable[str | Path] = (), config: RuntimeConfig | None = None, *, stream: TextIO | None = None) -> ProcessStats:
    """Render every JSON line of ``paths`` (stdin when empty) to ``stream``.

    Raises
    ------
    StreamError
        When a source cannot be opened or read, or the sink cannot be written.
    ValueError
        When the configuration names an unknown theme, colour policy or an
        invalid profile file.
    """
    pipeline = build_pipeline(config or RuntimeConfig(), stream=stream)
    return pipeline.process(read_paths(paths))


__all__ = ["Pipeline", "ProcessStats", "RuntimeConfig", "build_pipeline", "run", "select_profiles"]
