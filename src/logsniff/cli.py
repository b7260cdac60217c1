"""Command-line interface for logsniff.

Purpose
-------
Translate command-line flags into a :class:`~logsniff.runtime.RuntimeConfig`,
run the pipeline over the given files (or standard input) and map failures to
exit codes via ``lib_cli_exit_tools``.

Contents
--------
* :func:`cli` - Click command ``logsniff [FILES]...``.
* :func:`main` - test-friendly wrapper returning the exit code.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as sniff_config
from .adapters import COLOR_POLICIES, read_paths
from .application.errors import StreamError
from .domain import CONSOLE_STYLE_THEMES, DEFAULT_THEME, RenderMode
from .runtime import RuntimeConfig, build_pipeline

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _explicit(ctx: click.Context, name: str) -> bool:
    source = ctx.get_parameter_source(name)
    return source is not None and source is not click.core.ParameterSource.DEFAULT


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def _print_info(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(__init__conf__.summary_info(), nl=False)
    ctx.exit()


@click.command(context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.option("--compact", "-c", is_flag=True, help="Print each record on one minified line.")
@click.option("--summary", "-s", is_flag=True, help="Print one human-readable line per access/tracing record.")
@click.option(
    "--color",
    type=click.Choice(COLOR_POLICIES, case_sensitive=False),
    default="auto",
    show_default=True,
    help=f"Colour policy; overridable through {sniff_config.COLOR_ENV_VAR}.",
)
@click.option(
    "--theme",
    type=click.Choice(sorted(CONSOLE_STYLE_THEMES), case_sensitive=False),
    default=DEFAULT_THEME,
    show_default=True,
    help="Severity palette.",
)
@click.option("--highlight", is_flag=True, help="Colour JSON keys and values individually in expanded mode.")
@click.option("--hide-timestamp", is_flag=True, help="Omit timestamps from summary lines.")
@click.option(
    "--profiles",
    "profiles_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file replacing the built-in format profiles.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log diagnostics (dropped lines, config) to stderr.")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (or set {sniff_config.DOTENV_ENV_VAR}=1).",
)
@click.option(
    "--info",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_info,
    help="Print package metadata and exit.",
)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    compact: bool,
    summary: bool,
    color: str,
    theme: str,
    highlight: bool,
    hide_timestamp: bool,
    profiles_path: Path | None,
    verbose: bool,
    traceback: bool,
    use_dotenv: bool,
) -> None:
    """Pretty-print JSON lines from FILES (or standard input), coloured by severity.

    Lines that are not JSON are skipped silently.
    """
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    _configure_logging(verbose)

    if compact and summary:
        raise click.UsageError("--compact and --summary are mutually exclusive")

    explicit_dotenv = use_dotenv if _explicit(ctx, "use_dotenv") else None
    if sniff_config.should_use_dotenv(explicit=explicit_dotenv, env_value=os.getenv(sniff_config.DOTENV_ENV_VAR)):
        sniff_config.enable_dotenv()

    mode = RenderMode.SUMMARY if summary else RenderMode.COMPACT if compact else RenderMode.EXPANDED
    config = RuntimeConfig(
        mode=mode,
        color=color.lower(),
        theme=theme.lower(),
        highlight=highlight,
        show_timestamp=not hide_timestamp,
        profiles_path=profiles_path,
    )
    explicit = [name for name in ("color", "theme") if _explicit(ctx, name)]
    if _explicit(ctx, "profiles_path"):
        explicit.append("profiles_path")
    config = config.with_env(sniff_config.load_settings(), explicit=explicit)

    try:
        pipeline = build_pipeline(config)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    try:
        pipeline.process(read_paths(files))
    except StreamError as exc:
        raise click.ClickException(str(exc)) from exc


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the Click command in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Reset ``lib_cli_exit_tools`` traceback preferences after the run so
        repeated in-process calls do not leak ``--traceback``.

    Returns
    -------
    int
        Zero on clean end of stream; non-zero on I/O or configuration errors.
    """
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
