"""CLI behaviour coverage for the logsniff command."""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from logsniff import __init__conf__
from logsniff import cli as cli_mod

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

MIXED_INPUT = '{"level":"error","msg":"boom"}\nnot-json\n{"level":"info","msg":"ok"}\n'


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None, *, input: str | None = None, env: dict[str, str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click command with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], input=input, env=env, prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output, result.exception


def test_compact_without_colour_echoes_json_lines_only() -> None:
    exit_code, stdout, _ = run_cli(["--compact", "--color", "never"], input=MIXED_INPUT)

    assert exit_code == 0
    assert stdout == '{"level":"error","msg":"boom"}\n{"level":"info","msg":"ok"}\n'


def test_compact_output_reparses_to_input_values() -> None:
    _, stdout, _ = run_cli(["-c", "--color", "never"], input=MIXED_INPUT)

    values = [json.loads(line) for line in stdout.splitlines()]

    assert values == [{"level": "error", "msg": "boom"}, {"level": "info", "msg": "ok"}]


def test_lone_surrogate_line_is_dropped_and_later_lines_survive() -> None:
    exit_code, stdout, exception = run_cli(["-c", "--color", "never"], input='{"a":"\\ud800"}\n{"b":1}\n')

    assert exit_code == 0
    assert exception is None
    assert stdout == '{"b":1}\n'


def test_out_of_range_number_line_is_dropped() -> None:
    exit_code, stdout, _ = run_cli(["-c", "--color", "never"], input='{"n":1e400}\n{"n":1e3}\n')

    assert exit_code == 0
    assert stdout == '{"n":1000.0}\n'
    assert [json.loads(line) for line in stdout.splitlines()] == [{"n": 1000.0}]


def test_duplicate_keys_are_printed_in_source_order() -> None:
    exit_code, stdout, _ = run_cli(["-c", "--color", "never"], input='{"a":1,"b":2,"a":3}\n')

    assert exit_code == 0
    assert stdout == '{"a":1,"b":2,"a":3}\n'


def test_expanded_is_default_and_preserves_order() -> None:
    exit_code, stdout, _ = run_cli(["--color", "never"], input='{"b":1,"a":2}\n')

    assert exit_code == 0
    assert stdout == '{\n  "b": 1,\n  "a": 2\n}\n'


def test_only_non_json_input_produces_no_output() -> None:
    exit_code, stdout, _ = run_cli(["--color", "never"], input="not json {\n\n   \nplain text\n")

    assert exit_code == 0
    assert stdout == ""


def test_color_always_styles_by_severity() -> None:
    _, stdout, _ = run_cli(["--compact", "--color", "always"], input=MIXED_INPUT)

    lines = stdout.splitlines()
    assert lines[0].startswith("\x1b[31m")
    assert lines[1].startswith("\x1b[32m")
    assert [strip_ansi(line) for line in lines] == ['{"level":"error","msg":"boom"}', '{"level":"info","msg":"ok"}']


def test_colour_policy_from_environment() -> None:
    _, coloured, _ = run_cli(["--compact"], input=MIXED_INPUT, env={"LOGSNIFF_COLOR": "always"})
    _, plain, _ = run_cli(["--compact", "--color", "never"], input=MIXED_INPUT, env={"LOGSNIFF_COLOR": "always"})

    assert "\x1b[" in coloured
    assert "\x1b[" not in plain


def test_invalid_colour_policy_in_environment_is_reported() -> None:
    exit_code, output, _ = run_cli(["--compact"], input="{}\n", env={"LOGSNIFF_COLOR": "sometimes"})

    assert exit_code == 1
    assert "Unknown color policy" in output


def test_summary_classifies_tracing_and_access_records() -> None:
    tracing = {"timestamp": "t0", "level": "WARN", "target": "app::db", "fields": {"message": "slow"}}
    access = {"remote_addr": "10.0.0.7", "status": 502, "request": "GET /health HTTP/1.1"}
    generic = {"level": "info", "msg": "ok"}
    text = "\n".join(json.dumps(item) for item in (tracing, access, generic)) + "\n"

    exit_code, stdout, _ = run_cli(["--summary", "--color", "never", "--hide-timestamp"], input=text)

    assert exit_code == 0
    assert stdout.splitlines() == [
        "WARN  slow logger=app::db",
        "ERROR 502 GET /health HTTP/1.1 — client=10.0.0.7",
        '{"level":"info","msg":"ok"}',
    ]


def test_compact_and_summary_are_mutually_exclusive() -> None:
    exit_code, output, _ = run_cli(["--compact", "--summary"], input="{}\n")

    assert exit_code == 2
    assert "mutually exclusive" in output


def test_files_are_processed_in_order_with_stdin_dash(tmp_path: Path) -> None:
    first = tmp_path / "first.log"
    first.write_text('{"n":1}\nnoise\n', encoding="utf-8")
    last = tmp_path / "last.log"
    last.write_text('{"n":3}\n', encoding="utf-8")

    exit_code, stdout, _ = run_cli(["-c", "--color", "never", str(first), "-", str(last)], input='{"n":2}\n')

    assert exit_code == 0
    assert stdout.splitlines() == ['{"n":1}', '{"n":2}', '{"n":3}']


def test_missing_file_exits_non_zero(tmp_path: Path) -> None:
    exit_code, output, _ = run_cli(["--color", "never", str(tmp_path / "absent.log")])

    assert exit_code == 1
    assert "cannot open" in output


def test_profiles_option_replaces_built_in_profiles(tmp_path: Path) -> None:
    profiles = tmp_path / "profiles.toml"
    profiles.write_text(
        '[[profile]]\nname = "svc"\nkind = "tracing"\nrequired = ["ts", "lvl", "component"]\n'
        'timestamp = "ts"\nlevel = "lvl"\nmessage = "text"\n',
        encoding="utf-8",
    )
    record = {"ts": "t1", "lvl": "error", "component": "api", "text": "down"}

    exit_code, stdout, _ = run_cli(
        ["--summary", "--color", "never", "--profiles", str(profiles)],
        input=json.dumps(record) + "\n",
    )

    assert exit_code == 0
    assert stdout == "[t1] ERROR down\n"


def test_invalid_profiles_file_is_reported(tmp_path: Path) -> None:
    profiles = tmp_path / "profiles.toml"
    profiles.write_text("profile = 3\n", encoding="utf-8")

    exit_code, output, _ = run_cli(["--profiles", str(profiles)], input="{}\n")

    assert exit_code == 1
    assert "array of tables" in output


def test_version_option_prints_version() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert __init__conf__.version in stdout


def test_info_option_prints_metadata() -> None:
    exit_code, stdout, _ = run_cli(["--info"])

    assert exit_code == 0
    assert stdout == __init__conf__.summary_info()


def test_traceback_flag_updates_exit_tools_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    exit_code, _stdout, _exception = run_cli(["--traceback", "--color", "never"], input="")

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, argv or [], input="")
        if result.exception is not None and not isinstance(result.exception, SystemExit):
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["prog_name"] = prog_name == __init__conf__.shell_command
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "--color", "never"])

    assert exit_code == 0
    assert recorded == {"traceback": True, "prog_name": True}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_forwards_argv(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[list[str] | None] = []

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, **_: object) -> int:
        seen.append(argv)
        return 0

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "ignored"], raising=False)

    assert cli_mod.main(("-c", "app.log")) == 0
    assert cli_mod.main() == 0
    assert seen == [["-c", "app.log"], None]
