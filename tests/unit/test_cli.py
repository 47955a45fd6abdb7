"""Command line behaviour through typer's test runner."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from setup_utils.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch) -> None:
    for name in ("SETUP_UTILS_VERBOSITY", "SETUP_UTILS_XARGS_MAX_SIZE", "SETUP_UTILS_SPAWNER"):
        monkeypatch.delenv(name, raising=False)


def test_run_prints_child_stdout() -> None:
    result = runner.invoke(app, ["run", "--", sys.executable, "-c", "print('hi there')"])
    assert result.exit_code == 0
    assert result.stdout == "hi there\n"


def test_run_exits_with_child_code() -> None:
    result = runner.invoke(app, ["run", "--", sys.executable, "-c", "import sys; sys.exit(3)"])
    assert result.exit_code == 3


def test_run_missing_program_is_127() -> None:
    result = runner.invoke(app, ["run", "/nonexistent/setup-utils-test-program"])
    assert result.exit_code == 127
    assert "setup-utils: " in result.output


@pytest.mark.skipif(os.name != "posix", reason="exec format errors")
def test_run_unexecutable_program_is_127(tmp_path: Path) -> None:
    tool = tmp_path / "broken-tool"
    tool.write_bytes(b"\x7fELF garbage")
    tool.chmod(0o755)
    result = runner.invoke(app, ["run", str(tool)])
    assert result.exit_code == 127
    assert f"setup-utils: cannot run {tool}" in result.output


def test_xargs_runs_in_batches(tmp_path: Path) -> None:
    record = tmp_path / "calls.txt"
    script = "import sys; open(sys.argv[1], 'a').write(' '.join(sys.argv[2:]) + '\\n')"
    fixed = [sys.executable, "-c", script, str(record)]
    fixed_size = sum(len(arg.encode()) for arg in fixed[1:]) + len(fixed) - 1
    result = runner.invoke(
        app,
        ["xargs", "--max-size", str(fixed_size + 8), "--", *fixed],
        input="aaa bbb\nccc ddd\n",
    )
    assert result.exit_code == 0
    assert record.read_text().splitlines() == ["aaa bbb", "ccc ddd"]


def test_xargs_budget_too_small_is_config_error() -> None:
    result = runner.invoke(
        app,
        ["xargs", "--max-size", "4", "--", sys.executable, "-c", "pass"],
        input="a b c\n",
    )
    assert result.exit_code == 2


def test_xargs_stops_on_failing_batch() -> None:
    result = runner.invoke(
        app,
        ["xargs", "--", sys.executable, "-c", "import sys; sys.exit(4)"],
        input="one two\n",
    )
    assert result.exit_code == 4


def test_wrap() -> None:
    result = runner.invoke(app, ["wrap", "--width", "10"], input="the quick brown fox jumps\n")
    assert result.exit_code == 0
    assert result.stdout == "the quick\nbrown fox\njumps\n"


def test_find_module(tmp_path: Path) -> None:
    (tmp_path / "Data").mkdir()
    (tmp_path / "Data" / "Map.hs").write_text("module Data.Map\n")
    result = runner.invoke(app, ["find-module", "Data.Map", "-s", str(tmp_path), "-x", "hs", "-x", "lhs"])
    assert result.exit_code == 0
    assert result.stdout == f"{tmp_path / 'Data' / 'Map.hs'}\n"


def test_find_module_not_found(tmp_path: Path) -> None:
    result = runner.invoke(app, ["find-module", "Data.Set", "-s", str(tmp_path), "-x", "hs"])
    assert result.exit_code == 1
    assert "Could not find module: Data.Set" in result.output


def test_find_module_needs_a_suffix(tmp_path: Path) -> None:
    result = runner.invoke(app, ["find-module", "Data.Map", "-s", str(tmp_path)])
    assert result.exit_code == 2


def test_copy_sources(tmp_path: Path) -> None:
    build = tmp_path / "build"
    (build / "Data").mkdir(parents=True)
    (build / "Data" / "Map.hi").write_text("iface")
    target = tmp_path / "install"
    result = runner.invoke(
        app,
        ["copy-sources", str(target), "Data.Map", "-s", str(build), "-x", "hi"],
    )
    assert result.exit_code == 0
    assert (target / "Data" / "Map.hi").read_text() == "iface"
    assert f"Copied sources for 1 module(s) to {target}" in result.stdout


def test_copy_sources_allow_missing(tmp_path: Path) -> None:
    target = tmp_path / "install"
    args = ["copy-sources", str(target), "Nope", "-s", str(tmp_path), "-x", "hi"]
    assert runner.invoke(app, args).exit_code == 1
    assert runner.invoke(app, ["--verbosity", "0", *args, "--allow-missing"]).exit_code == 0


def test_info_shows_configuration(monkeypatch) -> None:
    monkeypatch.setenv("SETUP_UTILS_XARGS_MAX_SIZE", "4096")
    monkeypatch.setenv("SETUP_UTILS_SPAWNER", "pipe")
    result = runner.invoke(app, ["--verbosity", "verbose", "info"])
    assert result.exit_code == 0
    assert "Verbosity: verbose" in result.stdout
    assert "xargs size limit: 4096" in result.stdout
    assert "Spawner: pipe (requested: pipe)" in result.stdout


def test_bad_verbosity_is_config_error() -> None:
    result = runner.invoke(app, ["--verbosity", "loud", "info"])
    assert result.exit_code == 2
    assert "can't parse verbosity 'loud'" in result.output


def test_bad_environment_is_config_error(monkeypatch) -> None:
    monkeypatch.setenv("SETUP_UTILS_SPAWNER", "fork")
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 2
