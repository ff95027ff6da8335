#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the gocat command line."""

from pathlib import Path

from click.testing import CliRunner
import pytest

from gocat.cli import cli as gocat_cli

from tests.fixtures.project import record_paths, write_tree


def _run_cli(runner: CliRunner, args: list[str]) -> str:
    """Invoke the CLI and assert the command succeeds."""
    result = runner.invoke(gocat_cli, args, catch_exceptions=False)
    assert result.exit_code == 0, f"CLI exited with code {result.exit_code}:\n{result.output}"
    return result.output


def test_join_to_output_file(runner: CliRunner, go_project: Path, tmp_path: Path) -> None:
    target = tmp_path / "bundle.txt"
    _run_cli(runner, ["join", "main.go", "-d", str(go_project), "-o", str(target)])

    assert record_paths(target.read_bytes()) == ["main.go", "util/a.go", "util/b.go"]


def test_join_to_stdout(runner: CliRunner, go_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(go_project)
    result = runner.invoke(gocat_cli, ["join", "main.go"], catch_exceptions=False)

    assert result.exit_code == 0
    assert b"// --------- gocat v1" in result.stdout_bytes
    assert b'// --------- FILE START: "util/b.go"' in result.stdout_bytes


def test_join_output_inside_root_is_not_bundled(runner: CliRunner, go_project: Path) -> None:
    target = go_project / "util" / "bundle.txt"
    target.write_text("stale")
    _run_cli(runner, ["join", "main.go", "-d", str(go_project), "-o", str(target)])

    assert record_paths(target.read_bytes()) == ["main.go", "util/a.go", "util/b.go"]


def test_join_exclusions(runner: CliRunner, go_project: Path, tmp_path: Path) -> None:
    target = tmp_path / "bundle.txt"
    _run_cli(runner, ["join", "main.go", "util/b.go", "-d", str(go_project), "-e", "util/a.go", "-o", str(target)])
    assert record_paths(target.read_bytes()) == ["main.go", "util/b.go"]

    _run_cli(runner, ["join", "main.go", "-d", str(go_project), "-x", "util", "-o", str(target)])
    assert record_paths(target.read_bytes()) == ["main.go"]


def test_join_module_override(runner: CliRunner, tmp_path: Path) -> None:
    root = write_tree(tmp_path / "p", {"main.go": 'package main\nimport "x.io/y/z"\n', "z/z.go": "package z\n"})
    target = tmp_path / "bundle.txt"

    _run_cli(runner, ["join", "main.go", "-d", str(root), "--module", "x.io/y", "-o", str(target)])

    assert record_paths(target.read_bytes()) == ["main.go", "z/z.go"]


def test_join_kotlin_base_package(runner: CliRunner, kotlin_project: Path, tmp_path: Path) -> None:
    (kotlin_project / "build.gradle.kts").unlink()
    target = tmp_path / "bundle.txt"

    _run_cli(runner, ["join", "App.kt", "-d", str(kotlin_project), "--base-package", "com.example", "-o", str(target)])

    assert record_paths(target.read_bytes()) == ["App.kt", "util/Strings.kt", "util/build.kts"]


def test_join_missing_go_mod_exits_nonzero(runner: CliRunner, tmp_path: Path) -> None:
    root = write_tree(tmp_path / "nomod", {"main.go": "package main\n"})
    target = tmp_path / "bundle.txt"

    result = runner.invoke(gocat_cli, ["join", "main.go", "-d", str(root), "-o", str(target)])

    assert result.exit_code == 1
    assert not target.exists()


def test_join_requires_patterns(runner: CliRunner) -> None:
    result = runner.invoke(gocat_cli, ["join"])

    assert result.exit_code == 2


def test_split_round_trip(runner: CliRunner, go_project: Path, tmp_path: Path) -> None:
    bundle = tmp_path / "bundle.txt"
    _run_cli(runner, ["join", "main.go", "-d", str(go_project), "-o", str(bundle)])

    out_dir = tmp_path / "restored"
    _run_cli(runner, ["split", "--in", str(bundle), "--out", str(out_dir)])

    for name in ("main.go", "util/a.go", "util/b.go"):
        assert (out_dir / name).read_bytes() == (go_project / name).read_bytes()


def test_split_from_stdin(runner: CliRunner, tmp_path: Path, content_bundle_valid: bytes) -> None:
    out_dir = tmp_path / "out"
    result = runner.invoke(gocat_cli, ["split", "-o", str(out_dir)], input=content_bundle_valid)

    assert result.exit_code == 0
    assert (out_dir / "hello.txt").read_bytes() == b"Hello World!"


def test_split_bad_marker_exits_nonzero(runner: CliRunner, tmp_path: Path) -> None:
    bundle = tmp_path / "bad.txt"
    bundle.write_text("not a bundle\n")

    result = runner.invoke(gocat_cli, ["split", "--in", str(bundle), "--out", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert not (tmp_path / "out").exists()


def test_help_topics(runner: CliRunner) -> None:
    assert "split" in _run_cli(runner, ["help"])
    assert "PATTERNS" in _run_cli(runner, ["help", "join"])
    assert "--out" in _run_cli(runner, ["help", "split"])
    assert "Unknown help topic" in _run_cli(runner, ["help", "bogus"])


def test_version(runner: CliRunner) -> None:
    assert "gocat version" in _run_cli(runner, ["--version"])


# 🐱📁🔚
