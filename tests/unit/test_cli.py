"""Tests for the filefinder command."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from unittest.mock import patch

import yaml
from click.testing import CliRunner

from filefinder import __version__
from filefinder.cli import cli


def _make_tree(root: Path) -> None:
    (root / "nested" / "deeper").mkdir(parents=True)
    (root / "lib.rs").write_bytes(b"l" * 500)
    (root / "MAIN.RS").write_bytes(b"m" * 300)
    (root / "notes.txt").write_bytes(b"n" * 50)
    (root / "nested" / "mod.rs").write_bytes(b"x" * 20)
    (root / "nested" / "deeper" / "deep.rs").write_bytes(b"x" * 20)


def _matches(output: str) -> list[str]:
    prefix = "matching file: "
    return sorted(
        Path(line[len(prefix):]).name for line in output.splitlines() if line.startswith(prefix)
    )


def test_prints_every_file_by_default(tmp_path: Path, monkeypatch) -> None:
    _make_tree(tmp_path)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tmp_path)])

    assert result.exit_code == 0
    assert _matches(result.output) == ["MAIN.RS", "deep.rs", "lib.rs", "mod.rs", "notes.txt"]


def test_extension_is_case_insensitive(tmp_path: Path, monkeypatch) -> None:
    _make_tree(tmp_path)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tmp_path), "-e", ".rs", "--depth", "0"])

    assert result.exit_code == 0
    assert _matches(result.output) == ["MAIN.RS", "lib.rs"]


def test_case_sensitive_flag(tmp_path: Path, monkeypatch) -> None:
    _make_tree(tmp_path)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tmp_path), "-e", ".rs", "-d", "0", "--case-sensitive"])

    assert result.exit_code == 0
    assert _matches(result.output) == ["lib.rs"]


def test_depth_limits_search(tmp_path: Path, monkeypatch) -> None:
    _make_tree(tmp_path)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tmp_path), "--extension", ".rs", "--depth", "1"])

    assert result.exit_code == 0
    assert _matches(result.output) == ["MAIN.RS", "lib.rs", "mod.rs"]


def test_size_and_pattern_filters(tmp_path: Path, monkeypatch) -> None:
    _make_tree(tmp_path)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(
        cli,
        [str(tmp_path), "-g", "100", "-l", "400", "-p", "^[A-Z]"],
    )

    assert result.exit_code == 0
    assert _matches(result.output) == ["MAIN.RS"]


def test_missing_path_exits_one(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    missing = str(tmp_path / "missing")

    result = CliRunner().invoke(cli, [missing])

    assert result.exit_code == 1
    assert f"ERROR: Invalid argument for PATH: <{missing}>" in result.output


def test_invalid_depth_exits_one(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tmp_path), "--depth", "deep"])

    assert result.exit_code == 1
    assert "ERROR: Invalid argument --depth" in result.output


def test_negative_size_exits_one(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tmp_path), "--size-less-than=-5"])

    assert result.exit_code == 1
    assert "ERROR: Invalid argument --size-less-than" in result.output


def test_invalid_pattern_exits_one(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tmp_path), "--pattern", "[oops"])

    assert result.exit_code == 1
    assert "ERROR: Invalid argument --pattern" in result.output


def test_config_file_supplies_defaults(tmp_path: Path, monkeypatch) -> None:
    tree = tmp_path / "tree"
    tree.mkdir()
    _make_tree(tree)
    config_path = tmp_path / "search.yaml"
    config_path.write_text(yaml.safe_dump({"extension": ".txt", "depth": 0}), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tree), "--config", str(config_path)])

    assert result.exit_code == 0
    assert _matches(result.output) == ["notes.txt"]


def test_flags_override_discovered_config(tmp_path: Path, monkeypatch) -> None:
    tree = tmp_path / "tree"
    tree.mkdir()
    _make_tree(tree)
    (tmp_path / ".filefinder.yaml").write_text(
        yaml.safe_dump({"extension": ".txt", "depth": 0}), encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tree), "--extension", ".rs"])

    assert result.exit_code == 0
    assert _matches(result.output) == ["MAIN.RS", "lib.rs"]


def test_bad_config_exits_one(tmp_path: Path, monkeypatch) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("depth: -4\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [str(tmp_path), "-c", str(config_path)])

    assert result.exit_code == 1
    assert "Configuration validation failed" in result.output


def test_traversal_error_reported(tmp_path: Path, monkeypatch) -> None:
    _make_tree(tmp_path)
    monkeypatch.chdir(tmp_path)

    with patch("filefinder.tools.fs_walker.os.scandir", side_effect=PermissionError(13, "Permission denied")):
        result = CliRunner().invoke(cli, [str(tmp_path)])

    assert result.exit_code == 1
    assert "ERROR: Cannot read directory" in result.output


def test_version(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_relative_root_paths(tmp_path: Path, monkeypatch) -> None:
    src = tmp_path / "src"
    src.mkdir()
    (src / "lib.rs").write_bytes(b"l" * 500)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, ["src", "-e", ".rs"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [f"matching file: {os.path.join('src', 'lib.rs')}"]


def test_blank_directory_name_as_path(tmp_path: Path, monkeypatch) -> None:
    blank = tmp_path / " "
    blank.mkdir()
    (blank / "a.txt").write_bytes(b"a")
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [" "])

    assert result.exit_code == 0
    assert result.output.splitlines() == [f"matching file: {os.path.join(' ', 'a.txt')}"]


def test_logging_defaults_to_warning(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "a.txt").write_bytes(b"a")
    monkeypatch.chdir(tmp_path)

    with patch("filefinder.cli.logging.basicConfig") as basic_config:
        result = CliRunner().invoke(cli, ["."])

    assert result.exit_code == 0
    assert basic_config.call_args.kwargs["level"] == logging.WARNING


def test_verbose_flags_raise_log_level(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    with patch("filefinder.cli.logging.basicConfig") as basic_config:
        CliRunner().invoke(cli, [".", "-v"])
        CliRunner().invoke(cli, [".", "-vv"])

    levels = [call.kwargs["level"] for call in basic_config.call_args_list]
    assert levels == [logging.INFO, logging.DEBUG]
