"""Tests for the CLI in main.py."""

from pathlib import Path

from typer.testing import CliRunner

import main
from main import app

runner = CliRunner()


def test_check_all_balanced_exits_zero() -> None:
    result = runner.invoke(app, ["check", "pPoooyY", "abc"])
    assert result.exit_code == 0
    assert "Letter Balance" in result.output


def test_check_unbalanced_exits_one() -> None:
    result = runner.invoke(app, ["check", "pPoooyY", "Pyy"])
    assert result.exit_code == 1


def test_check_empty_string_is_balanced() -> None:
    result = runner.invoke(app, ["check", ""])
    assert result.exit_code == 0


def test_scan_reports_summary(tmp_path: Path) -> None:
    (tmp_path / "words.txt").write_text("py\nabc\nPyy\n")
    result = runner.invoke(app, ["scan", str(tmp_path)])
    assert result.exit_code == 1
    assert "Balanced 2 line(s)" in result.output
    assert "Unbalanced 1 line(s)" in result.output


def test_scan_all_balanced_exits_zero(tmp_path: Path) -> None:
    (tmp_path / "words.txt").write_text("yPPy\n")
    result = runner.invoke(app, ["scan", str(tmp_path), "--only-unbalanced"])
    assert result.exit_code == 0
    assert "Balanced 1 line(s)" in result.output


def test_scan_no_files(tmp_path: Path) -> None:
    result = runner.invoke(app, ["scan", str(tmp_path)])
    assert result.exit_code == 0
    assert "No text files found." in result.output


def test_scan_reports_unreadable_file(tmp_path: Path) -> None:
    (tmp_path / "bad.txt").write_bytes(b"\xff\xfe\xfa")
    (tmp_path / "good.txt").write_text("py\n")
    result = runner.invoke(app, ["scan", str(tmp_path)])
    assert result.exit_code == 1
    assert "Errors:" in result.output


def test_scan_env_exclude(tmp_path: Path, monkeypatch) -> None:
    hidden = tmp_path / "drafts"
    hidden.mkdir()
    (hidden / "x.txt").write_text("ppp\n")
    (tmp_path / "y.txt").write_text("py\n")
    monkeypatch.setenv("PY_BALANCE_EXCLUDE", "drafts, other")
    result = runner.invoke(app, ["scan", str(tmp_path)])
    assert result.exit_code == 0


def test_scan_only_unbalanced_hides_balanced_lines(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(main.console, "width", 200)
    (tmp_path / "words.txt").write_text("py\nabc\nPyy\n")
    result = runner.invoke(app, ["scan", str(tmp_path), "--only-unbalanced"])
    assert result.exit_code == 1
    assert "Pyy" in result.output
    assert "abc" not in result.output


def test_check_text_starting_with_dash() -> None:
    result = runner.invoke(app, ["check", "--", "-py"])
    assert result.exit_code == 0
