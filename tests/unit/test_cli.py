"""
CLI tests.

Replays button labels and checks the printed display lines.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from src.app_shell.cli import EXIT_BAD_CONFIG, EXIT_UNKNOWN_LABEL, main


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CALC_RULES_PATH", raising=False)
    monkeypatch.delenv("CALC_LOG_LEVEL", raising=False)


def test_press_prints_both_lines(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["press", "7", "+", "3", "="]) == 0

    assert capsys.readouterr().out == "\n10\n"


def test_press_with_pending_operator(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["press", "1", "2", "×"]) == 0

    assert capsys.readouterr().out == "12\n\n"


def test_subtract_label_is_not_an_option(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["press", "9", "-", "4", "="]) == 0

    assert capsys.readouterr().out.splitlines()[-1] == "5"


def test_unknown_label_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["press", "2", "^", "3"]) == EXIT_UNKNOWN_LABEL

    assert capsys.readouterr().out.splitlines()[-1] == "23"


def test_rules_file_sets_division_scale(
    capsys: pytest.CaptureFixture[str], write_rules: Callable[[str], Path]
) -> None:
    path = write_rules("arithmetic:\n  division_scale: 2\n")

    assert main(["--rules", str(path), "press", "2", "÷", "3", "="]) == 0

    assert capsys.readouterr().out.splitlines()[-1] == "0.67"


def test_keys_prints_layout(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["keys"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0].split() == ["AC", "C", "⌫", "÷"]


def test_unknown_log_level_exits_cleanly(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CALC_LOG_LEVEL", "verbose")

    assert main(["keys"]) == EXIT_BAD_CONFIG

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "CRITICAL" in captured.err
