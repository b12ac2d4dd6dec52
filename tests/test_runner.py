"""Tests for loading and running dayNN.py solution modules."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from aocinput.reader import InputNotFoundError
from aocinput.runner import SolutionNotFound, load_solution, run_day, solution_path


def test_solution_path(tmp_path: Path) -> None:
    assert solution_path(12, tmp_path) == tmp_path / "day12.py"


def test_load_solution_imports_module(tmp_path: Path) -> None:
    (tmp_path / "day03.py").write_text("ANSWER = 198\n\ndef main():\n    pass\n", encoding="utf-8")

    module = load_solution(3, tmp_path)

    assert module.ANSWER == 198


def test_load_missing_solution(tmp_path: Path) -> None:
    with pytest.raises(SolutionNotFound):
        load_solution(3, tmp_path)


def test_run_day_requires_main(tmp_path: Path) -> None:
    (tmp_path / "day03.py").write_text("main = 3\n", encoding="utf-8")

    with pytest.raises(SolutionNotFound, match="main"):
        run_day(3, tmp_path)


def test_run_day_propagates_input_errors(tmp_path: Path) -> None:
    (tmp_path / "day10.py").write_text(
        "from aocinput import InputSource\n\n"
        "def main():\n"
        f"    InputSource.day(10, {str(tmp_path)!r})\n",
        encoding="utf-8",
    )

    with pytest.raises(InputNotFoundError):
        run_day(10, tmp_path)


def test_solution_with_dataclass_records_runs(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "day13.txt").write_text("fold along y=7\nfold along x=5\n", encoding="utf-8")
    (tmp_path / "day13.py").write_text(
        "from __future__ import annotations\n\n"
        "from dataclasses import dataclass\n\n"
        "from aocinput import InputSource, collect\n\n\n"
        "@dataclass\n"
        "class Fold:\n"
        "    axis: str\n"
        "    at: int\n\n"
        "    @classmethod\n"
        "    def from_str(cls, text: str) -> Fold:\n"
        "        axis, at = text.removeprefix('fold along ').split('=')\n"
        "        return cls(axis, int(at))\n\n\n"
        "def main() -> None:\n"
        f"    with InputSource.day(13, {str(tmp_path)!r}) as source:\n"
        "        folds = collect(source.records(Fold.from_str))\n"
        "    print(folds)\n",
        encoding="utf-8",
    )

    run_day(13, tmp_path)

    assert "[Fold(axis='y', at=7), Fold(axis='x', at=5)]" in capsys.readouterr().out


def test_failed_solution_import_is_not_left_registered(tmp_path: Path) -> None:
    (tmp_path / "day14.py").write_text("raise ImportError('no numpy here')\n", encoding="utf-8")

    with pytest.raises(ImportError, match="no numpy here"):
        load_solution(14, tmp_path)

    assert "aocinput_solutions.day14" not in sys.modules
