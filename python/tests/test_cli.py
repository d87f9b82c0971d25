"""Command line tests through typer's runner."""

from __future__ import annotations

from typer.testing import CliRunner

from fifteen.models.board import GOAL
from fifteen_cli.app import app
from fifteen_cli.reader import format_grid, parse_grid

runner = CliRunner()

_ONE_MOVE = "1 2 3 4 5 6 7 8 9 10 11 12 13 14 0 15"
_SWAPPED = "1 2 3 4 5 6 7 8 9 10 11 12 13 15 14 0"


def test_solve_plain_from_stdin() -> None:
    result = runner.invoke(app, ["solve", "--plain"], input=_ONE_MOVE)
    assert result.exit_code == 0, result.output
    assert "| 13 | 14 | XX | 15 |" in result.output
    assert "Moves count: 1" in result.output
    assert "Elapsed time:" in result.output


def test_solve_rich_view() -> None:
    result = runner.invoke(app, ["solve", "-"], input=_ONE_MOVE)
    assert result.exit_code == 0, result.output
    assert "Moves:" in result.output
    assert "→" in result.output


def test_solve_cells_format() -> None:
    cells = " ".join(str(i) for i in range(16))
    result = runner.invoke(app, ["solve", "--plain", "-F", "cells"], input=cells)
    assert result.exit_code == 0, result.output
    assert "Moves count: 0" in result.output


def test_solve_rejects_unsolvable() -> None:
    result = runner.invoke(app, ["solve", "--plain"], input=_SWAPPED)
    assert result.exit_code == 1
    assert "cannot be solved" in result.output


def test_solve_rejects_malformed_input() -> None:
    result = runner.invoke(app, ["solve"], input="1 2 3")
    assert result.exit_code == 1
    assert "Expected 16 numbers" in result.output


def test_solve_respects_max_threshold() -> None:
    board = "2 3 4 8 1 6 7 12 5 10 11 15 9 13 14 0"
    result = runner.invoke(app, ["solve", "--max-threshold", "4"], input=board)
    assert result.exit_code == 1
    assert "exceeds the maximum" in result.output


def test_scramble_output_parses_and_solves() -> None:
    result = runner.invoke(app, ["scramble", "-n", "12", "--seed", "4"])
    assert result.exit_code == 0, result.output
    board = parse_grid(result.output)
    assert board != GOAL

    solved = runner.invoke(app, ["solve", "--plain"], input=format_grid(board))
    assert solved.exit_code == 0, solved.output
    assert "Moves count:" in solved.output


def test_check_reports_heuristic() -> None:
    result = runner.invoke(app, ["check"], input=_SWAPPED)
    assert result.exit_code == 0, result.output
    assert "Heuristic:        4" in result.output
    assert "Unsolvable" in result.output
