"""Solver test suite: known-depth boards and random scrambles.

Fixed boards are JSON fixtures under ``<project_root>/fixtures/``; each
records the true optimal move count.  Scrambles come from the generator
with fixed seeds.  Every returned path is replayed move by move to check
it is legal and ends on the goal.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fifteen.engine.generator import GameGenerator
from fifteen.engine.solver import (
    Found,
    Pruned,
    SolveOptions,
    Solver,
    is_solvable,
)
from fifteen.errors import SearchLimitError, UnsolvableBoardError
from fifteen.models.board import GOAL, Board
from fifteen.models.node import SearchNode

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


# Loaded once at import time; each entry becomes one parametrised case.
_BOARDS = _load("boards.json")

_SWAPPED = Board.from_grid([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 14, 0])


# -- helpers ------------------------------------------------------------------


def _assert_replays(solver: Solver) -> None:
    """Walk the returned directions from the start and land on the goal."""
    result = solver.result
    assert result is not None
    assert len(result.directions) == result.moves

    board = result.start
    for i, direction in enumerate(result.directions):
        nxt = board.move(direction)
        assert nxt is not None, f"Move {i} ({direction.value}) left the grid"
        board = nxt
    assert board.is_goal()
    assert result.path[0] == result.start
    assert result.path[-1] == GOAL


# -- known optimal depths -----------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_solves_fixture_optimally(board_data: dict) -> None:
    solver = Solver(Board.from_grid(board_data["grid"]))
    result = solver.solve()

    assert result.moves == board_data["optimal"]
    assert solver.solution is result.node
    _assert_replays(solver)


def test_goal_board_solves_at_zero() -> None:
    result = Solver(GOAL).solve()
    assert result.moves == 0
    assert result.thresholds == (0,)
    assert result.path == [GOAL]
    assert result.directions == []


def test_single_swap_with_blank_takes_one_move() -> None:
    board = GOAL.move_left()
    assert board is not None
    result = Solver(board).solve()
    assert result.moves == 1
    assert result.path == [board, GOAL]


def test_two_move_board_converges_at_threshold_two() -> None:
    board = Board.from_grid([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 0, 14, 15])
    solver = Solver(board)
    root = SearchNode(parent=None, board=board, cost=0)

    assert solver.search(root, 1) == Pruned(2)
    assert solver.solution is None

    found = solver.search(root, 2)
    assert isinstance(found, Found)
    assert found.node.cost == 2

    result = Solver(board).solve()
    assert result.thresholds == (0, 2)
    assert 1 not in result.thresholds


def test_thresholds_strictly_increase() -> None:
    board = GameGenerator.generate(24, seed=5)
    result = Solver(board).solve()
    assert list(result.thresholds) == sorted(set(result.thresholds))
    assert result.thresholds[-1] == result.moves


# -- random scrambles ---------------------------------------------------------


@pytest.mark.parametrize("seed", range(6))
def test_scrambled_boards(seed: int) -> None:
    steps = 20
    board = GameGenerator.generate(steps, seed=seed)
    solver = Solver(board)
    result = solver.solve()

    assert board.heuristic() <= result.moves <= steps
    # Every move flips the blank's cell colour, so lengths share parity.
    assert result.moves % 2 == steps % 2
    _assert_replays(solver)


@pytest.mark.parametrize("seed", [11, 12])
def test_column_conflicts_keep_optimality(seed: int) -> None:
    board = GameGenerator.generate(22, seed=seed)
    plain = Solver(board).solve()
    tighter = Solver(board, SolveOptions(column_conflicts=True)).solve()
    assert tighter.moves == plain.moves


def test_repeated_solves_have_identical_length() -> None:
    board = GameGenerator.generate(26, seed=3)
    lengths = {Solver(board).solve().moves for _ in range(3)}
    assert len(lengths) == 1


# -- failure modes ------------------------------------------------------------


def test_unsolvable_board_is_rejected() -> None:
    assert not is_solvable(_SWAPPED)
    with pytest.raises(UnsolvableBoardError):
        Solver(_SWAPPED).solve()


def test_max_threshold_stops_search() -> None:
    board = Board.from_grid(_BOARDS[-1]["grid"])
    with pytest.raises(SearchLimitError):
        Solver(board, SolveOptions(max_threshold=5)).solve()


def test_unsolved_report_before_solve() -> None:
    solver = Solver(GOAL)
    assert solver.result is None
    assert solver.report() == "Problem still unsolved"

