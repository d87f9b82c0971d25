"""Optimal 15-puzzle solver: Iterative-Deepening A*.

Each iteration is a depth-first search bounded by ``threshold`` on
``f = cost + heuristic``.  A pruned iteration reports the smallest ``f``
that exceeded the bound, which becomes the next threshold, so the first
goal reached is reached by a shortest path.
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_left, insort
from dataclasses import dataclass
from time import perf_counter

from fifteen.engine.report import format_solution
from fifteen.errors import SearchLimitError, UnsolvableBoardError
from fifteen.models.board import SIZE, Board, Direction
from fifteen.models.node import SearchNode

log = logging.getLogger(__name__)


# -- search outcomes ----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Found:
    """A goal was reached; ``node`` ends the winning path."""

    node: SearchNode


@dataclass(frozen=True, slots=True)
class Pruned:
    """No goal under the bound; ``bound`` is the smallest rejected ``f``."""

    bound: float


SearchResult = Found | Pruned


@dataclass
class SolveOptions:
    column_conflicts: bool = False
    check_solvable: bool = True
    max_threshold: int | None = None


@dataclass(frozen=True)
class SolveResult:
    start: Board
    node: SearchNode
    elapsed: float
    thresholds: tuple[int, ...]
    expanded: int

    @property
    def moves(self) -> int:
        return self.node.cost

    @property
    def path(self) -> list[Board]:
        return self.node.path()

    @property
    def directions(self) -> list[Direction]:
        """Blank moves that walk the path from start to goal."""
        boards = self.path
        out: list[Direction] = []
        for here, there in zip(boards, boards[1:]):
            for direction, child in here.neighbours():
                if child == there:
                    out.append(direction)
                    break
        return out


# -- solvability --------------------------------------------------------------


def count_inversions(board: Board) -> int:
    flat = [v for v in board.grid() if v != 0]
    inv = 0
    seen: list[int] = []
    for v in flat:
        inv += len(seen) - bisect_left(seen, v)
        insort(seen, v)
    return inv


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    On an even-width grid a move up or down changes the inversion count
    by an odd amount, so inversions plus the blank's row distance from the
    bottom keeps its parity.
    """
    blank_from_bottom = SIZE - 1 - board.blank_cell // SIZE
    return (count_inversions(board) + blank_from_bottom) % 2 == 0


# -- solver -------------------------------------------------------------------


class Solver:
    """Runs IDA* once for a start board and keeps the outcome."""

    def __init__(self, board: Board, options: SolveOptions | None = None) -> None:
        self.board = board
        self.options = options or SolveOptions()
        self.solution: SearchNode | None = None
        self.elapsed: float = 0.0
        self.thresholds: list[int] = []
        self.expanded: int = 0
        self._result: SolveResult | None = None

    @property
    def result(self) -> SolveResult | None:
        """The finished solve, or ``None`` while the problem is unsolved."""
        return self._result

    def solve(self) -> SolveResult:
        """Search for a shortest move sequence to the goal.

        Raises ``UnsolvableBoardError`` up front for boards of the wrong
        parity (unless disabled) and ``SearchLimitError`` once the bound
        passes ``options.max_threshold``.
        """
        if self.options.check_solvable and not is_solvable(self.board):
            raise UnsolvableBoardError(
                "Board has odd parity relative to the goal and cannot be solved."
            )

        t0 = perf_counter()
        root = SearchNode(parent=None, board=self.board, cost=0)
        threshold = 0
        while True:
            limit = self.options.max_threshold
            if limit is not None and threshold > limit:
                raise SearchLimitError(
                    f"Threshold {threshold} exceeds the maximum of {limit}."
                )
            self.thresholds.append(threshold)
            log.info("threshold %d (%d nodes expanded so far)", threshold, self.expanded)

            outcome = self.search(root, threshold)
            if isinstance(outcome, Found):
                break
            if outcome.bound == math.inf:
                raise SearchLimitError("Search space exhausted without reaching the goal.")
            threshold = int(outcome.bound)

        self.elapsed = perf_counter() - t0
        self._result = SolveResult(
            start=self.board,
            node=outcome.node,
            elapsed=self.elapsed,
            thresholds=tuple(self.thresholds),
            expanded=self.expanded,
        )
        log.debug(
            "solved in %d moves, %d nodes expanded, %.3fs",
            outcome.node.cost, self.expanded, self.elapsed,
        )
        return self._result

    def search(self, node: SearchNode, threshold: int) -> SearchResult:
        """Bounded depth-first search below *node*."""
        f = node.cost + node.board.heuristic(self.options.column_conflicts)
        if f > threshold:
            return Pruned(f)
        if node.board.is_goal():
            self.solution = node
            return Found(node)

        self.expanded += 1
        back = node.parent.board if node.parent is not None else None
        minimum: float = math.inf
        for board in node.board.children():
            # Never undo the move that led here.
            if board == back:
                continue
            outcome = self.search(node.child(board), threshold)
            if isinstance(outcome, Found):
                return outcome
            if outcome.bound < minimum:
                minimum = outcome.bound
        return Pruned(minimum)

    def report(self) -> str:
        """Plain-text trace of the solution, or the unsolved notice."""
        return format_solution(self._result)
