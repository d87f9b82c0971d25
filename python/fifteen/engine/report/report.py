"""Plain-text rendering of a finished solve."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fifteen.engine.solver import SolveResult

UNSOLVED = "Problem still unsolved"


def split_elapsed(seconds: float) -> tuple[int, int, int, int]:
    """Break a duration into hours, minutes, seconds and milliseconds."""
    total_ms = int(round(seconds * 1000))
    total_s, ms = divmod(total_ms, 1000)
    total_m, s = divmod(total_s, 60)
    h, m = divmod(total_m, 60)
    return h, m, s, ms


def format_elapsed(seconds: float) -> str:
    h, m, s, ms = split_elapsed(seconds)
    return f"{h} hours, {m} minutes, {s} seconds and {ms} ms."


def format_solution(result: SolveResult | None) -> str:
    """Return every board from start to goal, then the move count and time.

    ``None`` stands for a solver that has not finished.
    """
    if result is None:
        return UNSOLVED
    blocks = [str(board) for board in result.path]
    return (
        "\n\n".join(blocks)
        + f"\n\nMoves count: {result.moves}"
        + f"\nElapsed time: {format_elapsed(result.elapsed)}"
    )
