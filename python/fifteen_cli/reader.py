"""Normalises textual board input into ``Board`` values.

Two layouts are accepted, both as 16 whitespace-separated integers in any
line arrangement:

* ``grid``: tile identifiers row-major, ``0`` (or ``16``) for the blank;
* ``cells``: for tiles 1..15 then the blank, the cell (0..15) it sits on.
"""

from __future__ import annotations

import sys
from enum import StrEnum
from pathlib import Path

from fifteen.errors import BoardFormatError
from fifteen.models.board import CELLS, SIZE, Board


class InputFormat(StrEnum):
    grid = "grid"
    cells = "cells"


def _integers(text: str) -> list[int]:
    values: list[int] = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            raise BoardFormatError(f"Not an integer: {token!r}.") from None
    if len(values) != CELLS:
        raise BoardFormatError(f"Expected {CELLS} numbers, got {len(values)}.")
    return values


def _check_unique(values: list[int]) -> None:
    seen: set[int] = set()
    for v in values:
        if v in seen:
            raise BoardFormatError(f"Duplicate value: {v}.")
        seen.add(v)


def parse_grid(text: str) -> Board:
    values = _integers(text)
    for v in values:
        if not 0 <= v <= CELLS:
            raise BoardFormatError(f"Tile {v} is outside 0..{CELLS}.")
    blanks = [v for v in values if v in (0, CELLS)]
    if len(blanks) != 1:
        raise BoardFormatError(
            f"Expected exactly one blank (0 or {CELLS}), got {len(blanks)}."
        )
    _check_unique(values)
    return Board.from_grid(values)


def parse_cells(text: str) -> Board:
    values = _integers(text)
    for v in values:
        if not 0 <= v < CELLS:
            raise BoardFormatError(f"Cell {v} is outside 0..{CELLS - 1}.")
    _check_unique(values)
    return Board.from_cells(values)


_PARSERS = {
    InputFormat.grid: parse_grid,
    InputFormat.cells: parse_cells,
}


def parse_board(text: str, fmt: InputFormat = InputFormat.grid) -> Board:
    return _PARSERS[fmt](text)


def read_board(source: str, fmt: InputFormat = InputFormat.grid) -> Board:
    """Read a board from the file at *source*, or stdin when it is ``-``."""
    if source == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(source).read_text()
        except OSError as exc:
            raise BoardFormatError(f"Cannot read {source}: {exc.strerror}.") from exc
    return parse_board(text, fmt)


def format_grid(board: Board) -> str:
    """Inverse of ``parse_grid``: four lines of identifiers, 0 for the blank."""
    width = len(str(CELLS - 1))
    flat = board.grid()
    return "\n".join(
        " ".join(f"{v:>{width}}" for v in flat[r * SIZE : (r + 1) * SIZE])
        for r in range(SIZE)
    )
