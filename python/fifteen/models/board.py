"""Bit-packed board model for the 15-puzzle.

Each of the 16 tile identifiers owns a 16-bit pattern with exactly one bit
set: the bit index is the cell (row-major, 0..15) the tile occupies.  Tile
``i + 1`` lives in ``tiles[i]``; index 15 (identifier 16) is the blank::

     0  1  2  3
     4  5  6  7
     8  9 10 11
    12 13 14 15

Moving the blank is a shift of its pattern plus a swap with whichever tile
pattern matches the shifted bit, so every move is a handful of integer ops.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from fifteen.errors import InvalidBoardError

SIZE = 4
CELLS = SIZE * SIZE
BLANK = CELLS - 1  # index of the blank pattern
FULL_MASK = 0xFFFF

# Cells a shifted blank may legally land on.
_LEFT_TARGETS = 0x7777   # columns 0-2
_RIGHT_TARGETS = 0xEEEE  # columns 1-3

_ROW_MASKS = (0x000F, 0x00F0, 0x0F00, 0xF000)
_COLUMN_MASKS = (0x1111, 0x2222, 0x4444, 0x8888)


class Direction(StrEnum):
    """The way the *blank* travels on a move."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


# -- pattern geometry ---------------------------------------------------------


def _row_of(pattern: int) -> int:
    for row, mask in enumerate(_ROW_MASKS):
        if pattern & mask:
            return row
    raise InvalidBoardError(f"pattern {pattern:#06x} is outside the grid")


def _col_of(pattern: int) -> int:
    for col, mask in enumerate(_COLUMN_MASKS):
        if pattern & mask:
            return col
    raise InvalidBoardError(f"pattern {pattern:#06x} is outside the grid")


def _manhattan(pattern: int, goal: int) -> int:
    if pattern == goal:
        return 0
    return abs(_row_of(pattern) - _row_of(goal)) + abs(
        _col_of(pattern) - _col_of(goal)
    )


# _DISTANCE[i][pattern] is the Manhattan distance of tile i+1 from its goal
# cell when it sits on ``pattern``.
_DISTANCE: tuple[dict[int, int], ...] = tuple(
    {1 << cell: _manhattan(1 << cell, 1 << tile) for cell in range(CELLS)}
    for tile in range(BLANK)
)


def _conflicts(tiles: tuple[int, ...], line: tuple[int, ...], mask: int) -> int:
    """Linear-conflict cost of one row or column.

    *line* lists the tile indices whose goal lies on the line, in goal
    order; *mask* selects the line's cells.  Inside a line a larger bit is
    further right (rows) or further down (columns), so the masked patterns
    of the tiles already on the line must increase to be in goal order.
    Every tile outside the longest increasing run has to step off the line
    and back, costing two extra moves.
    """
    placed = [tiles[i] & mask for i in line]
    placed = [p for p in placed if p]
    if len(placed) < 2:
        return 0
    runs: list[int] = []
    for k, here in enumerate(placed):
        runs.append(1 + max((runs[j] for j in range(k) if placed[j] < here), default=0))
    return 2 * (len(placed) - max(runs))


_ROW_LINES = tuple(
    tuple(i for i in range(SIZE * r, SIZE * r + SIZE) if i != BLANK)
    for r in range(SIZE)
)
_COLUMN_LINES = tuple(
    tuple(i for i in range(c, CELLS, SIZE) if i != BLANK) for c in range(SIZE)
)


# -- board --------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable 15-puzzle position.

    ``tiles`` holds the 16 one-hot patterns.  Equality and hashing compare
    every pattern, so two boards are equal iff every tile shares a cell.
    """

    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        tiles = tuple(self.tiles)
        if len(tiles) != CELLS:
            raise InvalidBoardError(
                f"Expected {CELLS} tile patterns, got {len(tiles)}."
            )
        for i, pattern in enumerate(tiles):
            if pattern <= 0 or pattern > FULL_MASK or pattern & (pattern - 1):
                raise InvalidBoardError(
                    f"Tile {i + 1} pattern {pattern!r} is not a single cell."
                )
        if len(set(tiles)) != CELLS:
            raise InvalidBoardError("Two tiles share a cell.")
        object.__setattr__(self, "tiles", tiles)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def _unchecked(cls, tiles: tuple[int, ...]) -> Board:
        """Wrap patterns produced by a move, which keep the invariant."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "tiles", tiles)
        return obj

    @classmethod
    def from_cells(cls, cells: list[int] | tuple[int, ...]) -> Board:
        """Create a board from the cell of each tile.

        ``cells[i]`` is the 0-based cell of the tile with identifier
        ``i + 1``; the last entry places the blank.
        """
        if len(cells) != CELLS:
            raise InvalidBoardError(f"Expected {CELLS} cells, got {len(cells)}.")
        if sorted(cells) != list(range(CELLS)):
            raise InvalidBoardError(
                f"Cells must be a permutation of 0..{CELLS - 1}, got {list(cells)}."
            )
        return cls(tuple(1 << cell for cell in cells))

    @classmethod
    def from_grid(cls, values: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major list of tile identifiers.

        ``0`` (or ``16``) marks the blank.  Example::

            Board.from_grid([1, 2, 3, 4, 5, 6, 7, 8,
                             9, 10, 11, 12, 13, 14, 0, 15])
        """
        if len(values) != CELLS:
            raise InvalidBoardError(
                f"Expected {CELLS} values for a {SIZE}×{SIZE} board, "
                f"got {len(values)}."
            )
        ids = [CELLS if v == 0 else v for v in values]
        if sorted(ids) != list(range(1, CELLS + 1)):
            raise InvalidBoardError(
                f"Values must be a permutation of 0..{CELLS - 1}, got {list(values)}."
            )
        tiles = [0] * CELLS
        for cell, tile in enumerate(ids):
            tiles[tile - 1] = 1 << cell
        return cls(tuple(tiles))

    # -- queries --------------------------------------------------------------

    @property
    def blank_cell(self) -> int:
        return self.tiles[BLANK].bit_length() - 1

    def cells(self) -> list[int]:
        """Return the cell of every tile, blank last."""
        return [pattern.bit_length() - 1 for pattern in self.tiles]

    def grid(self) -> list[int]:
        """Return the row-major tile identifiers, ``0`` for the blank."""
        flat = [0] * CELLS
        for i, pattern in enumerate(self.tiles[:BLANK]):
            flat[pattern.bit_length() - 1] = i + 1
        return flat

    def tile_at(self, cell: int) -> int:
        return self.grid()[cell]

    def is_tile_correct(self, cell: int) -> bool:
        """Check if the tile on *cell* is in its goal position."""
        return (self.tile_at(cell) or CELLS) - 1 == cell

    def is_goal(self) -> bool:
        return self.tiles == GOAL.tiles

    # -- moves ----------------------------------------------------------------

    def _slide(self, target: int, direction: Direction) -> Board:
        """Swap the blank with the tile that occupies *target*."""
        blank = self.tiles[BLANK]
        for i in range(BLANK):
            if self.tiles[i] & target:
                tiles = list(self.tiles)
                tiles[i] = blank
                tiles[BLANK] = target
                return Board._unchecked(tuple(tiles))
        raise InvalidBoardError(f"Illegal {direction} move: no tile under the blank.")

    def move_left(self) -> Board | None:
        target = self.tiles[BLANK] >> 1
        if not target & _LEFT_TARGETS:
            return None
        return self._slide(target, Direction.LEFT)

    def move_right(self) -> Board | None:
        target = self.tiles[BLANK] << 1
        if not target & _RIGHT_TARGETS:
            return None
        return self._slide(target, Direction.RIGHT)

    def move_up(self) -> Board | None:
        target = self.tiles[BLANK] >> SIZE
        if not target:
            return None
        return self._slide(target, Direction.UP)

    def move_down(self) -> Board | None:
        target = (self.tiles[BLANK] << SIZE) & FULL_MASK
        if not target:
            return None
        return self._slide(target, Direction.DOWN)

    def move(self, direction: Direction) -> Board | None:
        """Move the blank one cell in *direction*; ``None`` when off-grid."""
        return _MOVES[direction](self)

    def neighbours(self) -> list[tuple[Direction, Board]]:
        """Return ``(direction, board)`` for every legal move."""
        out: list[tuple[Direction, Board]] = []
        for direction, mover in _MOVES.items():
            child = mover(self)
            if child is not None:
                out.append((direction, child))
        return out

    def children(self) -> list[Board]:
        """Return the boards one move away: left, right, up, down."""
        return [child for _, child in self.neighbours()]

    # -- heuristic ------------------------------------------------------------

    def manhattan(self) -> int:
        tiles = self.tiles
        return sum(_DISTANCE[i][tiles[i]] for i in range(BLANK))

    def linear_conflicts(self, columns: bool = False) -> int:
        cost = 0
        for r, line in enumerate(_ROW_LINES):
            cost += _conflicts(self.tiles, line, _ROW_MASKS[r])
        if columns:
            for c, line in enumerate(_COLUMN_LINES):
                cost += _conflicts(self.tiles, line, _COLUMN_MASKS[c])
        return cost

    def heuristic(self, column_conflicts: bool = False) -> int:
        """Admissible lower bound on the moves left to reach the goal."""
        return self.manhattan() + self.linear_conflicts(column_conflicts)

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        flat = self.grid()
        lines: list[str] = []
        for r in range(SIZE):
            row = flat[r * SIZE : (r + 1) * SIZE]
            cells = ["XX" if v == 0 else f"{v:02d}" for v in row]
            lines.append("| " + " | ".join(cells) + " |")
        return "\n".join(lines)


_MOVES = {
    Direction.LEFT: Board.move_left,
    Direction.RIGHT: Board.move_right,
    Direction.UP: Board.move_up,
    Direction.DOWN: Board.move_down,
}

GOAL = Board(tuple(1 << i for i in range(CELLS)))
