"""Exceptions raised by the puzzle core and its input layer."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the package raises on purpose."""


class InvalidBoardError(PuzzleError, ValueError):
    """The one-tile-per-cell invariant of a board does not hold."""


class UnsolvableBoardError(PuzzleError):
    """The board has the wrong permutation parity to reach the goal."""


class SearchLimitError(PuzzleError):
    """The search bound grew past the configured maximum."""


class BoardFormatError(PuzzleError, ValueError):
    """Textual board input could not be normalised into a board."""
