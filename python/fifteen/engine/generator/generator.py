"""Generates solvable 15-puzzle boards."""

from __future__ import annotations

import random

from fifteen.models.board import GOAL, Board, Direction

DEFAULT_STEPS = 40


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the goal."""

    @staticmethod
    def solved() -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return GOAL

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random blank moves.

        A move never undoes the one before it, so short walks still drift
        away from the start.
        """
        rng = rng or random.Random()
        prev: Direction | None = None

        for _ in range(steps):
            options = board.neighbours()
            if prev is not None and len(options) > 1:
                options = [o for o in options if o[0] != prev.opposite]
            prev, board = rng.choice(options)
        return board

    @staticmethod
    def generate(steps: int = DEFAULT_STEPS, seed: int | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        if steps < 1:
            raise ValueError(f"steps must be positive, got {steps}.")
        rng = random.Random(seed)
        while True:
            board = GameGenerator.scramble(GOAL, steps, rng)
            if not board.is_goal():
                return board
