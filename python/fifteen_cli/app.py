"""Command line front end: ``fifteen solve | scramble | check``."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from fifteen.engine.generator import DEFAULT_STEPS, GameGenerator
from fifteen.engine.solver import SolveOptions, Solver, is_solvable
from fifteen.errors import PuzzleError
from fifteen.models.board import Board
from fifteen_cli.reader import InputFormat, format_grid, read_board
from fifteen_cli.render import render_board, render_solution

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Optimal 15-puzzle solver (IDA*).")


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load(source: str, fmt: InputFormat) -> Board:
    try:
        return read_board(source, fmt)
    except PuzzleError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from None


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: int = typer.Option(
        0, "-v", "--verbose", count=True,
        help="Log search progress (-v) or everything (-vv).",
    ),
) -> None:
    """Optimal 15-puzzle solver (IDA*)."""
    _configure_logging(verbose)


@app.command()
def solve(
    source: str = typer.Argument("-", help="Board file, or '-' for stdin."),
    fmt: InputFormat = typer.Option(
        InputFormat.grid, "-F", "--format",
        help="grid: identifiers row-major, 0 = blank. cells: cell of each tile.",
    ),
    plain: bool = typer.Option(
        False, "--plain", help="Print the plain-text trace instead of tables."
    ),
    path: bool = typer.Option(
        True, "--path/--no-path", help="Show every board on the way."
    ),
    column_conflicts: bool = typer.Option(
        False, "--column-conflicts",
        help="Add column linear conflicts to the heuristic.",
    ),
    parity_check: bool = typer.Option(
        True, "--parity-check/--no-parity-check",
        help="Reject unsolvable boards before searching.",
    ),
    max_threshold: Optional[int] = typer.Option(
        None, "--max-threshold", min=0,
        help="Give up once the search bound exceeds this value.",
    ),
) -> None:
    """Find a shortest solution for a board."""
    board = _load(source, fmt)
    solver = Solver(
        board,
        SolveOptions(
            column_conflicts=column_conflicts,
            check_solvable=parity_check,
            max_threshold=max_threshold,
        ),
    )
    try:
        result = solver.solve()
    except PuzzleError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from None

    if plain:
        typer.echo(solver.report())
    else:
        console.print(render_solution(result, show_path=path))


@app.command()
def scramble(
    steps: int = typer.Option(
        DEFAULT_STEPS, "-n", "--steps", min=1, help="Random blank moves."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
) -> None:
    """Print a random solvable board in grid form."""
    typer.echo(format_grid(GameGenerator.generate(steps, seed)))


@app.command()
def check(
    source: str = typer.Argument("-", help="Board file, or '-' for stdin."),
    fmt: InputFormat = typer.Option(InputFormat.grid, "-F", "--format"),
) -> None:
    """Show a board, its heuristic and whether it can be solved."""
    board = _load(source, fmt)
    console.print(render_board(board))
    console.print(f"  Manhattan:        {board.manhattan()}")
    console.print(f"  Linear conflicts: {board.linear_conflicts()}")
    console.print(f"  Heuristic:        {board.heuristic()}")
    if is_solvable(board):
        console.print("  [green]Solvable[/green]")
    else:
        console.print("  [red]Unsolvable[/red]")
