"""Rich rendering of boards and solutions for the terminal."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.engine.report import format_elapsed
from fifteen.engine.solver import SolveResult
from fifteen.models.board import SIZE, Board

_ARROWS = {"left": "←", "right": "→", "up": "↑", "down": "↓"}


def render_board(board: Board, title: str | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        title=title,
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=2, justify="center")

    flat = board.grid()
    for r in range(SIZE):
        cells: list[str] = []
        for c in range(SIZE):
            cell = r * SIZE + c
            val = flat[cell]
            if val == 0:
                cells.append("[dim]XX[/dim]")
            elif board.is_tile_correct(cell):
                cells.append(f"[bold green]{val:02d}[/bold green]")
            else:
                cells.append(f"[bold white]{val:02d}[/bold white]")
        table.add_row(*cells)

    return table


def render_solution(result: SolveResult, show_path: bool = True) -> Panel:
    """Summary panel: the path (or just start and goal), moves and timing."""
    if show_path:
        boards = [
            render_board(board, title=str(i)) for i, board in enumerate(result.path)
        ]
    else:
        boards = [
            render_board(result.start, title="start"),
            render_board(result.node.board, title="goal"),
        ]

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(result.moves), style="bold yellow")
    stats.append("    Thresholds: ", style="dim")
    stats.append(", ".join(str(t) for t in result.thresholds), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(result.expanded), style="bold yellow")

    moves = Text("  ")
    moves.append(
        " ".join(_ARROWS[d.value] for d in result.directions) or "(already solved)",
        style="bold cyan",
    )

    elapsed = Text("  Elapsed: ", style="dim")
    elapsed.append(format_elapsed(result.elapsed), style="bold yellow")

    body = Group(
        Columns(boards, padding=(0, 2)),
        Text(""),
        Align.left(moves),
        stats,
        elapsed,
    )
    return Panel(
        body,
        title="[bold cyan]15-Puzzle  IDA*[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
