from fifteen.engine.solver.solver import (
    Found,
    Pruned,
    SearchResult,
    SolveOptions,
    SolveResult,
    Solver,
    count_inversions,
    is_solvable,
)

__all__ = [
    "Found",
    "Pruned",
    "SearchResult",
    "SolveOptions",
    "SolveResult",
    "Solver",
    "count_inversions",
    "is_solvable",
]
