from fifteen.engine.report.report import (
    UNSOLVED,
    format_elapsed,
    format_solution,
    split_elapsed,
)

__all__ = ["UNSOLVED", "format_elapsed", "format_solution", "split_elapsed"]
