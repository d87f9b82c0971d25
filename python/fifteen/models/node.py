"""Search-tree node used by the IDA* solver."""

from __future__ import annotations

from dataclasses import dataclass

from fifteen.models.board import Board


@dataclass(frozen=True, slots=True, eq=False)
class SearchNode:
    """A board reached after ``cost`` moves, chained to the node it came from."""

    parent: SearchNode | None
    board: Board
    cost: int

    def child(self, board: Board) -> SearchNode:
        return SearchNode(parent=self, board=board, cost=self.cost + 1)

    def path(self) -> list[Board]:
        """Return the boards from the root down to this node."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards
