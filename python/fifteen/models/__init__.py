from fifteen.models.board import GOAL, Board, Direction
from fifteen.models.node import SearchNode

__all__ = ["GOAL", "Board", "Direction", "SearchNode"]
