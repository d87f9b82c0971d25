#!/usr/bin/env python3
"""15-puzzle solver.

Usage::

    python main.py solve board.txt            # rich view of a shortest solution
    python main.py solve --plain < board.txt  # plain-text trace
    python main.py scramble -n 30 --seed 7    # random solvable board
    python main.py check board.txt            # heuristic and solvability
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fifteen_cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
