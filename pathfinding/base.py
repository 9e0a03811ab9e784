# pathfinding/base.py
from typing import List, Optional, Protocol

from geometry import Coord
from grid import Grid


class PathfindingAlgorithm(Protocol):
    name: str
    # Optional timing stats (per algorithm implementation)
    total_runtime: float
    call_count: int
    last_runtime: float

    def find_path(self, grid: Grid, start: Coord, goal: Coord) -> Optional[List[Coord]]:
        ...

    def reset_stats(self) -> None:
        ...
