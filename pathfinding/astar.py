# pathfinding/astar.py
from __future__ import annotations

from time import perf_counter
from heapq import heappush, heappop
from itertools import count
from typing import Dict, List, Optional, Set, Tuple

from geometry import Coord, step_cost
from grid import Grid
from .base import PathfindingAlgorithm


class AStarPlanner(PathfindingAlgorithm):
    """
    A* path planner on an 8-connected grid.
    Orthogonal steps cost 1, diagonal steps sqrt(2); the Euclidean
    heuristic never overestimates that, so returned routes are optimal.

    Equal-f entries pop in discovery order, and neighbours come from the
    grid in a fixed order, so the same query always yields the same route.
    """

    name = "AStar"

    def __init__(self) -> None:
        # timing stats
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0
        self.last_expanded: int = 0

    # ---- stats API ----

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0
        self.last_expanded = 0

    def _update_stats(self, dt: float, expanded: int) -> None:
        self.last_runtime = dt
        self.last_expanded = expanded
        self.total_runtime += dt
        self.call_count += 1

    # ---- main planning API ----

    def find_path(self, grid: Grid, start: Coord, goal: Coord) -> Optional[List[Coord]]:
        """
        Returns a list of cells from start to goal (inclusive), or None if
        either end is blocked / out of bounds or no walkable route exists.
        """
        t0 = perf_counter()
        start = Coord(*start)
        goal = Coord(*goal)

        if not grid.is_walkable(start) or not grid.is_walkable(goal):
            self._update_stats(perf_counter() - t0, 0)
            return None

        if start == goal:
            self._update_stats(perf_counter() - t0, 0)
            return [start]

        # open set: (f, seq, cell); seq breaks f ties by discovery order.
        # A cell may sit in the heap more than once, closed filters stale entries.
        seq = count()
        open_heap: List[Tuple[float, int, Coord]] = []
        heappush(open_heap, (start.distance_to(goal), next(seq), start))

        g_cost: Dict[Coord, float] = {start: 0.0}
        parent: Dict[Coord, Coord] = {}
        closed: Set[Coord] = set()
        expanded = 0

        while open_heap:
            _, _, cur = heappop(open_heap)

            if cur in closed:
                continue
            if cur == goal:
                # reconstruct path
                path = [cur]
                while cur in parent:
                    cur = parent[cur]
                    path.append(cur)
                path.reverse()
                self._update_stats(perf_counter() - t0, expanded)
                return path

            closed.add(cur)
            expanded += 1
            g_cur = g_cost[cur]

            for nb in grid.neighbors(cur):
                if nb in closed:
                    continue

                new_g = g_cur + step_cost(cur, nb)

                if new_g < g_cost.get(nb, float("inf")):
                    g_cost[nb] = new_g
                    parent[nb] = cur
                    heappush(open_heap, (new_g + nb.distance_to(goal), next(seq), nb))

        # no path
        self._update_stats(perf_counter() - t0, expanded)
        return None


ALGORITHM = AStarPlanner()
