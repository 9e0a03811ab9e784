# navigation.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from geometry import Coord
from grid import Grid
from pathfinding import get_algorithm

Route = List[Coord]


@dataclass
class Navigator:
    """
    Two-leg route planning on a built floor grid:
      leg 1: current position -> nearest trunk-path cell (the junction)
      leg 2: junction -> destination

    current_route keeps the latest successful plan; failed requests do not
    clear it, so the last valid route stays visible until superseded.
    """
    grid: Grid
    path_algo_name: str = "AStar"

    # control terminal logging
    log_events: bool = False

    # results of the latest successful request, never set by callers
    current_route: Optional[Route] = field(default=None, init=False)
    last_junction: Optional[Coord] = field(default=None, init=False)

    def __post_init__(self) -> None:
        # own planner instance: its timing counters are not shared with other navigators
        self.path_algo = type(get_algorithm(self.path_algo_name))()
        self._log(f"[INIT] Navigator on {self.grid.width}x{self.grid.height} grid, "
                  f"PF={self.path_algo_name}")

    # ---------- logging helper ---------- #

    def _log(self, msg: str) -> None:
        if self.log_events:
            print(msg)

    # ---------------- trunk path ---------------- #

    def nearest_trunk_point(self, from_: Coord) -> Optional[Coord]:
        """
        Trunk cell closest (Euclidean) to from_. Ties go to the first cell
        in the grid's row-major enumeration. None if the grid has no trunk path.
        """
        best: Optional[Coord] = None
        best_dist = float("inf")
        origin = Coord(*from_)
        for c in self.grid.trunk_path_cells():
            d = origin.distance_to(c)
            if d < best_dist:
                best, best_dist = c, d
        return best

    def _leg_to_trunk(self, from_: Coord) -> Optional[Route]:
        junction = self.nearest_trunk_point(from_)
        if junction is None:
            self._log("[FAIL] Grid has no trunk-path cells")
            return None

        self._log(f"[TRUNK] Nearest trunk point to {tuple(from_)} is {tuple(junction)}")
        leg = self.path_algo.find_path(self.grid, from_, junction)
        if leg is None:
            self._log(f"[FAIL] No walkable route from {tuple(from_)} to trunk point {tuple(junction)}")
        return leg

    # ---------------- public API ---------------- #

    def route_to_trunk(self, from_: Coord) -> Optional[Route]:
        """Route from from_ to its nearest trunk-path cell, or None."""
        leg = self._leg_to_trunk(from_)
        if leg is None:
            return None

        self.current_route = leg
        self.last_junction = leg[-1]
        self._log(f"[ROUTE] To trunk: {len(leg)} cells")
        return leg

    def route_between(self, from_: Coord, to: Coord) -> Optional[Route]:
        """
        Full route from_ -> junction -> to. The junction appears once.
        Returns None if either leg fails; there is no partial result.
        """
        first = self._leg_to_trunk(from_)
        if first is None:
            return None

        junction = first[-1]
        second = self.path_algo.find_path(self.grid, junction, to)
        if second is None:
            self._log(f"[FAIL] No walkable route from trunk point {tuple(junction)} to {tuple(to)}")
            return None

        # drop first cell to avoid duplicating the junction
        route = first + second[1:]
        self.current_route = route
        self.last_junction = junction
        self._log(f"[ROUTE] {tuple(from_)} -> {tuple(to)} via {tuple(junction)}: "
                  f"{len(first)} + {len(second) - 1} cells")
        return route
