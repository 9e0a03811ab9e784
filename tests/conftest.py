"""
Shared pytest fixtures and utilities for testing
"""

import heapq
import random
from typing import Dict, Iterable, Optional

import matplotlib
matplotlib.use("Agg")

import pytest

from geometry import Coord, step_cost
from grid import Grid
from floor_plan import build_floor_plan


def make_grid(width: int, height: int, blocked: Iterable = (), trunk: Iterable = ()) -> Grid:
    """Open grid with the given cells blocked / tagged as trunk path"""
    grid = Grid(width, height)
    for c in blocked:
        grid.set_cell(Coord(*c), walkable=False)
    for c in trunk:
        grid.set_cell(Coord(*c), on_trunk_path=True)
    return grid


def random_grid(seed: int, width: int = 8, height: int = 8, density: float = 0.25) -> Grid:
    rng = random.Random(seed)
    blocked = [
        (x, y)
        for y in range(height)
        for x in range(width)
        if rng.random() < density
    ]
    return make_grid(width, height, blocked=blocked)


def dijkstra_cost(grid: Grid, start: Coord, goal: Coord) -> Optional[float]:
    """Brute-force reference: exhaustive Dijkstra over the grid's neighbour function"""
    start, goal = Coord(*start), Coord(*goal)
    if not grid.is_walkable(start) or not grid.is_walkable(goal):
        return None
    dist: Dict[Coord, float] = {start: 0.0}
    heap = [(0.0, start)]
    while heap:
        d, cur = heapq.heappop(heap)
        if d > dist.get(cur, float("inf")):
            continue
        for nb in grid.neighbors(cur):
            nd = d + step_cost(cur, nb)
            if nd < dist.get(nb, float("inf")):
                dist[nb] = nd
                heapq.heappush(heap, (nd, nb))
    return dist.get(goal)


def assert_valid_route(grid: Grid, route, start, goal):
    """Route starts/ends at the endpoints, stays on walkable cells, every step is 8-adjacent"""
    assert route[0] == start
    assert route[-1] == goal
    for c in route:
        assert grid.is_walkable(c), f"route crosses blocked cell {c}"
    for a, b in zip(route, route[1:]):
        assert max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1, f"non-adjacent step {a} -> {b}"


@pytest.fixture
def open_grid():
    """5x5 grid, everything walkable"""
    return make_grid(5, 5)


@pytest.fixture
def pillar_grid():
    """5x5 grid, everything walkable except the center cell (2, 2)"""
    return make_grid(5, 5, blocked=[(2, 2)])


@pytest.fixture(scope="session")
def house_grid():
    """Default 120x100 house floor plan"""
    return build_floor_plan(Grid(120, 100))
