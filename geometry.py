# geometry.py
from __future__ import annotations

from math import sqrt
from typing import NamedTuple, Sequence

DIAGONAL_COST: float = sqrt(2.0)
ORTHOGONAL_COST: float = 1.0


class Coord(NamedTuple):
    """Grid cell address, x = column, y = row (y grows downward)."""
    x: int
    y: int

    def distance_to(self, other: Coord) -> float:
        dx = self.x - other[0]
        dy = self.y - other[1]
        return sqrt(dx * dx + dy * dy)


def is_adjacent(a: Coord, b: Coord) -> bool:
    """True if b is one of the 8 neighbours of a (a cell is not its own neighbour)."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return max(dx, dy) == 1


def step_cost(a: Coord, b: Coord) -> float:
    """
    Cost of moving between two adjacent cells:
      - 1.0 if only x or only y changes
      - sqrt(2) if both change
    """
    if a[0] != b[0] and a[1] != b[1]:
        return DIAGONAL_COST
    return ORTHOGONAL_COST


def route_cost(route: Sequence[Coord]) -> float:
    """Sum of step costs along a route (0.0 for empty / single-cell routes)."""
    total = 0.0
    for a, b in zip(route, route[1:]):
        total += step_cost(a, b)
    return total
