# floor_plan.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from geometry import Coord
from grid import Grid


@dataclass(frozen=True)
class Segment:
    """Straight, axis-aligned run of cells from (x1, y1) to (x2, y2), both ends inclusive."""
    x1: int
    y1: int
    x2: int
    y2: int

    def __post_init__(self) -> None:
        if self.x1 != self.x2 and self.y1 != self.y2:
            raise ValueError(f"Segment must be axis-aligned: {self}")

    def cells(self) -> Iterator[Coord]:
        x_lo, x_hi = sorted((self.x1, self.x2))
        y_lo, y_hi = sorted((self.y1, self.y2))
        for y in range(y_lo, y_hi + 1):
            for x in range(x_lo, x_hi + 1):
                yield Coord(x, y)


@dataclass(frozen=True)
class Room:
    """Named rectangular region, corners inclusive."""
    room_id: str
    x1: int
    y1: int
    x2: int
    y2: int

    def center(self) -> Tuple[float, float]:
        return ((self.x1 + self.x2) / 2.0, (self.y1 + self.y2) / 2.0)


@dataclass
class FloorPlan:
    walls: List[Segment] = field(default_factory=list)
    trunk_path: List[Segment] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)
    name: str = "floor"


# ---------------------------------------------------------------------------
# Sample house, 120 x 100 cells
# ---------------------------------------------------------------------------
DEFAULT_FLOOR_PLAN = FloorPlan(
    name="house_floor1",
    walls=[
        Segment(30, 60, 30, 100),   # garage
        Segment(10, 10, 10, 35),    # dining, left
        Segment(10, 35, 25, 35),    # kitchen / pantry
        Segment(25, 35, 25, 50),
        Segment(25, 50, 25, 65),    # storage
        Segment(10, 65, 25, 65),
        Segment(60, 50, 60, 80),    # living | foyer
        Segment(35, 10, 55, 10),    # covered patio
        Segment(55, 10, 55, 25),
        Segment(70, 10, 70, 35),    # main bedroom
        Segment(70, 35, 110, 35),
        Segment(70, 45, 85, 45),    # baths
        Segment(85, 35, 85, 55),
        Segment(70, 55, 70, 80),    # lower bedroom
        Segment(85, 70, 85, 95),    # study
        Segment(85, 70, 110, 70),
        Segment(60, 80, 75, 80),    # foyer / porch
    ],
    trunk_path=[
        Segment(12, 20, 38, 20),    # dining
        Segment(38, 18, 52, 18),    # patio connection
        Segment(52, 18, 108, 18),   # main bedroom
        Segment(38, 20, 38, 62),    # living room corridor
        Segment(38, 62, 95, 62),    # lower bedroom
    ],
    rooms=[
        Room("dining", 11, 11, 34, 34),
        Room("living", 26, 36, 59, 79),
        Room("patio", 36, 11, 54, 24),
        Room("bedroom_main", 71, 11, 109, 34),
        Room("bedroom_lower", 71, 46, 109, 79),
        Room("bath_upper", 86, 36, 100, 44),
        Room("bath_lower", 86, 46, 100, 54),
        Room("study", 86, 71, 109, 94),
        Room("foyer", 61, 71, 84, 94),
        Room("pantry", 11, 36, 24, 49),
        Room("storage", 11, 51, 24, 64),
        Room("garage", 11, 66, 29, 94),
    ],
)


def _add_perimeter(grid: Grid) -> None:
    for x in range(grid.width):
        grid.set_cell(Coord(x, 0), walkable=False)
        grid.set_cell(Coord(x, grid.height - 1), walkable=False)
    for y in range(grid.height):
        grid.set_cell(Coord(0, y), walkable=False)
        grid.set_cell(Coord(grid.width - 1, y), walkable=False)


def build_floor_plan(grid: Grid, plan: FloorPlan = DEFAULT_FLOOR_PLAN) -> Grid:
    """
    Populate grid from a floor-plan catalog. Steps run in a fixed order:
      1) reset every cell to walkable
      2) perimeter walls on the four border rows / columns
      3) interior wall segments
      4) trunk-path segments (walkability untouched)
      5) room rectangles (walkability and trunk flags untouched)
    Anything that overhangs the grid is clipped. Returns the same grid.
    """
    grid.reset()
    _add_perimeter(grid)

    for seg in plan.walls:
        for c in seg.cells():
            grid.set_cell(c, walkable=False)

    for seg in plan.trunk_path:
        for c in seg.cells():
            grid.set_cell(c, on_trunk_path=True)

    for room in plan.rooms:
        grid.tag_room(room.room_id, room.x1, room.y1, room.x2, room.y2)

    return grid
