# grid.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

import numpy as np

from geometry import Coord

# 8-connected moves in fixed order: N, E, S, W, NE, SE, SW, NW
DIRECTIONS: List[Coord] = [
    Coord(0, -1),
    Coord(1, 0),
    Coord(0, 1),
    Coord(-1, 0),
    Coord(1, -1),
    Coord(1, 1),
    Coord(-1, 1),
    Coord(-1, -1),
]


@dataclass(frozen=True)
class Cell:
    """State of a single grid cell."""
    walkable: bool = True
    on_trunk_path: bool = False
    room_id: Optional[str] = None


_DEFAULT_CELL = Cell()


class Grid:
    """
    Fixed-size floor grid:
      - every in-bounds Coord maps to exactly one Cell
      - width / height never change after construction
      - out-of-bounds queries return None / False, they never raise

    Cells are frozen; construction helpers (reset, set_cell, tag_room)
    swap in modified copies. Once the floor plan is built the grid is
    only read, so it can be shared by any number of planners.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # cells[y][x]
        self.cells: List[List[Cell]] = [
            [_DEFAULT_CELL for _ in range(width)] for _ in range(height)
        ]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    def reset(self) -> None:
        """Every cell back to walkable, off the trunk path, no room."""
        for row in self.cells:
            for x in range(self.width):
                row[x] = _DEFAULT_CELL

    def set_cell(
        self,
        c: Coord,
        walkable: Optional[bool] = None,
        on_trunk_path: Optional[bool] = None,
    ) -> None:
        """Overwrite the given flags, keep the others. Out-of-bounds is a no-op."""
        if not self.in_bounds(c):
            return
        x, y = c
        cell = self.cells[y][x]
        self.cells[y][x] = replace(
            cell,
            walkable=cell.walkable if walkable is None else walkable,
            on_trunk_path=cell.on_trunk_path if on_trunk_path is None else on_trunk_path,
        )

    def tag_room(self, room_id: str, x1: int, y1: int, x2: int, y2: int) -> None:
        """Tag the inclusive rectangle with room_id; walkability is left alone."""
        x_lo, x_hi = sorted((x1, x2))
        y_lo, y_hi = sorted((y1, y2))
        for y in range(max(y_lo, 0), min(y_hi, self.height - 1) + 1):
            row = self.cells[y]
            for x in range(max(x_lo, 0), min(x_hi, self.width - 1) + 1):
                row[x] = replace(row[x], room_id=room_id)

    # ------------------------------------------------------------------ #
    # Queries                                                            #
    # ------------------------------------------------------------------ #
    def in_bounds(self, c: Coord) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, c: Coord) -> Optional[Cell]:
        if not self.in_bounds(c):
            return None
        x, y = c
        return self.cells[y][x]

    def is_walkable(self, c: Coord) -> bool:
        cell = self.cell_at(c)
        return cell is not None and cell.walkable

    def is_on_trunk_path(self, c: Coord) -> bool:
        cell = self.cell_at(c)
        return cell is not None and cell.on_trunk_path

    def room_at(self, c: Coord) -> Optional[str]:
        cell = self.cell_at(c)
        return None if cell is None else cell.room_id

    def trunk_path_cells(self) -> List[Coord]:
        """All trunk-path cells in row-major order (y, then x)."""
        return [
            Coord(x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self.cells[y][x].on_trunk_path
        ]

    def neighbors(self, c: Coord) -> List[Coord]:
        """Walkable 8-connected neighbours, ordered N, E, S, W, NE, SE, SW, NW."""
        x, y = c
        candidates = [Coord(x + dx, y + dy) for dx, dy in DIRECTIONS]
        return [q for q in candidates if self.is_walkable(q)]

    def walkable_mask(self) -> np.ndarray:
        """(height, width) bool array, True where walkable."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                mask[y, x] = cell.walkable
        return mask
