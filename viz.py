# viz.py
from __future__ import annotations
from typing import Optional, Sequence
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from geometry import Coord
from grid import Grid
from floor_plan import FloorPlan


def _trunk_runs(cells: Sequence[Coord]) -> list[list[Coord]]:
    """
    Split row-major trunk cells into drawable runs: consecutive cells
    that are 8-adjacent stay in the same polyline.
    """
    runs: list[list[Coord]] = []
    for c in cells:
        if runs and max(abs(c.x - runs[-1][-1].x), abs(c.y - runs[-1][-1].y)) == 1:
            runs[-1].append(c)
        else:
            runs.append([c])
    return runs


def _trunk_segments(grid: Grid, plan: FloorPlan) -> list[list[Coord]]:
    """
    One polyline per catalog trunk segment, clipped to the grid. Segments
    entirely outside the grid are skipped.
    """
    runs: list[list[Coord]] = []
    for seg in plan.trunk_path:
        cells = [c for c in seg.cells() if grid.in_bounds(c)]
        if cells:
            runs.append([cells[0], cells[-1]] if len(cells) > 1 else cells)
    return runs


def draw_floor(
    grid: Grid,
    out_path: str | Path,
    route: Optional[Sequence[Coord]] = None,
    start: Optional[Coord] = None,
    destination: Optional[Coord] = None,
    plan: Optional[FloorPlan] = None,
    title: str = "Indoor navigation",
) -> None:
    """
    Draw the floor grid:
      - walkable cells: light background
      - walls: black
      - room labels: gray text at room centers (when plan is given)
      - trunk path: red line
      - computed route: blue dashed line
      - point A (start): green circle
      - point B (destination): blue circle
    """
    w, h = grid.width, grid.height
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    # --- Color palette (RGB in 0–1) ---
    bgcolor   = np.array([0.96, 0.96, 0.96])  # #F5F5F5
    wallcolor = np.array([0.0, 0.0, 0.0])
    trunk_color = "#e53935"
    route_color = "#1565c0"
    start_color = "#4CAF50"
    dest_color  = "#2196F3"

    img = np.zeros((h, w, 3), dtype=float)
    img[:, :, :] = bgcolor
    img[~grid.walkable_mask()] = wallcolor

    fig, ax = plt.subplots(figsize=(max(w / 10.0, 4.0), max(h / 10.0, 4.0)))
    # y grows downward, like the screen
    ax.imshow(img, origin="upper", interpolation="nearest")

    # Room labels
    if plan is not None:
        for room in plan.rooms:
            cx, cy = room.center()
            ax.text(cx, cy, room.room_id, ha="center", va="center",
                    fontsize=7, color="#757575")

    # Trunk path: catalog segments when known, otherwise rebuilt from the cells
    if plan is not None:
        trunk_runs = _trunk_segments(grid, plan)
    else:
        trunk_runs = _trunk_runs(grid.trunk_path_cells())
    for run in trunk_runs:
        xs = [c.x for c in run]
        ys = [c.y for c in run]
        if len(run) == 1:
            ax.scatter(xs, ys, marker="s", s=6, c=trunk_color)
        else:
            ax.plot(xs, ys, color=trunk_color, linewidth=2.0)

    # Computed route
    if route and len(route) >= 2:
        ax.plot(
            [c[0] for c in route],
            [c[1] for c in route],
            color=route_color,
            linewidth=2.5,
            linestyle=(0, (4, 2)),
        )

    # Markers
    for pos, color, label in ((start, start_color, "A"), (destination, dest_color, "B")):
        if pos is None:
            continue
        ax.scatter([pos[0]], [pos[1]], marker="o", s=160, c=color,
                   edgecolors="white", linewidths=1.5, zorder=3)
        ax.text(pos[0], pos[1], label, ha="center", va="center",
                fontsize=8, fontweight="bold", color="white", zorder=4)

    ax.set_xlim(-0.5, w - 0.5)
    ax.set_ylim(h - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    fig.suptitle(title, fontsize=16, y=0.98)

    # --- Legend: single line, below the title ---
    handles = [
        Patch(facecolor=wallcolor, edgecolor="black", label="wall"),
        Line2D([0], [0], color=trunk_color, linewidth=2.0, label="trunk path"),
        Line2D([0], [0], color=route_color, linewidth=2.5, linestyle=(0, (4, 2)), label="A→B route"),
        Line2D([0], [0], marker="o", color="none", markerfacecolor=start_color,
               markersize=9, label="point A"),
        Line2D([0], [0], marker="o", color="none", markerfacecolor=dest_color,
               markersize=9, label="point B"),
    ]
    fig.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.95),
        ncol=len(handles),
        fontsize=9,
        frameon=False,
    )

    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.93])

    fig.savefig(out_path, dpi=150)
    plt.close(fig)
