from pathlib import Path

from config import Config
from geometry import Coord, route_cost
from grid import Grid
from floor_plan import DEFAULT_FLOOR_PLAN, build_floor_plan
from navigation import Navigator
from viz import draw_floor
from io_utils import load_floor_plan, make_run_dir, save_config, save_summary


def main() -> None:
    """
    Single-run entry point for the indoor navigation engine.

    Typical usage:
      1. Open config.py and edit the Config defaults
         (grid size, point A / point B, floor-plan file, ...).
      2. Run:
             python main.py
      3. Inspect the output folder under outputs/ (PNG, config.json, summary.json).
    """

    # ------------------------------------------------------------------
    # 1) Configuration and output directory
    # ------------------------------------------------------------------
    cfg = Config()
    log_events = cfg.log_events

    run_dir = make_run_dir(cfg, base=cfg.output_base)
    save_config(cfg, run_dir)

    # ------------------------------------------------------------------
    # 2) Build the floor grid
    # ------------------------------------------------------------------
    # Walls, trunk path and rooms come from the built-in catalog unless
    # cfg.floor_plan_path points at a JSON floor plan.
    plan = DEFAULT_FLOOR_PLAN
    if cfg.floor_plan_path is not None:
        plan = load_floor_plan(cfg.floor_plan_path)

    grid = build_floor_plan(Grid(cfg.width, cfg.height), plan)
    start = Coord(*cfg.start)
    destination = Coord(*cfg.destination)

    if log_events:
        print(f"[INIT] Floor plan '{plan.name}': {len(plan.walls)} walls, "
              f"{len(grid.trunk_path_cells())} trunk cells, {len(plan.rooms)} rooms")
        print(f"[INIT] A={tuple(start)} ({grid.room_at(start)}), "
              f"B={tuple(destination)} ({grid.room_at(destination)})")

    # ------------------------------------------------------------------
    # 3) Plan A -> trunk path -> B
    # ------------------------------------------------------------------
    nav = Navigator(grid=grid, path_algo_name=cfg.path_algo_name, log_events=log_events)
    nav.path_algo.reset_stats()

    route = nav.route_between(start, destination)
    if route is None and log_events:
        print(f"[RESULT] No route from {tuple(start)} to {tuple(destination)}")

    draw_floor(
        grid,
        out_path=run_dir / "route.png",
        route=route,
        start=start,
        destination=destination,
        plan=plan,
        title=f"{plan.name}: A → B",
    )

    # ------------------------------------------------------------------
    # 4) Summary
    # ------------------------------------------------------------------
    pa = nav.path_algo
    summary = {
        "grid": {
            "width": grid.width,
            "height": grid.height,
            "floor_plan": plan.name,
            "trunk_cells": len(grid.trunk_path_cells()),
        },
        "request": {
            "start": list(start),
            "destination": list(destination),
            "start_room": grid.room_at(start),
            "destination_room": grid.room_at(destination),
        },
        "route": {
            "found": route is not None,
            "junction": list(nav.last_junction) if route is not None else None,
            "length": len(route) if route is not None else 0,
            "cost": route_cost(route) if route is not None else None,
        },
        "pathfinding": {
            "name": pa.name,
            "total_runtime": pa.total_runtime,
            "call_count": pa.call_count,
            "avg_runtime": pa.total_runtime / pa.call_count if pa.call_count else 0.0,
        },
    }
    save_summary(summary, run_dir)

    if log_events:
        if route is not None:
            print(f"[RESULT] Route: {len(route)} cells, cost {route_cost(route):.3f}")
        print(f"Outputs written to {Path(run_dir).resolve()}")


if __name__ == "__main__":
    main()
