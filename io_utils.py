# io_utils.py
from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import json
from typing import Any
from config import Config
from floor_plan import FloorPlan, Room, Segment
import uuid


def make_run_dir(cfg: Config, base: str = "outputs") -> Path:
    """
    Create (if needed) and return a unique directory for this run.

    Parameters
    ----------
    cfg : Config
        The configuration object for this run (grid size, start, destination, ...).
    base : str, optional
        Base directory under which the run folder will be created, by default "outputs".

    Folder naming
    -------------
    The folder name encodes:
      - grid size (width x height)
      - point A and point B
      - a timestamp + short UUID suffix to guarantee uniqueness

    Example:
        outputs/run_W120x100_A90-60_B20-25_20251216-213012-ab12cd34/

    Returns
    -------
    Path
        The full path to the newly created run directory.
    """
    base_path = Path(base)
    base_path.mkdir(parents=True, exist_ok=True)

    ax, ay = cfg.start
    bx, by = cfg.destination
    parts = [
        f"W{cfg.width}x{cfg.height}",
        f"A{ax}-{ay}",
        f"B{bx}-{by}",
    ]
    base_name = "run_" + "_".join(parts)

    # timestamp + short random suffix so repeated runs don't collide
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]

    run_dir = base_path / f"{base_name}_{ts}-{uid}"
    run_dir.mkdir(exist_ok=False)
    return run_dir


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> None:
    """Serialize the Config object for this run into JSON."""
    data: dict[str, Any] = asdict(cfg)
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def save_summary(summary: dict[str, Any], run_dir: Path, filename: str = "summary.json") -> None:
    """
    Save the summary of a run as a JSON file.

    The structure is nested ("grid.width", "route.cost", "pathfinding.total_runtime")
    so it can be flattened into CSV columns or loaded as-is for analysis.
    """
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)


# ---------------------------------------------------------------------------
# Floor-plan files
# ---------------------------------------------------------------------------

def _json_int(v: Any) -> int:
    # JSON floats and booleans would silently change the geometry
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"expected an integer coordinate, got {v!r}")
    return v


def _json_list(data: dict[str, Any], key: str) -> list[Any]:
    section = data.get(key, [])
    if not isinstance(section, list):
        raise ValueError(f"floor plan '{key}' must be a list, got {section!r}")
    return section


def _segment_from_json(raw: Any, kind: str) -> Segment:
    if not isinstance(raw, (list, tuple)) or len(raw) != 4:
        raise ValueError(f"{kind} entry must be [x1, y1, x2, y2], got {raw!r}")
    try:
        x1, y1, x2, y2 = (_json_int(v) for v in raw)
    except ValueError as e:
        raise ValueError(f"{kind} entry has non-integer coordinates: {raw!r}") from e
    return Segment(x1, y1, x2, y2)


def _room_from_json(raw: Any) -> Room:
    if not isinstance(raw, dict):
        raise ValueError(f"room entry must be an object, got {raw!r}")
    try:
        return Room(
            room_id=str(raw["room_id"]),
            x1=_json_int(raw["x1"]),
            y1=_json_int(raw["y1"]),
            x2=_json_int(raw["x2"]),
            y2=_json_int(raw["y2"]),
        )
    except KeyError as e:
        raise ValueError(f"room entry is missing {e.args[0]!r}: {raw!r}") from e
    except ValueError as e:
        raise ValueError(f"room entry has non-integer coordinates: {raw!r}") from e


def floor_plan_from_dict(data: dict[str, Any]) -> FloorPlan:
    """
    Build a FloorPlan from its JSON form:
        {"name": ..., "walls": [[x1, y1, x2, y2], ...],
         "trunk_path": [[x1, y1, x2, y2], ...],
         "rooms": [{"room_id": ..., "x1": ..., "y1": ..., "x2": ..., "y2": ...}, ...]}
    Missing lists default to empty; coordinates must be JSON integers.
    """
    if not isinstance(data, dict):
        raise ValueError("floor plan must be a JSON object")
    return FloorPlan(
        name=str(data.get("name", "floor")),
        walls=[_segment_from_json(w, "wall") for w in _json_list(data, "walls")],
        trunk_path=[_segment_from_json(t, "trunk_path") for t in _json_list(data, "trunk_path")],
        rooms=[_room_from_json(r) for r in _json_list(data, "rooms")],
    )


def floor_plan_to_dict(plan: FloorPlan) -> dict[str, Any]:
    return {
        "name": plan.name,
        "walls": [[s.x1, s.y1, s.x2, s.y2] for s in plan.walls],
        "trunk_path": [[s.x1, s.y1, s.x2, s.y2] for s in plan.trunk_path],
        "rooms": [asdict(r) for r in plan.rooms],
    }


def load_floor_plan(path: str | Path) -> FloorPlan:
    with Path(path).open("r", encoding="utf-8") as f:
        return floor_plan_from_dict(json.load(f))


def save_floor_plan(plan: FloorPlan, path: str | Path) -> None:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(floor_plan_to_dict(plan), f, indent=2)
