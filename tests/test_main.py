"""
End-to-end test for the single-run entry point
"""

import json

import main
from config import Config
from floor_plan import FloorPlan, Segment
from io_utils import save_floor_plan


def _only_run_dir(base):
    runs = [p for p in base.iterdir() if p.is_dir()]
    assert len(runs) == 1
    return runs[0]


def test_main_default_floor_plan(tmp_path, monkeypatch):
    out_base = tmp_path / "outputs"
    monkeypatch.setattr(main, "Config", lambda: Config(output_base=str(out_base), log_events=False))

    main.main()

    run_dir = _only_run_dir(out_base)
    assert (run_dir / "route.png").exists()
    assert (run_dir / "config.json").exists()
    summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["route"]["found"] is True
    assert summary["route"]["junction"] == [90, 62]
    assert summary["request"]["start_room"] == "bedroom_lower"
    assert summary["request"]["destination_room"] == "dining"
    assert summary["pathfinding"]["call_count"] == 2


def test_main_unreachable_destination(tmp_path, monkeypatch, capsys):
    plan_path = tmp_path / "plan.json"
    # vertical wall splits the floor; trunk only on the left half
    save_floor_plan(
        FloorPlan(name="split", walls=[Segment(10, 0, 10, 19)], trunk_path=[Segment(2, 5, 8, 5)]),
        plan_path,
    )
    out_base = tmp_path / "outputs"
    monkeypatch.setattr(main, "Config", lambda: Config(
        width=20, height=20, start=(3, 3), destination=(15, 15),
        floor_plan_path=str(plan_path), output_base=str(out_base), log_events=True,
    ))

    main.main()

    assert "[RESULT] No route" in capsys.readouterr().out
    summary = json.loads((_only_run_dir(out_base) / "summary.json").read_text(encoding="utf-8"))
    assert summary["route"]["found"] is False
    assert summary["route"]["length"] == 0
    assert summary["grid"]["floor_plan"] == "split"
