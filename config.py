# config.py
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass
class Config:
    # grid size in cells (the default floor plan is drawn for 120 x 100)
    width: int = 120
    height: int = 100

    # point A (current position) and point B (destination), (x, y)
    start: Tuple[int, int] = (90, 60)        # lower bedroom
    destination: Tuple[int, int] = (20, 25)  # dining room

    path_algo_name: str = "AStar"

    # JSON floor plan to use instead of the built-in catalog
    floor_plan_path: Optional[str] = None

    output_base: str = "outputs"
    log_events: bool = True
