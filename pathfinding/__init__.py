# pathfinding/__init__.py
import importlib
import pkgutil
from typing import Dict
from .base import PathfindingAlgorithm

# name -> planner instance, filled from every submodule that
# exposes a module-level ALGORITHM
PATHFINDING_ALGOS: Dict[str, PathfindingAlgorithm] = {}


def load_algorithms() -> None:
    global PATHFINDING_ALGOS
    found: Dict[str, PathfindingAlgorithm] = {}
    for info in pkgutil.iter_modules(__path__):
        if info.name == "base":
            continue
        module = importlib.import_module(f"{__name__}.{info.name}")
        algo = getattr(module, "ALGORITHM", None)
        if algo is None:
            continue
        if algo.name in found:
            raise ValueError(f"Duplicate pathfinding name: {algo.name}")
        found[algo.name] = algo
    PATHFINDING_ALGOS = found


def get_algorithm(name: str) -> PathfindingAlgorithm:
    try:
        return PATHFINDING_ALGOS[name]
    except KeyError:
        known = ", ".join(sorted(PATHFINDING_ALGOS))
        raise ValueError(f"Unknown pathfinding algorithm: {name} (known: {known})") from None


load_algorithms()
