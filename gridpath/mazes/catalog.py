# gridpath/mazes/catalog.py
#!/usr/bin/env python3
"""
Maze registry used by the viewer and the compare CLI.

generate_maze() is the one entry point that touches a live grid: it clears
old walls, resets search fields and runs the generator under the grid's busy
guard, so a maze can never be drawn into a grid mid-search.
"""

import logging
import random
from typing import Callable, Dict, List, Optional

from gridpath.core.grid import Grid, reset_search_fields
from gridpath.core.types import Cell
from gridpath.mazes import basic_random, density_random, dfs, recursive_division, stair

log = logging.getLogger(__name__)

Generator = Callable[..., List[Cell]]

MAZES: Dict[str, Generator] = {
    "recursive": recursive_division.generate,
    "basic_random": basic_random.generate,
    "random": density_random.generate,
    "stair": stair.generate,
    "dfs": dfs.generate,
}

LABELS: Dict[str, str] = {
    "recursive": "Recursive Division",
    "basic_random": "Basic Random",
    "random": "Random (Density)",
    "stair": "Stair",
    "dfs": "DFS Backtracker",
}


def generate_maze(grid: Grid, name: str, seed: Optional[int] = None,
                  clear: bool = True, **options) -> List[Cell]:
    """Generate maze `name` into grid; returns the ordered wall placements."""
    if name not in MAZES:
        raise ValueError(f"Unknown maze {name!r}; expected one of {sorted(MAZES)}")
    owner = object()
    grid.claim(owner)
    try:
        if clear:
            grid.clear_walls()
        reset_search_fields(grid)
        placements = MAZES[name](grid, random.Random(seed), **options)
    finally:
        grid.release(owner)
    log.debug("maze %s (seed=%s): %d placements", name, seed, len(placements))
    return placements
