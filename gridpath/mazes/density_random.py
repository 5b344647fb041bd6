# gridpath/mazes/density_random.py
#!/usr/bin/env python3
"""
Density random maze with clustering.

1. every cell becomes a wall with p=0.3
2. interior open cells with >= 2 walls among their 8 neighbours become walls
   with p=0.45 (counted in place, so earlier cells of this pass feed later ones)
3. every other cell on a 2-stride is opened again with p=0.4

Probabilistic: an unsolvable grid is a possible, accepted outcome.
"""

import random
from typing import List, Optional

from gridpath.core.grid import Grid
from gridpath.core.types import Cell
from gridpath.mazes.common import WallPlan

DENSITY = 0.3
CLUSTER_P = 0.45
CLUSTER_MIN_WALLS = 2
REOPEN_P = 0.4


def _wall_neighbours(grid: Grid, r: int, c: int) -> int:
    count = 0
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            cell = (r + dr, c + dc)
            if grid.in_bounds(cell) and grid.node_at(cell).is_wall:
                count += 1
    return count


def generate(grid: Grid, rng: Optional[random.Random] = None,
             density: float = DENSITY, cluster_p: float = CLUSTER_P,
             reopen_p: float = REOPEN_P) -> List[Cell]:
    rng = rng or random.Random()
    grid.clear_walls()
    plan = WallPlan(grid)
    h, w = grid.height, grid.width

    for r in range(h):
        for c in range(w):
            if not grid.node_at((r, c)).is_special and rng.random() < density:
                plan.place((r, c))

    for r in range(1, h - 1):
        for c in range(1, w - 1):
            node = grid.node_at((r, c))
            if node.is_special or node.is_wall:
                continue
            if _wall_neighbours(grid, r, c) >= CLUSTER_MIN_WALLS and rng.random() < cluster_p:
                plan.place((r, c))

    for r in range(0, h, 2):
        for c in range(0, w, 2):
            if not grid.node_at((r, c)).is_special and rng.random() < reopen_p:
                plan.clear((r, c))

    plan.clear_around_special_nodes()
    return plan.done("density_random")
