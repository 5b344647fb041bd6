# gridpath/mazes/basic_random.py
#!/usr/bin/env python3
"""Border plus short random wall stubs on a 2-stride. No solvability guarantee."""

import random
from typing import List, Optional

from gridpath.core.grid import Grid
from gridpath.core.types import Cell
from gridpath.mazes.common import WallPlan

DENSITY = 0.25
DOUBLE_EXTENSION_P = 0.3

# right, left, down, up as (d_row, d_col)
EXTENSIONS: List[Cell] = [(0, 1), (0, -1), (1, 0), (-1, 0)]


def generate(grid: Grid, rng: Optional[random.Random] = None,
             density: float = DENSITY) -> List[Cell]:
    rng = rng or random.Random()
    plan = WallPlan(grid)
    plan.add_border()

    h, w = grid.height, grid.width
    for r in range(2, h - 2, 2):
        for c in range(2, w - 2, 2):
            if grid.node_at((r, c)).is_special or rng.random() >= density:
                continue
            plan.place((r, c))
            extensions = 2 if rng.random() < DOUBLE_EXTENSION_P else 1
            directions = list(EXTENSIONS)
            rng.shuffle(directions)
            for dr, dc in directions[:extensions]:
                plan.place((r + dr, c + dc))

    plan.clear_around_special_nodes()
    return plan.done("basic_random")
