# gridpath/mazes/stair.py
#!/usr/bin/env python3
import random
from typing import List, Optional

from gridpath.core.grid import Grid
from gridpath.core.types import Cell
from gridpath.mazes.common import WallPlan

STRIDE = 3
ANCHOR = 2


def generate(grid: Grid, rng: Optional[random.Random] = None) -> List[Cell]:
    """Diagonal staircase from (2, 2) plus a border. Deterministic; rng is ignored."""
    plan = WallPlan(grid)
    h, w = grid.height, grid.width

    r = c = ANCHOR
    while r < h - 2 and c < w - 2:
        for cc in range(c, min(c + STRIDE, w - 2)):
            plan.place((r, cc))
        for rr in range(r, min(r + STRIDE, h - 2)):
            plan.place((rr, c + STRIDE - 1))
        r += STRIDE
        c += STRIDE

    plan.add_border()
    plan.clear_around_special_nodes()
    return plan.done("stair")
