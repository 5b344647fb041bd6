# gridpath/mazes/recursive_division.py
#!/usr/bin/env python3
"""
Recursive division.

Each region is split by one wall line on a 2-stride from the region start,
with a single passage cell. The two sub-regions start two cells away from the
line, so every region keeps an open one-cell ring around it and the walls of
different levels never touch: every open cell stays reachable.

Orientation per sub-region: horizontal regions that are taller than wide stay
horizontal, otherwise switch; vertical splits go horizontal when the region is
taller than the sub-region is wide.

Regions are processed with an explicit stack (pre-order, first sub-region
first), which gives the same placement order as the plain recursive version
without touching the recursion limit on large grids.
"""

import random
from typing import List, Optional

from gridpath.core.grid import Grid
from gridpath.core.types import Cell
from gridpath.mazes.common import WALL, WallPlan

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


def generate(grid: Grid, rng: Optional[random.Random] = None,
             row_start: int = 2, row_end: Optional[int] = None,
             col_start: int = 2, col_end: Optional[int] = None,
             orientation: str = HORIZONTAL, surrounding_walls: bool = False,
             kind: str = WALL) -> List[Cell]:
    rng = rng or random.Random()
    if row_end is None:
        row_end = grid.height - 3
    if col_end is None:
        col_end = grid.width - 3
    if orientation not in (HORIZONTAL, VERTICAL):
        raise ValueError(f"orientation must be {HORIZONTAL!r} or {VERTICAL!r}")

    plan = WallPlan(grid, kind)
    if not surrounding_walls:
        plan.add_border()

    stack = [(row_start, row_end, col_start, col_end, orientation)]
    while stack:
        rs, re, cs, ce, orient = stack.pop()
        if re < rs or ce < cs:
            continue

        if orient == HORIZONTAL:
            row = rng.choice(range(rs, re + 1, 2))
            passage = rng.randint(cs, ce)
            for c in range(cs, ce + 1):
                if c != passage:
                    plan.place((row, c))
            above = HORIZONTAL if (row - 2 - rs) > (ce - cs) else VERTICAL
            below = HORIZONTAL if (re - (row + 2)) > (ce - cs) else VERTICAL
            # pushed in reverse so the upper region is divided first
            stack.append((row + 2, re, cs, ce, below))
            stack.append((rs, row - 2, cs, ce, above))
        else:
            col = rng.choice(range(cs, ce + 1, 2))
            passage = rng.randint(rs, re)
            for r in range(rs, re + 1):
                if r != passage:
                    plan.place((r, col))
            left = HORIZONTAL if (re - rs) > (col - 2 - cs) else orient
            right = HORIZONTAL if (re - rs) > (ce - (col + 2)) else orient
            stack.append((rs, re, col + 2, ce, right))
            stack.append((rs, re, cs, col - 2, left))

    plan.clear_around_special_nodes()
    return plan.done("recursive_division")
