# gridpath/mazes/dfs.py
#!/usr/bin/env python3
"""
Recursive backtracker on the even-coordinate lattice.

Everything starts as wall; a DFS from (0, 0) carves a spanning tree through
the lattice cells (opening the cell between two lattice neighbours as it
goes). The walk borrows node.is_visited, so search fields are reset before
returning. Every lattice cell ends up open and connected; a radius-1 clear
joins odd-positioned special nodes to the lattice.
"""

import random
from typing import List, Optional

from gridpath.core.grid import Grid, neighbors, reset_search_fields
from gridpath.core.types import Cell
from gridpath.mazes.common import WallPlan

SPECIAL_CLEAR_RADIUS = 1


def generate(grid: Grid, rng: Optional[random.Random] = None) -> List[Cell]:
    rng = rng or random.Random()
    plan = WallPlan(grid)
    for node in grid.all_nodes():
        plan.place(node.cell)
    reset_search_fields(grid)

    root = grid.node_at((0, 0))
    root.is_visited = True
    plan.clear(root.cell)
    stack = [root]
    while stack:
        node = stack[-1]
        options = neighbors(node, grid, exclude_visited=True, step=2)
        if not options:
            stack.pop()
            continue
        nxt = rng.choice(options)
        plan.clear(((node.row + nxt.row) // 2, (node.col + nxt.col) // 2))
        plan.clear(nxt.cell)
        nxt.is_visited = True
        stack.append(nxt)

    reset_search_fields(grid)
    plan.clear_around_special_nodes(SPECIAL_CLEAR_RADIUS)
    return plan.done("dfs")
