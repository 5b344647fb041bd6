# gridpath/mazes/common.py
#!/usr/bin/env python3
"""
Shared plumbing for the maze generators.

A WallPlan applies placements to the grid as it records them, so the grid and
the returned list never disagree: every recorded cell is a wall (or a weight)
when the generator returns, in first-placement order, without duplicates.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from gridpath.core.grid import Grid
from gridpath.core.types import Cell, WEIGHTED_CELL

log = logging.getLogger(__name__)

WALL = "wall"
WEIGHT = "weight"

SPECIAL_CLEAR_RADIUS = 2


@dataclass
class WallPlan:
    grid: Grid
    kind: str = WALL
    _placed: Dict[Cell, None] = field(default_factory=dict)   # insertion-ordered set

    def __post_init__(self) -> None:
        if self.kind not in (WALL, WEIGHT):
            raise ValueError(f"kind must be {WALL!r} or {WEIGHT!r}, got {self.kind!r}")

    @property
    def placements(self) -> List[Cell]:
        return list(self._placed)

    def __len__(self) -> int:
        return len(self._placed)

    def place(self, c: Cell) -> bool:
        """Wall (or weight) one cell. Special nodes are skipped and return False."""
        node = self.grid.node_at(c)
        if node.is_special:
            return False
        if self.kind == WALL:
            node.is_wall = True
            node.weight = 0
        else:
            node.is_wall = False
            node.weight = WEIGHTED_CELL
        self._placed[c] = None
        return True

    def clear(self, c: Cell) -> None:
        node = self.grid.node_at(c)
        if node.is_special:
            return
        node.is_wall = False
        node.weight = 0
        self._placed.pop(c, None)

    def add_border(self) -> None:
        h, w = self.grid.height, self.grid.width
        for r in range(h):
            for c in range(w):
                if r == 0 or c == 0 or r == h - 1 or c == w - 1:
                    self.place((r, c))

    def clear_around_special_nodes(self, radius: int = SPECIAL_CLEAR_RADIUS) -> None:
        """Open the (2*radius+1)^2 square around start, end and checkpoint."""
        for sr, sc in self.grid.special_cells():
            for dr in range(-radius, radius + 1):
                for dc in range(-radius, radius + 1):
                    c = (sr + dr, sc + dc)
                    if self.grid.in_bounds(c):
                        self.clear(c)

    def done(self, name: str) -> List[Cell]:
        log.debug("%s: %d placements on %dx%d grid", name, len(self._placed),
                  self.grid.rows, self.grid.cols)
        return self.placements
