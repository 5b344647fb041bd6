# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A*, one finalization per step() for animation.

Same Algorithm API and stepping loop as DijkstraAlgo; only the priority changes.

Heuristic:
- Manhattan distance to the goal of *this* run (admissible and consistent on a
  4-connected unit-cost grid). reset() rewrites node.heuristic on every node
  before anything is relaxed, so a checkpoint phase never sees a stale target.

Tie-breaking in the PQ:
- (f, h, -g, seq, cell): lower f, then lower h, then deeper g, then FIFO by seq.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.grid import Grid
from gridpath.core.types import Cell, Node


@dataclass
class AStarAlgo(DijkstraAlgo):
    name: str = "A*"

    def _heuristic_target(self) -> Optional[Cell]:
        return self.goal_cell

    def _seed(self, start: Node) -> None:
        start.distance = 0
        start.total_distance = start.heuristic

    def _entry(self, node: Node) -> Tuple:
        return (node.total_distance, node.heuristic, -node.distance, self._bump(), node.cell)

    def _entry_distance(self, entry: Tuple) -> float:
        return -entry[2]

    def _relax(self, node: Node, parent: Node, alt: float) -> None:
        node.distance = alt
        node.total_distance = alt + node.heuristic
        node.previous_node = parent.cell


def astar(grid: Grid, start: Cell, target: Cell,
          on_visit: Optional[Callable[[Cell], None]] = None) -> List[Cell]:
    """Run A* to completion; returns the finalize order (check target.is_visited)."""
    algo = AStarAlgo()
    algo.init(grid, start, target)
    try:
        return algo.run(on_visit)
    finally:
        algo.cancel()
