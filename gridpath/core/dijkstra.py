# gridpath/core/dijkstra.py
#!/usr/bin/env python3
"""
Dijkstra on a 4-connected grid with unit edge cost, one finalization per step().

Algorithm API (shared with AStarAlgo and used by the orchestrator / viewer):
- init(grid, start=None, goal=None) - reset() - step() -> StepResult - run()

Search state lives on the grid's nodes (distance, previous_node, is_visited),
so the grid doubles as the result: after a run, goal.is_visited tells whether
the goal was reached and reconstruct_path() walks previous_node back.

Tie-breaking in the PQ: (distance, seq, cell): lower distance, then FIFO.
"""

import heapq
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set, Tuple

from gridpath.core.grid import Grid, neighbors, reset_search_fields
from gridpath.core.types import Cell, Node, StepResult

log = logging.getLogger(__name__)


def reconstruct_path(grid: Grid, target: Cell) -> List[Cell]:
    """Walk previous_node back from target; returns start -> target order.

    An unreached target comes back as [target] alone, so check is_visited first.
    """
    path: List[Cell] = []
    cur: Optional[Cell] = target
    while cur is not None:
        path.append(cur)
        cur = grid.node_at(cur).previous_node
    path.reverse()
    return path


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"
    owner: Optional[object] = None     # who holds the grid claim; defaults to self

    grid: Optional[Grid] = None
    start_cell: Optional[Cell] = None
    goal_cell: Optional[Cell] = None
    open_pq: List[Tuple] = field(default_factory=list)
    open_set: Set[Cell] = field(default_factory=set)
    visited_order: List[Cell] = field(default_factory=list)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    seq: int = 0
    _claimed: bool = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Optional[Cell] = None, goal: Optional[Cell] = None) -> None:
        self.grid = grid
        self.start_cell = start if start is not None else grid.start
        self.goal_cell = goal if goal is not None else grid.end
        self.reset()

    def reset(self) -> None:
        """Claim the grid, reset every node's search fields and seed the start node."""
        if self.grid is None:
            return
        # look both cells up first so a bad cell never leaves the grid claimed
        s = self.grid.node_at(self.start_cell)
        self.grid.node_at(self.goal_cell)
        self._claimed = self.grid.claim(self._owner) or self._claimed
        self.open_pq.clear()
        self.open_set.clear()
        self.visited_order.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.seq = 0

        reset_search_fields(self.grid, self._heuristic_target())
        self._seed(s)
        self._push(s)
        self.open_set.add(s.cell)
        log.debug("%s: %s -> %s on %dx%d grid", self.name, self.start_cell,
                  self.goal_cell, self.grid.rows, self.grid.cols)

    def cancel(self) -> None:
        """Abandon the run and give the grid back."""
        self._release()

    @property
    def _owner(self) -> object:
        return self.owner if self.owner is not None else self

    def _release(self) -> None:
        if self.grid is not None and self._claimed:
            self.grid.release(self._owner)
            self._claimed = False

    # -------------------- hooks (A* overrides these) --------------------

    def _heuristic_target(self) -> Optional[Cell]:
        return None

    def _seed(self, start: Node) -> None:
        start.distance = 0

    def _entry(self, node: Node) -> Tuple:
        return (node.distance, self._bump(), node.cell)

    def _entry_distance(self, entry: Tuple) -> float:
        return entry[0]

    def _relax(self, node: Node, parent: Node, alt: float) -> None:
        node.distance = alt
        node.previous_node = parent.cell

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _push(self, node: Node) -> None:
        heapq.heappush(self.open_pq, self._entry(node))

    def path(self) -> List[Cell]:
        if self.grid is None or self.goal_cell is None:
            return []
        if not self.grid.node_at(self.goal_cell).is_visited:
            return []
        return reconstruct_path(self.grid, self.goal_cell)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self.path()
            return StepResult(status="done", path=path, metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.open_pq:
            # nothing reachable left: the smallest remaining distance is +inf
            self.no_path = True
            self._release()
            log.debug("%s: %s unreachable after %d finalized", self.name,
                      self.goal_cell, self.popped_count)
            return StepResult(status="no_path", metrics=self._metrics())

        entry = heapq.heappop(self.open_pq)
        u = self.grid.node_at(entry[-1])

        # Ignore stale pops and walls
        if u.is_visited or u.is_wall or self._entry_distance(entry) != u.distance:
            return StepResult(status="running", current=u.cell, metrics=self._metrics())

        # Finalize u
        u.is_visited = True
        self.visited_order.append(u.cell)
        self.popped_count += 1
        self.open_set.discard(u.cell)

        if u.cell == self.goal_cell:
            self.done = True
            self._release()
            path = reconstruct_path(self.grid, u.cell)
            log.debug("%s: reached %s, %d finalized, path %d", self.name, u.cell,
                      self.popped_count, len(path))
            return StepResult(status="done", closed=[u.cell], current=u.cell, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now: List[Cell] = []
        for v in neighbors(u, self.grid, exclude_visited=True):
            if v.is_wall:
                continue
            alt = u.distance + 1
            if alt < v.distance:
                self._relax(v, u, alt)
                self._push(v)
                if v.cell not in self.open_set:
                    self.open_set.add(v.cell)
                    opened_now.append(v.cell)

        return StepResult(status="running", opened=opened_now, closed=[u.cell], current=u.cell,
                          metrics=self._metrics())

    def run(self, on_visit: Optional[Callable[[Cell], None]] = None) -> List[Cell]:
        """Drain step() to the end; returns the finalize order."""
        if self.grid is None:
            return []
        while True:
            res = self.step()
            if on_visit is not None:
                for c in res.closed:
                    on_visit(c)
            if res.finished:
                return list(self.visited_order)

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.visited_order),
            "path_len": path_len,
        }


def dijkstra(grid: Grid, start: Cell, target: Cell,
             on_visit: Optional[Callable[[Cell], None]] = None) -> List[Cell]:
    """Run Dijkstra to completion; returns the finalize order (check target.is_visited)."""
    algo = DijkstraAlgo()
    algo.init(grid, start, target)
    try:
        return algo.run(on_visit)
    finally:
        algo.cancel()
