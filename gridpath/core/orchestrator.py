# gridpath/core/orchestrator.py
#!/usr/bin/env python3
"""
Checkpoint-aware search runner.

Modes:
- DIRECT      no checkpoint: one run start -> end
- CHECKPOINT  start -> checkpoint, explicit reset of the search fields,
              then checkpoint -> end (tagged second_phase)
- FALLBACK    the checkpoint was not reached in the first phase: it is
              ignored and a direct start -> end run replaces it

CheckpointSearch follows the same init/reset/step API as the engines, so the
viewer can animate it; run_search() just drains it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Type

from gridpath.core.astar import AStarAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.grid import Grid, reset_search_fields
from gridpath.core.types import Cell, StepResult

log = logging.getLogger(__name__)

ALGORITHMS: Dict[str, Type[DijkstraAlgo]] = {
    "dijkstra": DijkstraAlgo,
    "astar": AStarAlgo,
}


class SearchMode(Enum):
    DIRECT = "direct"
    CHECKPOINT = "checkpoint"
    FALLBACK = "fallback"


@dataclass
class PathSegment:
    visited: List[Cell]
    path: List[Cell]               # empty when the segment's target was not reached
    second_phase: bool = False


@dataclass
class SearchOutcome:
    algo: str
    mode: SearchMode
    segments: List[PathSegment] = field(default_factory=list)
    probe: List[Cell] = field(default_factory=list)   # abandoned first phase (FALLBACK only)

    @property
    def found(self) -> bool:
        return bool(self.segments) and all(s.path for s in self.segments)

    @property
    def path(self) -> List[Cell]:
        """Full start -> end path; the checkpoint appears once."""
        if not self.found:
            return []
        out: List[Cell] = []
        for seg in self.segments:
            out.extend(seg.path if not out else seg.path[1:])
        return out

    @property
    def visited(self) -> List[Cell]:
        out = list(self.probe)
        for seg in self.segments:
            out.extend(seg.visited)
        return out


def algorithm_key(name: str) -> str:
    """Normalise an algorithm label ("A*", "a-star", "AStar" -> "astar")."""
    key = name.lower().replace("*", "star").replace("-", "").replace("_", "").replace(" ", "")
    if key not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm {name!r}; expected one of {sorted(ALGORITHMS)}")
    return key


def resolve_algorithm(name: str) -> Type[DijkstraAlgo]:
    return ALGORITHMS[algorithm_key(name)]


@dataclass
class CheckpointSearch:
    algo_name: str = "dijkstra"

    grid: Optional[Grid] = None
    start_cell: Optional[Cell] = None
    end_cell: Optional[Cell] = None
    checkpoint_cell: Optional[Cell] = None
    mode: SearchMode = SearchMode.DIRECT
    algo: Optional[DijkstraAlgo] = None
    segments: List[PathSegment] = field(default_factory=list)
    probe: List[Cell] = field(default_factory=list)
    second_phase: bool = False
    done: bool = False
    no_path: bool = False
    _claimed: bool = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Optional[Cell] = None, end: Optional[Cell] = None,
             checkpoint: Optional[Cell] = None) -> None:
        self.grid = grid
        self.start_cell = start if start is not None else grid.start
        self.end_cell = end if end is not None else grid.end
        self.checkpoint_cell = checkpoint if checkpoint is not None else grid.checkpoint
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        for c in (self.start_cell, self.end_cell, self.checkpoint_cell):
            if c is not None:
                self.grid.node_at(c)
        self._claimed = self.grid.claim(self) or self._claimed
        self.segments = []
        self.probe = []
        self.done = False
        self.no_path = False
        try:
            if self.checkpoint_cell is None:
                self.mode = SearchMode.DIRECT
                self._begin(self.start_cell, self.end_cell, second_phase=False)
            else:
                self.mode = SearchMode.CHECKPOINT
                self._begin(self.start_cell, self.checkpoint_cell, second_phase=False)
        except Exception:
            self.cancel()
            raise

    def cancel(self) -> None:
        if self.grid is not None and self._claimed:
            self.grid.release(self)
            self._claimed = False

    def _begin(self, start: Cell, goal: Cell, second_phase: bool) -> None:
        self.second_phase = second_phase
        self.algo = resolve_algorithm(self.algo_name)(owner=self)
        self.algo.init(self.grid, start, goal)

    @property
    def name(self) -> str:
        return self.algo.name if self.algo is not None else self.algo_name

    # -------------------- stepping --------------------

    def step(self) -> StepResult:
        if self.grid is None or self.algo is None:
            return StepResult(status="idle", metrics={"algo": self.algo_name})
        if self.done or self.no_path:
            return StepResult(status="done" if self.done else "no_path",
                              path=self.outcome().path or None, metrics=self._metrics())

        res = self.algo.step()
        res.second_phase = self.second_phase
        if not res.finished:
            return res

        reached = res.status == "done"
        visited = list(self.algo.visited_order)

        if self.mode is SearchMode.CHECKPOINT and not self.second_phase:
            if reached:
                self.segments.append(PathSegment(visited, res.path or []))
                reset_search_fields(self.grid)
                log.debug("checkpoint %s reached, second phase -> %s",
                          self.checkpoint_cell, self.end_cell)
                self._begin(self.checkpoint_cell, self.end_cell, second_phase=True)
            else:
                self.probe = visited
                self.mode = SearchMode.FALLBACK
                log.debug("checkpoint %s unreachable, falling back to direct search",
                          self.checkpoint_cell)
                self._begin(self.start_cell, self.end_cell, second_phase=False)
            return StepResult(status="running", closed=res.closed, current=res.current,
                              path=res.path, metrics=self._metrics(),
                              second_phase=False)

        self.segments.append(PathSegment(visited, res.path or [], second_phase=self.second_phase))
        if reached:
            self.done = True
        else:
            self.no_path = True
        self.cancel()
        return StepResult(status=res.status, closed=res.closed, current=res.current,
                          path=res.path, metrics=self._metrics(),
                          second_phase=self.second_phase)

    def run(self, on_step: Optional[Callable[[StepResult], None]] = None) -> "SearchOutcome":
        if self.grid is None:
            raise RuntimeError("CheckpointSearch.run() called before init()")
        while True:
            res = self.step()
            if on_step is not None:
                on_step(res)
            if res.finished:
                return self.outcome()

    def outcome(self) -> SearchOutcome:
        return SearchOutcome(self.name, self.mode, list(self.segments), list(self.probe))

    # -------------------- metrics --------------------

    def _metrics(self) -> dict:
        m = dict(self.algo._metrics()) if self.algo is not None else {"algo": self.algo_name}
        m["mode"] = self.mode.value
        m["phase"] = 2 if self.second_phase else 1
        m["visited_total"] = len(self.probe) + sum(len(s.visited) for s in self.segments)
        if self.done:
            m["path_len"] = len(self.outcome().path)
        return m


def run_search(grid: Grid, algorithm: str = "dijkstra", start: Optional[Cell] = None,
               end: Optional[Cell] = None, checkpoint: Optional[Cell] = None,
               on_step: Optional[Callable[[StepResult], None]] = None) -> SearchOutcome:
    """Run a full (possibly two-phase) search and return its segments."""
    runner = CheckpointSearch(algo_name=algorithm)
    try:
        runner.init(grid, start, end, checkpoint)
        outcome = runner.run(on_step)
    finally:
        runner.cancel()
    log.debug("%s %s: found=%s visited=%d path=%d", outcome.algo, outcome.mode.value,
              outcome.found, len(outcome.visited), len(outcome.path))
    return outcome
