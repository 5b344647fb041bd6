# gridpath/app/compare.py
#!/usr/bin/env python3
"""
Headless Dijkstra vs A* comparison on one board.

    gridpath-compare --rows=30 --cols=74 --maze=recursive --seed=7 [--checkpoint]

Both algorithms run through the checkpoint orchestrator on the same grid
(walls untouched between runs) and one line per algorithm is printed.
"""

import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from gridpath.app.settings import Settings, resolve_settings
from gridpath.core.grid import Grid, make_grid
from gridpath.core.orchestrator import ALGORITHMS, run_search
from gridpath.mazes.catalog import generate_maze

log = logging.getLogger(__name__)


@dataclass
class CompareRow:
    algo: str
    mode: str
    found: bool
    visited: int
    path_len: int
    time_s: float


def build_grid(settings: Settings, checkpoint: bool = False) -> Grid:
    grid = make_grid(settings.rows, settings.cols, settings.start, settings.end,
                     settings.checkpoint_slot if checkpoint else None)
    if settings.maze:
        placements = generate_maze(grid, settings.maze, seed=settings.seed)
        log.info("maze %s (seed=%s): %d walls", settings.maze, settings.seed, len(placements))
    return grid


def compare(grid: Grid, algorithms: Sequence[str] = tuple(ALGORITHMS)) -> List[CompareRow]:
    rows: List[CompareRow] = []
    for name in algorithms:
        t0 = time.perf_counter()
        outcome = run_search(grid, name)
        elapsed = time.perf_counter() - t0
        rows.append(CompareRow(outcome.algo, outcome.mode.value, outcome.found,
                               len(outcome.visited), len(outcome.path), elapsed))
    return rows


def format_table(rows: List[CompareRow]) -> str:
    header = f"{'algo':<10} {'mode':<11} {'found':<6} {'visited':>8} {'path':>6} {'time':>10}"
    lines = [header, "-" * len(header)]
    for r in rows:
        lines.append(
            f"{r.algo:<10} {r.mode:<11} {'yes' if r.found else 'no':<6} "
            f"{r.visited:>8} {r.path_len:>6} {r.time_s * 1000:>8.2f}ms"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        settings = resolve_settings(argv)
    except ValueError as ex:
        print(f"gridpath-compare: {ex}", file=sys.stderr)
        return 2
    logging.basicConfig(level=getattr(logging, settings.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    grid = build_grid(settings, checkpoint="--checkpoint" in argv)
    print(f"board {grid.rows}x{grid.cols}  start={grid.start} end={grid.end} "
          f"checkpoint={grid.checkpoint} maze={settings.maze or 'none'}")
    print(format_table(compare(grid)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
