# gridpath/app/settings.py
#!/usr/bin/env python3
"""
Runtime settings for the viewer and the compare CLI.

Resolution order (later wins):
- defaults below (the 30x74 FHD board)
- ENV: GRIDPATH_ROWS, GRIDPATH_COLS, GRIDPATH_SPEED, GRIDPATH_ALGO,
       GRIDPATH_MAZE, GRIDPATH_SEED, GRIDPATH_LOG_LEVEL
- CLI: --rows=, --cols=, --speed=, --algo=, --maze=, --seed=, --log-level=

Special node positions are laid out for 30x74 and scaled proportionally for
any other board size.
"""

import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from gridpath.core.orchestrator import algorithm_key
from gridpath.core.types import Cell
from gridpath.mazes.catalog import MAZES

BASE_ROWS = 30
BASE_COLS = 74
BASE_START: Cell = (15, 25)
BASE_END: Cell = (15, 51)
BASE_CHECKPOINT: Cell = (15, 38)

MIN_SIDE = 3
MAX_SIDE = 200

# steps per second; None = drain the whole run in one frame
SPEEDS: Dict[str, Optional[int]] = {
    "instant": None,
    "fast": 100,
    "slow": 20,
}

# maze cells revealed per frame; None = all at once
REVEAL_PER_FRAME: Dict[str, Optional[int]] = {
    "instant": None,
    "fast": 10,
    "slow": 1,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

ENV_PREFIX = "GRIDPATH_"
KEYS = ("rows", "cols", "speed", "algo", "maze", "seed", "log_level")


@dataclass
class Settings:
    rows: int = BASE_ROWS
    cols: int = BASE_COLS
    speed: str = "fast"
    algo: str = "dijkstra"
    maze: Optional[str] = None
    seed: Optional[int] = None
    log_level: str = "INFO"

    @property
    def start(self) -> Cell:
        return scale_cell(BASE_START, self.rows, self.cols)

    @property
    def end(self) -> Cell:
        return scale_cell(BASE_END, self.rows, self.cols)

    @property
    def checkpoint_slot(self) -> Cell:
        return scale_cell(BASE_CHECKPOINT, self.rows, self.cols)

    @property
    def steps_per_sec(self) -> Optional[int]:
        return SPEEDS[self.speed]

    @property
    def reveal_per_frame(self) -> Optional[int]:
        return REVEAL_PER_FRAME[self.speed]


def scale_position(pos: int, old_size: int, new_size: int) -> int:
    return min(pos * new_size // old_size, new_size - 1)


def scale_cell(c: Cell, rows: int, cols: int) -> Cell:
    return (scale_position(c[0], BASE_ROWS, rows), scale_position(c[1], BASE_COLS, cols))


def _collect(argv: Sequence[str], environ: Mapping[str, str]) -> Dict[str, str]:
    raw: Dict[str, str] = {}
    for key in KEYS:
        value = environ.get(ENV_PREFIX + key.upper())
        if value:
            raw[key] = value
    for arg in argv:
        if not arg.startswith("--") or "=" not in arg:
            continue
        key, value = arg[2:].split("=", 1)
        key = key.replace("-", "_").lower()
        if key in KEYS:
            raw[key] = value
    return raw


def _side(name: str, value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if not MIN_SIDE <= n <= MAX_SIDE:
        raise ValueError(f"{name} must be between {MIN_SIDE} and {MAX_SIDE}, got {n}")
    return n


def resolve_settings(argv: Optional[List[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ENV then --key=value flags. Raises ValueError on bad values."""
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    raw = _collect(argv, environ)
    s = Settings()

    if "rows" in raw:
        s.rows = _side("rows", raw["rows"])
    if "cols" in raw:
        s.cols = _side("cols", raw["cols"])
    if "speed" in raw:
        speed = raw["speed"].lower()
        if speed not in SPEEDS:
            raise ValueError(f"speed must be one of {list(SPEEDS)}, got {raw['speed']!r}")
        s.speed = speed
    if "algo" in raw:
        s.algo = algorithm_key(raw["algo"])
    if "maze" in raw:
        maze = raw["maze"].lower()
        if maze in ("none", "off", ""):
            s.maze = None
        elif maze not in MAZES:
            raise ValueError(f"maze must be one of {sorted(MAZES)}, got {raw['maze']!r}")
        else:
            s.maze = maze
    if "seed" in raw:
        try:
            s.seed = int(raw["seed"])
        except ValueError:
            raise ValueError(f"seed must be an integer, got {raw['seed']!r}") from None
    if "log_level" in raw:
        level = raw["log_level"].upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}, got {raw['log_level']!r}")
        s.log_level = level

    if len({s.start, s.end, s.checkpoint_slot}) < 3:
        raise ValueError(f"a {s.rows}x{s.cols} board is too small to place start, end and checkpoint")
    return s
