# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from math import inf
from typing import List, Tuple, Optional, Dict, Any

Cell = Tuple[int, int]  # (row, col)

WEIGHTED_CELL = 15  # weight tag used by "weight" mazes; never read by a search


class Role(Enum):
    NORMAL = "normal"
    START = "start"
    END = "end"
    CHECKPOINT = "checkpoint"


@dataclass
class Node:
    row: int
    col: int
    role: Role = Role.NORMAL
    is_wall: bool = False
    is_visited: bool = False
    distance: float = inf
    heuristic: float = 0
    total_distance: float = inf
    previous_node: Optional[Cell] = None   # index into the grid, not a live node
    weight: int = 0

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)

    @property
    def is_special(self) -> bool:
        return self.role is not Role.NORMAL

    def reset_search(self, heuristic: float = 0) -> None:
        self.is_visited = False
        self.distance = inf
        self.heuristic = heuristic
        self.total_distance = inf
        self.previous_node = None


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
    second_phase: bool = False

    @property
    def finished(self) -> bool:
        return self.status in ("done", "no_path")
