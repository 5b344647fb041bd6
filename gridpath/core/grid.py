# gridpath/core/grid.py
#!/usr/bin/env python3
"""
Grid/Node model shared by the search engines and the maze generators.

- make_grid(rows, cols, start, end, checkpoint=None) builds a fresh grid
- role moves (start/end/checkpoint) are all-or-nothing: the old holder is
  cleared and the new one set in the same call, or nothing changes
- wall edits on special nodes are silent no-ops
- claim()/release() guard against two runs mutating the same grid
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Iterator

from gridpath.core.types import Cell, Node, Role

log = logging.getLogger(__name__)

# up, down, left, right; tie order for anything that iterates neighbours
DIRECTIONS: List[Cell] = [(-1, 0), (1, 0), (0, -1), (0, 1)]

BOOST_PATTERN: List[Cell] = [(0, 0), (-1, 0), (1, 0), (0, -1), (0, 1)]

RANDOM_CELL_ATTEMPTS = 100


class GridBusyError(RuntimeError):
    """Raised when a second search/generation tries to run on a claimed grid."""


@dataclass
class Grid:
    rows: int
    cols: int
    nodes: List[List[Node]]            # [row][col]
    start: Cell
    end: Cell
    checkpoint: Optional[Cell] = None
    _owner: Optional[object] = field(default=None, repr=False, compare=False)

    # -------------------- shape --------------------

    @property
    def height(self) -> int:
        return self.rows

    @property
    def width(self) -> int:
        return self.cols

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def node_at(self, c: Cell) -> Node:
        if not self.in_bounds(c):
            raise IndexError(f"Cell {c} out of bounds for {self.rows}x{self.cols} grid")
        r, col = c
        return self.nodes[r][col]

    def all_nodes(self) -> Iterator[Node]:
        for row in self.nodes:
            yield from row

    def special_cells(self) -> List[Cell]:
        cells = [self.start, self.end]
        if self.checkpoint is not None:
            cells.append(self.checkpoint)
        return cells

    def walls(self) -> List[Cell]:
        return [n.cell for n in self.all_nodes() if n.is_wall]

    # -------------------- walls --------------------

    def set_wall(self, row: int, col: int, value: bool = True) -> bool:
        node = self.node_at((row, col))
        if node.is_special:
            return False
        node.is_wall = value
        if value:
            node.weight = 0
        return True

    def toggle_wall(self, row: int, col: int) -> bool:
        return self.set_wall(row, col, not self.node_at((row, col)).is_wall)

    def set_walls_boost(self, row: int, col: int, value: bool = True) -> List[Cell]:
        """Plus-shaped brush: the cell and its four neighbours. Returns cells changed."""
        changed: List[Cell] = []
        for dr, dc in BOOST_PATTERN:
            c = (row + dr, col + dc)
            if self.in_bounds(c) and self.set_wall(c[0], c[1], value):
                changed.append(c)
        return changed

    def clear_walls(self) -> None:
        for node in self.all_nodes():
            node.is_wall = False
            node.weight = 0

    # -------------------- special nodes --------------------

    def _role_pointer(self, kind: Role) -> Optional[Cell]:
        if kind is Role.START:
            return self.start
        if kind is Role.END:
            return self.end
        if kind is Role.CHECKPOINT:
            return self.checkpoint
        raise ValueError(f"{kind} is not a special role")

    def _set_role_pointer(self, kind: Role, c: Optional[Cell]) -> None:
        if kind is Role.START:
            self.start = c
        elif kind is Role.END:
            self.end = c
        else:
            self.checkpoint = c

    def move_special_node(self, kind: Role, from_pos: Cell, to_pos: Cell) -> bool:
        """Move START/END/CHECKPOINT from from_pos to to_pos. False (no change) when refused."""
        if self._role_pointer(kind) != from_pos:
            return False
        if from_pos == to_pos:
            return True
        src = self.node_at(from_pos)
        dst = self.node_at(to_pos)
        if dst.is_wall or dst.is_special:
            return False
        src.role = Role.NORMAL
        dst.role = kind
        self._set_role_pointer(kind, to_pos)
        return True

    def random_empty_cell(self, rng: Optional[random.Random] = None) -> Optional[Cell]:
        """A random open, non-special cell; falls back to a row-major scan."""
        rng = rng or random.Random()
        for _ in range(RANDOM_CELL_ATTEMPTS):
            c = (rng.randrange(self.rows), rng.randrange(self.cols))
            node = self.node_at(c)
            if not node.is_wall and not node.is_special:
                return c
        for node in self.all_nodes():
            if not node.is_wall and not node.is_special:
                return node.cell
        return None

    def add_checkpoint(self, c: Optional[Cell] = None, rng: Optional[random.Random] = None) -> bool:
        if self.checkpoint is not None:
            return False
        if c is None:
            c = self.random_empty_cell(rng)
            if c is None:
                return False
        node = self.node_at(c)
        if node.is_wall or node.is_special:
            return False
        node.role = Role.CHECKPOINT
        self.checkpoint = c
        return True

    def remove_checkpoint(self) -> bool:
        if self.checkpoint is None:
            return False
        self.node_at(self.checkpoint).role = Role.NORMAL
        self.checkpoint = None
        return True

    def randomize_special_nodes(self, rng: Optional[random.Random] = None) -> None:
        """Re-place start, end and (if present) the checkpoint on random open cells."""
        rng = rng or random.Random()
        for kind in (Role.START, Role.END, Role.CHECKPOINT):
            current = self._role_pointer(kind)
            if current is None:
                continue
            target = self.random_empty_cell(rng)
            if target is not None:
                self.move_special_node(kind, current, target)

    # -------------------- busy guard --------------------

    @property
    def busy(self) -> bool:
        return self._owner is not None

    def claim(self, owner: object) -> bool:
        """Claim the grid for one run. True if newly claimed, False if owner already holds it."""
        if self._owner is owner:
            return False
        if self._owner is not None:
            raise GridBusyError(f"grid is already in use by a {type(self._owner).__name__}")
        self._owner = owner
        return True

    def release(self, owner: object) -> None:
        if self._owner is owner:
            self._owner = None


def make_grid(rows: int, cols: int, start: Cell, end: Cell,
              checkpoint: Optional[Cell] = None) -> Grid:
    assert rows > 0 and cols > 0, "grid must have at least one cell"
    specials = [start, end] + ([checkpoint] if checkpoint is not None else [])
    for c in specials:
        assert 0 <= c[0] < rows and 0 <= c[1] < cols, f"special node {c} out of bounds"
    assert len(set(specials)) == len(specials), "special nodes must be distinct"

    nodes: List[List[Node]] = []
    for r in range(rows):
        row: List[Node] = []
        for c in range(cols):
            role = Role.NORMAL
            if (r, c) == start:
                role = Role.START
            elif (r, c) == end:
                role = Role.END
            elif (r, c) == checkpoint:
                role = Role.CHECKPOINT
            row.append(Node(r, c, role=role))
        nodes.append(row)
    return Grid(rows, cols, nodes, start, end, checkpoint)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reset_search_fields(grid: Grid, target: Optional[Cell] = None) -> None:
    """Put every node's search fields back to defaults. Walls, weights and roles are kept.

    With a target, each node's heuristic is recomputed as its Manhattan distance to it.
    """
    for node in grid.all_nodes():
        node.reset_search(manhattan(node.cell, target) if target is not None else 0)


def neighbors(node: Node, grid: Grid, exclude_visited: bool = False, step: int = 1) -> List[Node]:
    """In-bounds up/down/left/right neighbours, `step` cells away."""
    out: List[Node] = []
    for dr, dc in DIRECTIONS:
        c = (node.row + dr * step, node.col + dc * step)
        if not grid.in_bounds(c):
            continue
        n = grid.node_at(c)
        if exclude_visited and n.is_visited:
            continue
        out.append(n)
    return out
