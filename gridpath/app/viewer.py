# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
gridpath Viewer: Dijkstra / A* on an editable grid, with checkpoints and mazes

- Mouse:
    left drag on empty cells       -> draw / erase walls (boost brush: plus shape)
    left drag on S / E / C         -> move start / end / checkpoint
- Keyboard:
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset search overlays
    [D]/[A]      -> select algorithm (Dijkstra / A*)
    [C]          -> add/remove checkpoint
    [W]          -> clear walls
    [B]          -> boost brush on/off
    [X]          -> randomize start/end/checkpoint
    [S]          -> cycle speed (instant / fast / slow)
    [1]..[5]     -> mazes (recursive, basic random, random, stair, dfs)
    [Q]/[ESC]    -> quit

Settings:
- ENV: GRIDPATH_ROWS, GRIDPATH_COLS, GRIDPATH_SPEED, GRIDPATH_ALGO, GRIDPATH_MAZE,
       GRIDPATH_SEED, GRIDPATH_LOG_LEVEL
- CLI: --rows=30 --cols=74 --speed=fast --algo=astar --maze=recursive --seed=7
"""

# --- bootstrap import path so `from gridpath...` works when run as a script ---
import sys, time, logging, random
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------------

from typing import List, Tuple, Optional, Set
import pygame

from gridpath.app import theme as THEME
from gridpath.app.settings import REVEAL_PER_FRAME, SPEEDS, Settings, resolve_settings
from gridpath.core.grid import Grid, GridBusyError, make_grid, reset_search_fields
from gridpath.core.orchestrator import CheckpointSearch, SearchMode
from gridpath.core.types import Cell, Role, StepResult
from gridpath.mazes.catalog import LABELS as MAZE_LABELS, MAZES, generate_maze

log = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 380            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
CELL_SIZE_MIN = 8
TARGET_WIN = (1600, 900)
FONT_NAME = None  # default pygame font
FPS = 60
MIN_WIN_W = 640

ALGO_LABELS = {"dijkstra": "Dijkstra", "astar": "A*"}
MAZE_KEYS = list(MAZES)   # order of the [1]..[5] hotkeys


# ---------- pure layout helpers ----------
def compute_layout(win_w: int, win_h: int, rows: int, cols: int,
                   panel_w: int = PANEL_W, margin: int = GRID_MARGIN
                   ) -> Tuple[int, pygame.Rect, Tuple[int, int], pygame.Rect]:
    """Integer cell size that fits the window, the centered grid plate, grid origin, right band."""
    avail_w = max(1, win_w - panel_w - 2 * margin)
    avail_h = max(1, win_h - 2 * margin)
    cell_size = int(max(CELL_SIZE_MIN, min(avail_w // cols, avail_h // rows)))

    plate_w = cols * cell_size + 2 * margin
    plate_h = rows * cell_size + 2 * margin

    # center the grid plate; keep panel_w free on the right
    left_x = max(0, (win_w - (plate_w + panel_w)) // 2)
    left_x = min(left_x, max(0, win_w - panel_w - plate_w))
    top_y = max(0, (win_h - plate_h) // 2)

    canvas = pygame.Rect(left_x, top_y, plate_w, plate_h)
    origin = (canvas.x + margin, canvas.y + margin)
    band = pygame.Rect(canvas.right, 0, max(panel_w, win_w - canvas.right), win_h)
    return cell_size, canvas, origin, band


def initial_cell_size(rows: int, cols: int) -> int:
    by_w = (TARGET_WIN[0] - PANEL_W - 2 * GRID_MARGIN) // cols
    by_h = (TARGET_WIN[1] - 2 * GRID_MARGIN) // rows
    return max(CELL_SIZE_MIN, min(CELL_SIZE_DEFAULT, by_w, by_h))


def cell_at_pixel(pos: Tuple[int, int], origin: Tuple[int, int], cell_size: int,
                  rows: int, cols: int) -> Optional[Cell]:
    """Grid cell under a screen position, or None outside the grid."""
    x, y = pos[0] - origin[0], pos[1] - origin[1]
    if x < 0 or y < 0:
        return None
    row, col = y // cell_size, x // cell_size
    if row >= rows or col >= cols:
        return None
    return (row, col)


def cell_center(c: Cell, origin: Tuple[int, int], cell_size: int) -> Tuple[int, int]:
    row, col = c
    return (origin[0] + col * cell_size + cell_size // 2,
            origin[1] + row * cell_size + cell_size // 2)


def format_elapsed(seconds: float) -> str:
    m, s = divmod(max(0.0, seconds), 60)
    return f"{int(m):02d}:{s:05.2f}"


def next_speed(current: str) -> str:
    names = list(SPEEDS)
    return names[(names.index(current) + 1) % len(names)]


def fit_window(req_w: int, req_h: int, aspect: float, min_w: int) -> Tuple[int, int]:
    """Window size closest to the request that keeps the board aspect, never below min_w wide."""
    w = max(min_w, req_w)
    h = max(int(min_w / aspect), req_h)
    by_width = (w, int(round(w / aspect)))
    by_height = (int(round(h * aspect)), h)
    # keep whichever side the user moved less
    if abs(by_width[1] - h) <= abs(by_height[0] - w):
        return by_width
    return by_height


# ---------- panel button ----------
class UIButton:
    """Panel button; `hotkey` is drawn dimmed at the right edge."""

    def __init__(self, label: str, rect: pygame.Rect, callback, *,
                 togglable: bool = False, hotkey: str = ""):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.togglable = togglable
        self.hotkey = hotkey
        self.hover = False
        self.active = False

    def set_active(self, value: bool):
        self.active = bool(value)

    @property
    def lit(self) -> bool:
        return self.togglable and self.active

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        THEME.button(screen, self.rect, lit=self.lit, hover=self.hover)
        text = font.render(self.label, True, THEME.TEXT_LIGHT)
        screen.blit(text, text.get_rect(center=self.rect.center))
        if self.hotkey:
            hint = font.render(self.hotkey, True, THEME.TEXT_DIM)
            screen.blit(hint, hint.get_rect(midright=(self.rect.right - 8, self.rect.centery)))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        """Track hover; run the callback on a left click inside. True if the click was consumed."""
        inside = self.rect.collidepoint(event.pos)
        if event.type == pygame.MOUSEMOTION:
            self.hover = inside
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and inside:
            self.callback()
            return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, settings: Settings):
        pygame.init()

        self.settings = settings
        self.rng = random.Random(settings.seed)
        self.grid: Grid = make_grid(settings.rows, settings.cols, settings.start, settings.end)

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        cs = initial_cell_size(self.grid.rows, self.grid.cols)
        win_w = GRID_MARGIN * 2 + self.grid.cols * cs + PANEL_W
        win_h = max(GRID_MARGIN * 2 + self.grid.rows * cs, 620)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("gridpath - Dijkstra / A*")

        # resizes keep the board aspect
        self._aspect = max(1e-6, win_w / win_h)

        self._buttons: List[UIButton] = []

        # search state + overlays
        self.algo_key = settings.algo
        self.speed = settings.speed
        self.runner: Optional[CheckpointSearch] = None
        self.open_set: Set[Cell] = set()
        self.closed_set: Set[Cell] = set()
        self.second_set: Set[Cell] = set()
        self.probe_set: Set[Cell] = set()
        self.current: Optional[Cell] = None
        self.path: List[Cell] = []
        self._phase2 = False
        self._last_metrics: dict = {}

        self.running = False
        self.state = "Idle"
        self.clock = pygame.time.Clock()
        self._step_budget = 0.0
        self._run_started: Optional[float] = None
        self._run_elapsed = 0.0

        # maze reveal: placements already on the grid but not drawn yet
        self.maze_key: Optional[str] = None
        self._reveal_queue: List[Cell] = []
        self._hidden: Set[Cell] = set()

        # mouse editing
        self.boost = False
        self._drag_kind: Optional[Role] = None
        self._drag_from: Optional[Cell] = None
        self._paint_value: Optional[bool] = None

        self._layout(win_w, win_h)

        if settings.maze:
            self._apply_maze(settings.maze)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        self.cell_size, self.canvas_rect, self._grid_origin, self._right_band = \
            compute_layout(win_w, win_h, self.grid.rows, self.grid.cols)
        self._build_buttons()

    def _apply_aspect_resize(self, req_w: int, req_h: int):
        new_w, new_h = fit_window(req_w, req_h, self._aspect, MIN_WIN_W)
        self.screen = pygame.display.set_mode((new_w, new_h), pygame.RESIZABLE)
        self._layout(new_w, new_h)

    # ---------- main loop ----------
    def run(self):
        while True:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self._tick_reveal()
            if self.running:
                self._tick_algorithm(dt)
            self._draw()

    def _tick_algorithm(self, dt: float):
        sps = SPEEDS[self.speed]
        if sps is None:
            while self.running:
                self._do_step()
            return
        self._step_budget += dt * sps
        while self.running and self._step_budget >= 1.0:
            self._step_budget -= 1.0
            self._do_step()

    def _tick_reveal(self):
        if not self._reveal_queue:
            return
        n = REVEAL_PER_FRAME[self.speed]
        if n is None:
            n = len(self._reveal_queue)
        for c in self._reveal_queue[:n]:
            self._hidden.discard(c)
        del self._reveal_queue[:n]

    def _finish_reveal(self):
        self._reveal_queue.clear()
        self._hidden.clear()

    # ---------- search ----------
    def _ensure_runner(self) -> bool:
        if self.runner is not None:
            return True
        self._finish_reveal()
        self._clear_overlays()
        runner = CheckpointSearch(algo_name=self.algo_key)
        try:
            runner.init(self.grid)
        except GridBusyError as ex:
            log.warning("cannot start search: %s", ex)
            return False
        self.runner = runner
        self._run_started = time.time()
        self._run_elapsed = 0.0
        log.info("search started: %s, checkpoint=%s", ALGO_LABELS[self.algo_key], self.grid.checkpoint)
        return True

    def _do_step(self):
        if self.state in ("Done", "No path"):
            self.running = False
            return
        if not self._ensure_runner():
            self.running = False
            return
        res = self.runner.step()
        self._apply_step(res)

    def _apply_step(self, res: StepResult):
        if res.second_phase != self._phase2:
            self._phase2 = res.second_phase
            self.open_set.clear()
        if self.runner.mode is SearchMode.FALLBACK and not self.probe_set:
            self.probe_set = set(self.runner.probe)
            self.closed_set.clear()
            self.open_set.clear()

        target = self.second_set if res.second_phase else self.closed_set
        for c in res.opened:
            self.open_set.add(c)
        for c in res.closed:
            self.open_set.discard(c)
            target.add(c)
        self.current = res.current
        if res.metrics:
            self._last_metrics = res.metrics

        if res.finished:
            self.running = False
            self.current = None
            self._run_elapsed = time.time() - (self._run_started or time.time())
            self._run_started = None
            if res.status == "done":
                self.path = self.runner.outcome().path
                self.state = "Done"
                log.info("path found: %d nodes, %d visited", len(self.path),
                         len(self.runner.outcome().visited))
            else:
                self.state = "No path"
                log.info("no path: %d visited", len(self.runner.outcome().visited))
        else:
            self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _clear_overlays(self):
        self.open_set.clear()
        self.closed_set.clear()
        self.second_set.clear()
        self.probe_set.clear()
        self.current = None
        self.path = []
        self._phase2 = False
        self._last_metrics = {"algo": ALGO_LABELS[self.algo_key]}

    def _reset(self):
        """Drop the current run and its overlays; walls and special nodes stay."""
        if self.runner is not None:
            self.runner.cancel()
            self.runner = None
        self.running = False
        self.state = "Idle"
        self._step_budget = 0.0
        self._run_started = None
        self._run_elapsed = 0.0
        reset_search_fields(self.grid)
        self._clear_overlays()
        self._refresh_active_states()

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            self._reset()
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _switch_algo(self, key: str):
        self.algo_key = key
        log.info("algorithm: %s", ALGO_LABELS[key])
        self._reset()

    def _cycle_speed(self):
        self.speed = next_speed(self.speed)
        self._step_budget = 0.0
        log.info("speed: %s", self.speed)
        self._build_buttons()

    # ---------- grid editing ----------
    def _before_edit(self) -> bool:
        """Edits invalidate a finished result; they are refused mid-run."""
        if self.runner is not None and not self.runner.done and not self.runner.no_path:
            log.warning("grid is busy with a search; reset first")
            return False
        if self.runner is not None:
            self._reset()
        self._finish_reveal()
        return True

    def _apply_maze(self, key: str):
        if not self._before_edit():
            return
        seed = self.rng.randrange(2 ** 32)
        try:
            placements = generate_maze(self.grid, key, seed=seed)
        except GridBusyError as ex:
            log.warning("maze %s refused: %s", key, ex)
            return
        self.maze_key = key
        self._reveal_queue = list(placements)
        self._hidden = set(placements)
        log.info("maze %s: %d walls (seed %d)", key, len(placements), seed)
        self._refresh_active_states()

    def _clear_walls(self):
        if not self._before_edit():
            return
        self.grid.clear_walls()
        self.maze_key = None
        log.info("walls cleared")
        self._refresh_active_states()

    def _toggle_checkpoint(self):
        if not self._before_edit():
            return
        if self.grid.checkpoint is not None:
            self.grid.remove_checkpoint()
            log.info("checkpoint removed")
        elif self.grid.add_checkpoint(self.settings.checkpoint_slot) or self.grid.add_checkpoint(rng=self.rng):
            log.info("checkpoint added at %s", self.grid.checkpoint)
        else:
            log.warning("no free cell for a checkpoint")
        self._build_buttons()

    def _randomize_nodes(self):
        if not self._before_edit():
            return
        self.grid.randomize_special_nodes(self.rng)
        log.info("special nodes: start=%s end=%s checkpoint=%s",
                 self.grid.start, self.grid.end, self.grid.checkpoint)

    def _toggle_boost(self):
        self.boost = not self.boost
        self._refresh_active_states()

    def _paint(self, c: Cell):
        if self.boost:
            self.grid.set_walls_boost(c[0], c[1], self._paint_value)
        else:
            self.grid.set_wall(c[0], c[1], self._paint_value)

    def _press_cell(self, c: Cell):
        if not self._before_edit():
            return
        node = self.grid.node_at(c)
        if node.is_special:
            self._drag_kind = node.role
            self._drag_from = c
            return
        self._paint_value = not node.is_wall
        self._paint(c)

    def _drag_to(self, c: Cell):
        if self._drag_kind is not None:
            if c != self._drag_from and self.grid.move_special_node(self._drag_kind, self._drag_from, c):
                self._drag_from = c
        elif self._paint_value is not None:
            self._paint(c)

    def _release_drag(self):
        if self._drag_kind is not None:
            log.info("%s moved to %s", self._drag_kind.value, self._drag_from)
        self._drag_kind = None
        self._drag_from = None
        self._paint_value = None

    # ---------- events ----------
    def _cell_under(self, pos) -> Optional[Cell]:
        return cell_at_pixel(pos, self._grid_origin, self.cell_size, self.grid.rows, self.grid.cols)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type == pygame.VIDEORESIZE:
                self._apply_aspect_resize(e.w, e.h)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if any(b.handle_mouse(e) for b in list(self._buttons)):
                    continue
                c = self._cell_under(e.pos)
                if c is not None:
                    self._press_cell(c)
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                if e.buttons[0]:
                    c = self._cell_under(e.pos)
                    if c is not None:
                        self._drag_to(c)
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self._release_drag()

    def _handle_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            pygame.quit(); sys.exit(0)
        elif key == pygame.K_SPACE:
            self._toggle_run()
        elif key == pygame.K_n:
            self._do_step()
        elif key == pygame.K_r:
            self._reset()
        elif key == pygame.K_d:
            self._switch_algo("dijkstra")
        elif key == pygame.K_a:
            self._switch_algo("astar")
        elif key == pygame.K_c:
            self._toggle_checkpoint()
        elif key == pygame.K_w:
            self._clear_walls()
        elif key == pygame.K_b:
            self._toggle_boost()
        elif key == pygame.K_x:
            self._randomize_nodes()
        elif key == pygame.K_s:
            self._cycle_speed()
        elif pygame.K_1 <= key < pygame.K_1 + len(MAZE_KEYS):
            self._apply_maze(MAZE_KEYS[key - pygame.K_1])

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw_backdrop(self.screen)
        self._draw_grid()
        THEME.glass_panel(self.screen, self._right_band)
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin

        for node in self.grid.all_nodes():
            rect = pygame.Rect(ox + node.col * cs, oy + node.row * cs, cs, cs)
            color = THEME.FLOOR if node.cell in self._hidden else THEME.tile_color(node)
            pygame.draw.rect(self.screen, color, rect)
            pygame.draw.rect(self.screen, THEME.BLACK, rect, 1)

        # overlays: probe, closed, second phase, then open on top
        for cells, key in ((self.probe_set, "probe"), (self.closed_set, "closed"),
                           (self.second_set, "second"), (self.open_set, "open")):
            rgba = THEME.OVERLAYS[key]
            for (row, col) in cells:
                if self.grid.node_at((row, col)).is_special:
                    continue
                THEME.fill_alpha(self.screen, pygame.Rect(ox + col * cs, oy + row * cs, cs, cs), rgba)
        if self.current is not None:
            row, col = self.current
            THEME.fill_alpha(self.screen, pygame.Rect(ox + col * cs, oy + row * cs, cs, cs),
                             THEME.OVERLAYS["current"])

        pts = [cell_center(c, self._grid_origin, cs) for c in self.path]
        THEME.draw_path(self.screen, pts, time.time(), self.state == "Done")

        for c in self.grid.special_cells():
            self._draw_badge(c)

    def _draw_badge(self, c: Cell):
        node = self.grid.node_at(c)
        cx, cy = cell_center(c, self._grid_origin, self.cell_size)
        pygame.draw.circle(self.screen, THEME.tile_color(node), (cx, cy), max(5, self.cell_size // 2 - 1))
        txt = self.font_small.render(THEME.role_letter(node.role), True, THEME.WHITE)
        self.screen.blit(txt, txt.get_rect(center=(cx, cy)))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 32
        gap = 8
        half = (w - gap) // 2

        def add(label, cb, col=0, span=2, *, togglable=False, key="", store_as: Optional[str] = None):
            bx = x if col == 0 else x + half + gap
            bw = w if span == 2 else half
            btn = UIButton(label, pygame.Rect(bx, y, bw, h), cb, togglable=togglable, hotkey=key)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, key="Space", store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step, 0, 1, key="N")
        add("Reset", self._reset, 1, 1, key="R"); y += h + gap
        add(f"Speed: {self.speed}", self._cycle_speed, key="S"); y += h + gap

        add("Dijkstra", lambda: self._switch_algo("dijkstra"), 0, 1, togglable=True, key="D", store_as="btn_algo_d")
        add("A*", lambda: self._switch_algo("astar"), 1, 1, togglable=True, key="A", store_as="btn_algo_a"); y += h + gap

        cp_label = "Remove Checkpoint" if self.grid.checkpoint is not None else "Add Checkpoint"
        add(cp_label, self._toggle_checkpoint, 0, 1, key="C")
        add("Random Nodes", self._randomize_nodes, 1, 1, key="X"); y += h + gap
        add("Clear Walls", self._clear_walls, 0, 1, key="W")
        add("Boost Brush", self._toggle_boost, 1, 1, togglable=True, key="B", store_as="btn_boost"); y += h + gap * 2

        self._maze_buttons = {}
        for i, name in enumerate(MAZE_KEYS):
            add(MAZE_LABELS[name], (lambda k=name: self._apply_maze(k)), i % 2, 1, togglable=True, key=str(i + 1))
            self._maze_buttons[name] = self._buttons[-1]
            if i % 2 == 1:
                y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        if hasattr(self, "btn_algo_d"):
            self.btn_algo_d.set_active(self.algo_key == "dijkstra")
        if hasattr(self, "btn_algo_a"):
            self.btn_algo_a.set_active(self.algo_key == "astar")
        if hasattr(self, "btn_boost"):
            self.btn_boost.set_active(self.boost)
        for key, btn in getattr(self, "_maze_buttons", {}).items():
            btn.set_active(key == self.maze_key)

    def get_run_time_str(self) -> str:
        if self._run_started is not None:
            return format_elapsed(time.time() - self._run_started)
        return format_elapsed(self._run_elapsed)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band
        THEME.card(self.screen, pygame.Rect(rb.x + 10, rb.y + 10, rb.width - 20, 230))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=THEME.TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 5

        line("Metrics", big=True, color=THEME.ACCENT_GOLD)
        m = self._last_metrics
        line(f"State: {self.state}")
        line(f"Mode: {m.get('mode', '-')}   Phase: {m.get('phase', '-')}")
        line(f"Popped: {m.get('popped', 0)}   Open: {m.get('open_size', 0)}")
        line(f"Visited (all phases): {m.get('visited_total', 0)}")
        line(f"Path Len: {len(self.path)}")
        line(f"Run Time: {self.get_run_time_str()}")
        line("-" * 26, color=THEME.TEXT_DIM)
        line(f"Algo: {ALGO_LABELS[self.algo_key]}   Speed: {self.speed}")
        line(f"Maze: {MAZE_LABELS.get(self.maze_key, 'none')}")

        for b in self._buttons:
            b.draw(self.screen, self.font_small)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    try:
        settings = resolve_settings(argv)
    except ValueError as ex:
        sys.exit(f"gridpath-viewer: {ex}")
    logging.basicConfig(level=getattr(logging, settings.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    log.info("board %dx%d, start=%s end=%s", settings.rows, settings.cols, settings.start, settings.end)
    Viewer(settings).run()

if __name__ == "__main__":
    main()
