# aoc24/app/viewer.py
#!/usr/bin/env python3
"""
Maze Search Viewer: watch the state-space search expand one node per step

- Keyboard:
    [1]/[2]/[3]  -> switch maze
    [D]/[A]/[P]  -> select algorithm (Dijkstra / A* / All optimal paths)
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Maze selection:
- ENV: MAZE_VIEWER_MAP=<key or path to a maze file>
- CLI: --map=<key or path>

Costs follow the reindeer rules: 1 per step forward, 1000 per quarter turn,
starting east.
"""

import sys, os, time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

import pygame

from aoc24.core.all_paths import AllPathsSearch
from aoc24.core.astar import AStarSearch, DijkstraSearch, REINDEER
from aoc24.core.direction import Direction, Pos
from aoc24.core.loader import parse_maze
from aoc24.core.types import Grid, Tile

# ---------- Config ----------
MAP_DIR = Path(__file__).resolve().parents[2] / "maps"
MAP_FILES = {
    "16_example_1": MAP_DIR / "16_example_1.txt",
    "16_example_2": MAP_DIR / "16_example_2.txt",
    "20_racetrack": MAP_DIR / "20_racetrack.txt",
}
MAP_KEYS = {pygame.K_1: "16_example_1", pygame.K_2: "16_example_2", pygame.K_3: "20_racetrack"}
ALGOS = ("Dijkstra", "A*", "All optimal paths")
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 32
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
WALL_GRAY   = ( 60, 64, 72)
FLOOR_GRAY  = (200,200,200)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
GOLD_A      = (255,210,0,140)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)


def resolve_map() -> str:
    choice = os.getenv("MAZE_VIEWER_MAP", "16_example_1")
    for arg in sys.argv[1:]:
        if arg.startswith("--map="):
            choice = arg.split("=", 1)[1]
    return choice


# ---------- Loader ----------
@dataclass
class Maze:
    grid: Grid[Tile]
    start: Pos
    goal: Pos


def load_map(path: Path) -> Maze:
    grid = parse_maze(Path(path).read_text())
    return Maze(grid, grid.find(Tile.START), grid.find(Tile.END))


def _map_path(choice: str) -> Path:
    return MAP_FILES.get(choice, Path(choice))


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, maze: Maze, map_key: str = "custom"):
        pygame.init()

        self.maze = maze
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = self._auto_cell_size(maze.grid)
        win_w = GRID_MARGIN*2 + maze.grid.cols * self.cell_size + PANEL_W
        win_h = max(GRID_MARGIN*2 + maze.grid.rows * self.cell_size, 560)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Maze search - {map_key}")

        self._buttons: List[UIButton] = []

        self.open_set: Set[Pos] = set()
        self.closed_set: Set[Pos] = set()
        self.path: List[Pos] = []
        self.tiles: Set[Pos] = set()

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 30
        self.state = "Idle"
        self.selected_map_key = map_key
        self.selected_algo = "A*"

        self._layout(win_w, win_h)
        self.algo = self._make_algo(self.selected_algo)
        self._reset_overlays()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and anchor the grid on the left."""
        grid = self.maze.grid
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(8, min(avail_w // grid.cols, avail_h // grid.rows)))

        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        grid_right = GRID_MARGIN*2 + grid.cols * self.cell_size
        self._right_band = pygame.Rect(grid_right, 0, max(PANEL_W, win_w - grid_right), win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(12, min(CELL_SIZE_DEFAULT, target_h // grid.rows))

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        step_interval = 1.0 / max(1, self.steps_per_sec)
        if not hasattr(self, "_last_step_t"):
            self._last_step_t = 0.0
        if t0 - self._last_step_t >= step_interval:
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res = self.algo.step()
        for c in res.opened: self.open_set.add(c)
        for c in res.closed:
            self.closed_set.add(c)
            self.open_set.discard(c)
        if res.path is not None: self.path = res.path
        if res.tiles is not None: self.tiles = res.tiles
        if res.status == "done":
            self.state = "Done"; self.running = False
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
        elif res.status in ("running","idle"):
            self.state = "Running" if self.running else "Idle"
        if res.metrics:
            self._last_metrics = res.metrics
        self._refresh_active_states()
        return res

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+5)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-5)
                elif e.key in MAP_KEYS:
                    self._switch_map(MAP_KEYS[e.key])
                elif e.key == pygame.K_d:
                    self._switch_algo("Dijkstra")
                elif e.key == pygame.K_a:
                    self._switch_algo("A*")
                elif e.key == pygame.K_p:
                    self._switch_algo("All optimal paths")
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _make_algo(self, label: str):
        if label == "Dijkstra":
            algo = DijkstraSearch(movement=REINDEER)
        elif label == "A*":
            algo = AStarSearch(movement=REINDEER)
        else:
            algo = AllPathsSearch(movement=REINDEER)
        algo.init(self.maze.grid, self.maze.start, self.maze.goal, Direction.EAST)
        return algo

    def _switch_map(self, key: str):
        if key not in MAP_FILES: return
        try:
            self.maze = load_map(MAP_FILES[key])
        except (OSError, ValueError, LookupError) as ex:
            print(f"Failed to load map {key}: {ex}")
            return
        self.selected_map_key = key
        pygame.display.set_caption(f"Maze search - {key}")
        self._layout(*self.screen.get_size())
        self._switch_algo(self.selected_algo)

    def _switch_algo(self, label: str):
        self.selected_algo = label
        self.algo = self._make_algo(label)
        self.running = False; self.state = "Idle"
        self._reset_overlays()
        self._refresh_active_states()

    def _reset_overlays(self):
        self.open_set.clear()
        self.closed_set.clear()
        self.path = []
        self.tiles = set()
        self._last_metrics = {
            "algo": self.selected_algo,
            "popped": 0,
            "open_size": 0,
            "closed_count": 0,
            "path_len": 0,
            "total_cost": None,
        }

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self._reset_overlays()
        self._refresh_active_states()

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(top[i] + (bot[i]-top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, pos: Pos) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = pos
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _overlay(self, cells, rgba: Tuple[int, int, int, int]):
        cs = self.cell_size
        s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(rgba)
        for pos in cells:
            self.screen.blit(s, self._cell_rect(pos).topleft)

    def _draw_grid(self):
        for pos, tile in self.maze.grid.positions():
            rect = self._cell_rect(pos)
            pygame.draw.rect(self.screen, WALL_GRAY if tile == Tile.WALL else FLOOR_GRAY, rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        self._overlay(self.closed_set, NEON_MAG_A)
        self._overlay(self.open_set, NEON_CYAN_A)
        self._overlay(self.tiles, GOLD_A)

        if len(self.path) >= 2:
            pts = [self._cell_rect(pos).center for pos in self.path]
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, max(2, self.cell_size // 6))

        self._draw_badge(self.maze.start, BLUE, "S")
        self._draw_badge(self.maze.goal, RED, "E")

    def _draw_badge(self, pos: Pos, color: Tuple[int,int,int], label: str):
        center = self._cell_rect(pos).center
        pygame.draw.circle(self.screen, color, center, max(5, self.cell_size//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Reset", self._reset);       y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Speed −", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-5)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+5)))
        y += h + gap

        self._algo_buttons: Dict[str, UIButton] = {}
        for label in ALGOS:
            add(f"Algo: {label}", lambda l=label: self._switch_algo(l), togglable=True)
            self._algo_buttons[label] = self._buttons[-1]; y += h + gap

        self._map_buttons: Dict[str, UIButton] = {}
        for key in MAP_FILES:
            add(f"Map: {key}", lambda k=key: self._switch_map(k), togglable=True)
            self._map_buttons[key] = self._buttons[-1]; y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        for label, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(label == self.selected_algo)
        for key, btn in getattr(self, "_map_buttons", {}).items():
            btn.set_active(key == self.selected_map_key)

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(240, self.steps_per_sec + dv)))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 210), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line(f"Metrics ({self.state})", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if m.get("total_cost") is not None:
            line(f"Total Cost: {m['total_cost']}")
        if m.get("tiles"):
            line(f"Optimal tiles: {m['tiles']}")
        line(f"Speed: {self.steps_per_sec} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    choice = resolve_map()
    try:
        maze = load_map(_map_path(choice))
    except (OSError, ValueError, LookupError) as ex:
        print(f"Failed to load map {choice}: {ex}")
        sys.exit(1)
    Viewer(maze, map_key=choice).run()


if __name__ == "__main__":
    main()
