# aoc24/core/astar.py
#!/usr/bin/env python3
"""
Weighted state-space search over a grid, one expansion per step().

A search state is (position, facing). The edge-cost model comes from
Movement:
- with a turn cost: step forward (step_cost, blocked by walls) or turn 90°
  in place (turn_cost);
- without one: facing is irrelevant (kept as None) and each of the four
  neighbours costs step_cost.

Implements the Algorithm API the viewer expects:
- init(grid, start, goal, facing) - reset() - step() -> StepResult
and run() for the solvers, which drives step() until the goal is popped.

Queue entries are SearchNode values ordered by (est_cost, seq): lowest
estimated total first, FIFO among equals. There is no decrease-key; a popped
node whose cost is above the BestCostTable entry for its state is stale and
gets dropped.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple
import heapq
from math import inf

from aoc24.core.direction import Direction, Pos, manhattan
from aoc24.core.errors import NoPathFound
from aoc24.core.types import Grid, StepResult

State = Tuple[Pos, Optional[Direction]]


@dataclass(frozen=True)
class Movement:
    step_cost: int = 1
    turn_cost: Optional[int] = None

    @property
    def directional(self) -> bool:
        return self.turn_cost is not None


REINDEER = Movement(step_cost=1, turn_cost=1000)
FREE = Movement(step_cost=1)


@dataclass(frozen=True, order=True)
class SearchNode:
    est_cost: int
    seq: int
    real_cost: int = field(compare=False)
    pos: Pos = field(compare=False)
    facing: Optional[Direction] = field(compare=False)

    @property
    def state(self) -> State:
        return (self.pos, self.facing)


@dataclass
class AStarSearch:
    name: str = "A*"
    movement: Movement = REINDEER

    # Internal state
    grid: Optional[Grid] = None
    start: Optional[Pos] = None
    goal: Optional[Pos] = None
    facing: Optional[Direction] = Direction.EAST
    open_pq: List[SearchNode] = field(default_factory=list)
    open_set: set = field(default_factory=set)         # positions, for overlay
    closed_set: set = field(default_factory=set)
    best: Dict[State, int] = field(default_factory=dict)
    parent: Dict[State, State] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    result_cost: Optional[int] = None
    goal_state: Optional[State] = None
    seq: int = 0

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Pos, goal: Optional[Pos],
             facing: Optional[Direction] = Direction.EAST) -> None:
        self.grid = grid
        self.start = start
        self.goal = goal
        self.facing = facing
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
        if self.grid is None:
            return
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.best.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.result_cost = None
        self.goal_state = None
        self.seq = 0

        facing = self.facing if self.movement.directional else None
        s = (self.start, facing)
        self.best[s] = 0
        self._push(0, s)
        self.open_set.add(self.start)

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _push(self, cost: int, state: State) -> None:
        pos, facing = state
        node = SearchNode(cost + self._h(pos), self._bump(), cost, pos, facing)
        heapq.heappush(self.open_pq, node)

    def _h(self, pos: Pos) -> int:
        """Manhattan distance scaled by the cheapest move; never overestimates."""
        if self.goal is None:
            return 0
        return manhattan(pos, self.goal) * self.movement.step_cost

    def _walkable(self, pos: Pos) -> bool:
        return not self.grid.is_wall(pos)

    def _successors(self, state: State, cost: int) -> Iterator[Tuple[State, int]]:
        pos, facing = state
        mv = self.movement
        if facing is None:
            for d in Direction.values():
                nxt = d.offset_from(pos)
                if self._walkable(nxt):
                    yield (nxt, None), cost + mv.step_cost
            return
        ahead = facing.offset_from(pos)
        if self._walkable(ahead):
            yield (ahead, facing), cost + mv.step_cost
        for turned in facing.perpendicular():
            yield (pos, turned), cost + mv.turn_cost

    def _pop(self) -> Optional[SearchNode]:
        """Pop the next live node, or None if only a stale one came out."""
        node = heapq.heappop(self.open_pq)
        if node.real_cost > self.best.get(node.state, inf):
            return None
        self.popped_count += 1
        self.open_set.discard(node.pos)
        self.closed_set.add(node.pos)
        return node

    def _reconstruct_path(self, end: State) -> List[Pos]:
        path: List[Pos] = []
        cur = end
        while True:
            pos = cur[0]
            if not path or path[-1] != pos:
                path.append(pos)
            if cur not in self.parent:
                break
            cur = self.parent[cur]
        path.reverse()
        return path

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE expansion step:
          - Pop the lowest-estimate node (stale pops are skipped).
          - If it stands on the goal, finish with its cost.
          - Else relax successors with strict < against the BestCostTable.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path(self.goal_state)
            return StepResult(status="done", path=path,
                              metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.open_pq:
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        node = self._pop()
        if node is None:
            return StepResult(status="running", metrics=self._metrics())

        if node.pos == self.goal:
            self.done = True
            self.result_cost = node.real_cost
            self.goal_state = node.state
            path = self._reconstruct_path(node.state)
            return StepResult(status="done", closed=[node.pos], current=node.pos, path=path,
                              metrics=self._metrics(path_len=len(path)))

        opened_now: List[Pos] = []
        for nxt, alt in self._successors(node.state, node.real_cost):
            if alt < self.best.get(nxt, inf):
                self.best[nxt] = alt
                self.parent[nxt] = node.state
                self._push(alt, nxt)
                npos = nxt[0]
                if npos not in self.closed_set and npos not in self.open_set:
                    self.open_set.add(npos)
                    opened_now.append(npos)

        return StepResult(status="running", opened=opened_now, closed=[node.pos],
                          current=node.pos, metrics=self._metrics())

    def run(self) -> int:
        """Step until finished; returns the minimum cost."""
        while True:
            res = self.step()
            if res.status == "done":
                return self.result_cost
            if res.status == "no_path":
                raise NoPathFound(f"no path from {self.start} to {self.goal}")

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": self.result_cost,
        }


@dataclass
class DijkstraSearch(AStarSearch):
    name: str = "Dijkstra"

    def _h(self, pos: Pos) -> int:
        return 0


def min_cost(grid: Grid, start: Pos, goal: Pos, movement: Movement = REINDEER,
             facing: Optional[Direction] = Direction.EAST) -> int:
    search = AStarSearch(movement=movement)
    search.init(grid, start, goal, facing)
    return search.run()


def cost_table(grid: Grid, start: Pos, movement: Movement = FREE,
               facing: Optional[Direction] = Direction.EAST) -> Dict[State, int]:
    """Cheapest cost from `start` to every reachable state (Dijkstra to exhaustion)."""
    search = DijkstraSearch(movement=movement)
    search.init(grid, start, None, facing)
    while search.step().status != "no_path":
        pass
    return dict(search.best)
