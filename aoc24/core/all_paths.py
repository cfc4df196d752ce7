# aoc24/core/all_paths.py
#!/usr/bin/env python3
"""
All-optimal-paths variant of the state-space search.

Same queue discipline as AStarSearch, with two differences:
- relaxation accepts ties (<=): a state reached again at its best cost
  gains another back-link in `preds` instead of being dropped;
- reaching the goal only confirms the minimum. Popping goes on until the
  popped estimate exceeds that minimum, so every goal state reachable at
  the minimum cost (any facing) is collected.

The tile set is rebuilt afterwards by walking the back-links from every
optimal goal state, instead of carrying a visited set inside each queue
entry. The union is the same either way.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Set
from math import inf

from aoc24.core.astar import AStarSearch, Movement, REINDEER, State
from aoc24.core.direction import Direction, Pos
from aoc24.core.errors import NoPathFound
from aoc24.core.types import Grid, StepResult


@dataclass(frozen=True)
class OptimalTiles:
    cost: int
    tiles: FrozenSet[Pos]


@dataclass
class AllPathsSearch(AStarSearch):
    name: str = "All optimal paths"

    preds: Dict[State, Set[State]] = field(default_factory=dict)
    goal_states: List[State] = field(default_factory=list)
    tiles: Set[Pos] = field(default_factory=set)

    def reset(self) -> None:
        self.preds.clear()
        self.goal_states.clear()
        self.tiles.clear()
        super().reset()

    def _collect_tiles(self) -> Set[Pos]:
        seen: Set[State] = set(self.goal_states)
        todo = deque(self.goal_states)
        while todo:
            state = todo.popleft()
            for p in self.preds.get(state, ()):
                if p not in seen:
                    seen.add(p)
                    todo.append(p)
        return {pos for pos, _ in seen}

    def _finish(self) -> StepResult:
        self.done = True
        self.tiles = self._collect_tiles()
        path = self._reconstruct_path(self.goal_states[0])
        return StepResult(status="done", path=path, tiles=set(self.tiles),
                          metrics=self._metrics(path_len=len(path)))

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path(self.goal_states[0])
            return StepResult(status="done", path=path, tiles=set(self.tiles),
                              metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.open_pq:
            if self.goal_states:
                return self._finish()
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        # pruning bound: nothing left in the queue can still be optimal
        if self.result_cost is not None and self.open_pq[0].est_cost > self.result_cost:
            return self._finish()

        node = self._pop()
        if node is None:
            return StepResult(status="running", metrics=self._metrics())

        if node.pos == self.goal:
            if self.result_cost is None:
                self.result_cost = node.real_cost
            self.goal_states.append(node.state)
            return StepResult(status="running", closed=[node.pos], current=node.pos,
                              metrics=self._metrics())

        opened_now: List[Pos] = []
        for nxt, alt in self._successors(node.state, node.real_cost):
            known = self.best.get(nxt, inf)
            if alt < known:
                self.best[nxt] = alt
                self.parent[nxt] = node.state
                self.preds[nxt] = {node.state}
                self._push(alt, nxt)
                npos = nxt[0]
                if npos not in self.closed_set and npos not in self.open_set:
                    self.open_set.add(npos)
                    opened_now.append(npos)
            elif alt == known:
                self.preds.setdefault(nxt, set()).add(node.state)

        return StepResult(status="running", opened=opened_now, closed=[node.pos],
                          current=node.pos, metrics=self._metrics())

    def run_all(self) -> OptimalTiles:
        while True:
            res = self.step()
            if res.status == "done":
                return OptimalTiles(self.result_cost, frozenset(self.tiles))
            if res.status == "no_path":
                raise NoPathFound(f"no path from {self.start} to {self.goal}")

    def run(self) -> int:
        return self.run_all().cost

    def _metrics(self, path_len: int = 0) -> dict:
        m = super()._metrics(path_len)
        m["tiles"] = len(self.tiles)
        return m


def optimal_tiles(grid: Grid, start: Pos, goal: Pos, movement: Movement = REINDEER,
                  facing: Optional[Direction] = Direction.EAST) -> OptimalTiles:
    search = AllPathsSearch(movement=movement)
    search.init(grid, start, goal, facing)
    return search.run_all()
