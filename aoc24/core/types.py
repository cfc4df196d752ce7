# aoc24/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Set, Tuple, TypeVar

from aoc24.core.direction import Pos
from aoc24.core.errors import LandmarkNotFound

T = TypeVar("T")


class Tile(Enum):
    WALL = "#"
    OPEN = "."
    START = "S"
    END = "E"


@dataclass
class Grid(Generic[T]):
    rows: int
    cols: int
    cells: List[List[T]]             # [row][col]

    @classmethod
    def filled(cls, rows: int, cols: int, value: T) -> "Grid[T]":
        return cls(rows, cols, [[value] * cols for _ in range(rows)])

    @classmethod
    def from_rows(cls, rows: List[List[T]]) -> "Grid[T]":
        width = len(rows[0]) if rows else 0
        assert all(len(r) == width for r in rows), "ragged grid rows"
        return cls(len(rows), width, rows)

    def in_bounds(self, pos: Pos) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Optional[T]:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.cells[row][col]
        return None

    def at(self, pos: Pos) -> Optional[T]:
        return self.get(pos[0], pos[1])

    def set(self, row: int, col: int, value: T) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) outside {self.rows}x{self.cols} grid")
        self.cells[row][col] = value

    def positions(self) -> Iterator[Tuple[Pos, T]]:
        for row, line in enumerate(self.cells):
            for col, cell in enumerate(line):
                yield (row, col), cell

    def locate(self, predicate: Callable[[T], bool]) -> Pos:
        for pos, cell in self.positions():
            if predicate(cell):
                return pos
        raise LandmarkNotFound("no cell matches the requested landmark")

    def find(self, value: T) -> Pos:
        for pos, cell in self.positions():
            if cell == value:
                return pos
        raise LandmarkNotFound(f"no {value!r} cell in grid")

    def clone(self) -> "Grid[T]":
        return Grid(self.rows, self.cols, [list(r) for r in self.cells])

    def is_wall(self, pos: Pos) -> bool:
        """Out-of-bounds counts as wall."""
        cell = self.at(pos)
        return cell is None or cell == Tile.WALL


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Pos] = field(default_factory=list)
    closed: List[Pos] = field(default_factory=list)
    current: Optional[Pos] = None
    path: Optional[List[Pos]] = None
    tiles: Optional[Set[Pos]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
