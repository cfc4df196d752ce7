#!/usr/bin/env python3
"""
Day 18: falling bytes corrupt cells of a square memory grid.

Part 1: fewest steps from the top-left to the bottom-right corner once the
first 1024 bytes have landed. Part 2: the first byte after which the exit is
unreachable. Reachability only ever gets worse as bytes land, so the byte
count is bisected instead of re-running the search after every byte.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from aoc24.core.astar import FREE, min_cost
from aoc24.core.errors import NoPathFound, PuzzleError
from aoc24.core.loader import parse_records, start_day
from aoc24.core.types import Grid, Tile

DAY = "18"
GRID_SIZE = (71, 71)
FIRST_BYTES = 1024


@dataclass(frozen=True)
class BytePos:
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


def parse(text: str) -> List[BytePos]:
    return parse_records(text, r"(\d+),(\d+)", lambda x, y: BytePos(int(x), int(y)))


def corrupted_grid(size: Tuple[int, int], fallen: Iterable[BytePos]) -> Grid[Tile]:
    rows, cols = size
    grid = Grid.filled(rows, cols, Tile.OPEN)
    for b in fallen:
        # bytes outside the grid are ignored
        if grid.in_bounds((b.y, b.x)):
            grid.set(b.y, b.x, Tile.WALL)
    return grid


def steps_required(size: Tuple[int, int], fallen: Iterable[BytePos]) -> int:
    grid = corrupted_grid(size, fallen)
    return min_cost(grid, (0, 0), (size[0] - 1, size[1] - 1), FREE, None)


def _reachable(size: Tuple[int, int], fallen: List[BytePos]) -> bool:
    try:
        steps_required(size, fallen)
    except NoPathFound:
        return False
    return True


def first_blocking_byte(size: Tuple[int, int], fallen: List[BytePos]) -> BytePos:
    if _reachable(size, fallen):
        raise PuzzleError("exit stays reachable after every byte")
    lo, hi = 0, len(fallen)     # reachable with fallen[:lo], blocked with fallen[:hi]
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if _reachable(size, fallen[:mid]):
            lo = mid
        else:
            hi = mid
    return fallen[hi - 1]


def part1(text: str) -> int:
    return steps_required(GRID_SIZE, parse(text)[:FIRST_BYTES])


def part2(text: str) -> str:
    return str(first_blocking_byte(GRID_SIZE, parse(text)))


def main():
    text = start_day(DAY)
    print("=== Part 1 ===")
    print(f"Result = {part1(text)}")
    print("\n=== Part 2 ===")
    print(f"Result = {part2(text)}")


if __name__ == "__main__":
    main()
