#!/usr/bin/env python3
"""
Day 20: race condition.

A cheat lets the racer pass through walls for up to `length` picoseconds,
starting on a track cell and ending on one. Its saving is the honest best
time minus (time to the cheat start + cheat length + time from the cheat end
to the finish). Both time tables come from one exhaustive search each, so
the count does not depend on the track being a single corridor.
"""

from typing import Dict

from aoc24.core.astar import FREE, cost_table
from aoc24.core.direction import Pos
from aoc24.core.errors import NoPathFound
from aoc24.core.loader import parse_maze, start_day
from aoc24.core.types import Grid, Tile

DAY = "20"
MIN_SAVINGS = 100


def _times(track: Grid[Tile], origin: Pos) -> Dict[Pos, int]:
    return {pos: cost for (pos, _), cost in cost_table(track, origin, FREE, None).items()}


def count_cheats(text: str, length: int, min_savings: int) -> int:
    track = parse_maze(text)
    start, end = track.find(Tile.START), track.find(Tile.END)
    from_start = _times(track, start)
    to_end = _times(track, end)
    if end not in from_start:
        raise NoPathFound(f"no path from {start} to {end}")
    honest = from_start[end]

    count = 0
    for (row, col), elapsed in from_start.items():
        for drow in range(-length, length + 1):
            span = length - abs(drow)
            for dcol in range(-span, span + 1):
                jump = abs(drow) + abs(dcol)
                remaining = to_end.get((row + drow, col + dcol))
                if remaining is None or jump < 2:
                    continue
                if honest - (elapsed + jump + remaining) >= min_savings:
                    count += 1
    return count


def part1(text: str, min_savings: int = MIN_SAVINGS) -> int:
    return count_cheats(text, 2, min_savings)


def part2(text: str, min_savings: int = MIN_SAVINGS) -> int:
    return count_cheats(text, 20, min_savings)


def main():
    text = start_day(DAY)
    print("=== Part 1 ===")
    print(f"Result = {part1(text)}")
    print("\n=== Part 2 ===")
    print(f"Result = {part2(text)}")


if __name__ == "__main__":
    main()
