#!/usr/bin/env python3
"""Day 10: hiking trails climb one height unit per step, from 0 to 9."""

from collections import deque
from typing import Dict, Iterator

from aoc24.core.direction import Direction, Pos
from aoc24.core.loader import parse_grid, start_day
from aoc24.core.types import Grid

DAY = "10"


def parse(text: str) -> Grid[int]:
    return parse_grid(text, int)


def _uphill(topo: Grid[int], pos: Pos) -> Iterator[Pos]:
    height = topo.at(pos)
    for d in Direction.values():
        nxt = d.offset_from(pos)
        if topo.at(nxt) == height + 1:
            yield nxt


def _score(topo: Grid[int], head: Pos) -> int:
    seen = {head}
    todo = deque([head])
    peaks = 0
    while todo:
        pos = todo.popleft()
        if topo.at(pos) == 9:
            peaks += 1
            continue
        for nxt in _uphill(topo, pos):
            if nxt not in seen:
                seen.add(nxt)
                todo.append(nxt)
    return peaks


def _rating(topo: Grid[int], pos: Pos, cache: Dict[Pos, int]) -> int:
    """Number of distinct trails from `pos` to any 9."""
    if pos in cache:
        return cache[pos]
    if topo.at(pos) == 9:
        rating = 1
    else:
        rating = sum(_rating(topo, nxt, cache) for nxt in _uphill(topo, pos))
    cache[pos] = rating
    return rating


def part1(text: str) -> int:
    topo = parse(text)
    return sum(_score(topo, pos) for pos, h in topo.positions() if h == 0)


def part2(text: str) -> int:
    topo = parse(text)
    cache: Dict[Pos, int] = {}
    return sum(_rating(topo, pos, cache) for pos, h in topo.positions() if h == 0)


def main():
    text = start_day(DAY)
    print("=== Part 1 ===")
    print(f"Result = {part1(text)}")
    print("\n=== Part 2 ===")
    print(f"Result = {part2(text)}")


if __name__ == "__main__":
    main()
