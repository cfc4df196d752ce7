#!/usr/bin/env python3
"""
Day 06: guard patrol. The guard walks straight and turns right at obstacles
until leaving the map.

Part 2 tries one extra obstacle in front of the guard at every new cell of
its route, each time on its own clone of the map, and counts the placements
that trap the guard in a loop.
"""

from typing import Optional, Set, Tuple, Union

from aoc24.core.direction import ARROWS, Direction, Pos
from aoc24.core.loader import parse_grid, start_day
from aoc24.core.types import Grid, Tile

DAY = "06"

Cell = Union[Tile, Direction]       # a Direction marks the guard's start cell

LEGEND = {".": Tile.OPEN, "#": Tile.WALL, **ARROWS}


def parse(text: str) -> Grid[Cell]:
    return parse_grid(text, LEGEND)


def _guard(lab: Grid[Cell]) -> Tuple[Pos, Direction]:
    pos = lab.locate(lambda c: isinstance(c, Direction))
    return pos, lab.at(pos)


def _advance(lab: Grid[Cell], pos: Pos, facing: Direction) -> Optional[Tuple[Pos, Direction]]:
    """One tick of the patrol; None once the guard walks off the map."""
    ahead = facing.offset_from(pos)
    cell = lab.at(ahead)
    if cell is None:
        return None
    if cell == Tile.WALL:
        return pos, facing.rotate()
    return ahead, facing


def _loops(lab: Grid[Cell], pos: Pos, facing: Direction) -> bool:
    seen: Set[Tuple[Pos, Direction]] = {(pos, facing)}
    state = _advance(lab, pos, facing)
    while state is not None:
        if state in seen:
            return True
        seen.add(state)
        state = _advance(lab, *state)
    return False


def part1(text: str) -> int:
    lab = parse(text)
    pos, facing = _guard(lab)
    visited = {pos}
    state = _advance(lab, pos, facing)
    while state is not None:
        visited.add(state[0])
        state = _advance(lab, *state)
    return len(visited)


def part2(text: str) -> int:
    lab = parse(text)
    pos, facing = _guard(lab)
    tried: Set[Pos] = set()
    looping = 0
    while True:
        ahead = facing.offset_from(pos)
        cell = lab.at(ahead)
        if cell is None:
            return looping
        if cell == Tile.OPEN and ahead not in tried:
            tried.add(ahead)
            blocked = lab.clone()
            blocked.set(*ahead, Tile.WALL)
            if _loops(blocked, pos, facing):
                looping += 1
        pos, facing = _advance(lab, pos, facing)


def main():
    text = start_day(DAY)
    print("=== Part 1 ===")
    print(f"Result = {part1(text)}")
    print("\n=== Part 2 ===")
    print(f"Result = {part2(text)}")


if __name__ == "__main__":
    main()
