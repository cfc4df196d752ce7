#!/usr/bin/env python3
"""
Day 12: garden plots. Regions are labelled in one flood-fill pass into a
side-array shaped like the garden; fence prices are read off the labels.
"""

from collections import deque
from typing import Dict, Optional

from aoc24.core.direction import Direction, Pos
from aoc24.core.loader import parse_grid, start_day
from aoc24.core.types import Grid

DAY = "12"


def parse(text: str) -> Grid[str]:
    def plant(ch: str) -> str:
        if not ch.isalpha():
            raise ValueError(ch)
        return ch
    return parse_grid(text, plant)


def label_regions(garden: Grid[str]) -> Grid[Optional[int]]:
    labels: Grid[Optional[int]] = Grid.filled(garden.rows, garden.cols, None)
    next_label = 0
    for seed, plant in garden.positions():
        if labels.at(seed) is not None:
            continue
        labels.set(*seed, next_label)
        todo = deque([seed])
        while todo:
            pos = todo.popleft()
            for d in Direction.values():
                nxt = d.offset_from(pos)
                if garden.at(nxt) == plant and labels.at(nxt) is None:
                    labels.set(*nxt, next_label)
                    todo.append(nxt)
        next_label += 1
    return labels


def _corners(labels: Grid[Optional[int]], pos: Pos) -> int:
    """Corners of a region touching this cell; a region has as many sides as corners."""
    mine = labels.at(pos)
    count = 0
    for d1 in Direction.values():
        d2 = d1.rotate()
        a = labels.at(d1.offset_from(pos)) == mine
        b = labels.at(d2.offset_from(pos)) == mine
        diag = labels.at(d2.offset_from(d1.offset_from(pos))) == mine
        if (not a and not b) or (a and b and not diag):
            count += 1
    return count


def _price(text: str, with_sides: bool) -> int:
    labels = label_regions(parse(text))
    area: Dict[int, int] = {}
    fence: Dict[int, int] = {}
    for pos, label in labels.positions():
        area[label] = area.get(label, 0) + 1
        if with_sides:
            edges = _corners(labels, pos)
        else:
            edges = sum(labels.at(d.offset_from(pos)) != label for d in Direction.values())
        fence[label] = fence.get(label, 0) + edges
    return sum(area[k] * fence[k] for k in area)


def part1(text: str) -> int:
    return _price(text, with_sides=False)


def part2(text: str) -> int:
    return _price(text, with_sides=True)


def main():
    text = start_day(DAY)
    print("=== Part 1 ===")
    print(f"Result = {part1(text)}")
    print("\n=== Part 2 ===")
    print(f"Result = {part2(text)}")


if __name__ == "__main__":
    main()
