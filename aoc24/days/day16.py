#!/usr/bin/env python3
"""Day 16: reindeer maze. Step 1 point, quarter turn 1000 points, start facing east."""

from aoc24.core.all_paths import optimal_tiles
from aoc24.core.astar import REINDEER, min_cost
from aoc24.core.direction import Direction
from aoc24.core.loader import parse_maze, start_day
from aoc24.core.types import Tile

DAY = "16"


def part1(text: str) -> int:
    maze = parse_maze(text)
    return min_cost(maze, maze.find(Tile.START), maze.find(Tile.END), REINDEER, Direction.EAST)


def part2(text: str) -> int:
    maze = parse_maze(text)
    best = optimal_tiles(maze, maze.find(Tile.START), maze.find(Tile.END), REINDEER, Direction.EAST)
    return len(best.tiles)


def main():
    text = start_day(DAY)
    print("=== Part 1 ===")
    print(f"Result = {part1(text)}")
    print("\n=== Part 2 ===")
    print(f"Result = {part2(text)}")


if __name__ == "__main__":
    main()
