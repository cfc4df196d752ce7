# aoc24/core/direction.py
#!/usr/bin/env python3
from enum import Enum
from typing import Tuple

Pos = Tuple[int, int]  # (row, col)


class Direction(Enum):
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    def offset_from(self, pos: Pos, steps: int = 1) -> Pos:
        """Neighbouring position `steps` cells away.

        Coordinates may go negative; Grid.get() treats those as absent.
        """
        row, col = pos
        drow, dcol = self.value
        return (row + drow * steps, col + dcol * steps)

    def perpendicular(self) -> Tuple["Direction", "Direction"]:
        if self in (Direction.NORTH, Direction.SOUTH):
            return (Direction.EAST, Direction.WEST)
        return (Direction.NORTH, Direction.SOUTH)

    def opposite(self) -> "Direction":
        drow, dcol = self.value
        return Direction((-drow, -dcol))

    def rotate(self) -> "Direction":
        """Quarter turn clockwise."""
        drow, dcol = self.value
        return Direction((dcol, -drow))

    @staticmethod
    def values() -> Tuple["Direction", ...]:
        return (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


ARROWS = {
    "^": Direction.NORTH,
    ">": Direction.EAST,
    "v": Direction.SOUTH,
    "<": Direction.WEST,
}


def manhattan(a: Pos, b: Pos) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
