import unittest

from aoc24.core.direction import Direction, manhattan
from aoc24.core.errors import LandmarkNotFound, ParseError
from aoc24.core.loader import parse_grid, parse_maze, parse_records
from aoc24.core.types import Grid, Tile


class TestDirection(unittest.TestCase):
    def test_offsets(self):
        self.assertEqual(Direction.NORTH.offset_from((3, 3)), (2, 3))
        self.assertEqual(Direction.EAST.offset_from((3, 3)), (3, 4))
        self.assertEqual(Direction.SOUTH.offset_from((3, 3), steps=2), (5, 3))
        # going negative is allowed; the grid decides it is absent
        self.assertEqual(Direction.WEST.offset_from((0, 0)), (0, -1))

    def test_perpendicular(self):
        for d in Direction.values():
            with self.subTest(direction=d):
                turns = d.perpendicular()
                self.assertEqual(len(turns), 2)
                self.assertNotIn(d, turns)
                self.assertNotIn(d.opposite(), turns)

    def test_opposite_and_rotate(self):
        self.assertEqual(Direction.NORTH.opposite(), Direction.SOUTH)
        self.assertEqual(Direction.EAST.opposite(), Direction.WEST)
        d = Direction.NORTH
        seen = []
        for _ in range(4):
            seen.append(d)
            d = d.rotate()
        self.assertEqual(seen, [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST])
        self.assertEqual(d, Direction.NORTH)

    def test_manhattan(self):
        self.assertEqual(manhattan((0, 0), (3, -4)), 7)


class TestGrid(unittest.TestCase):
    def setUp(self):
        self.grid = parse_maze("#####\n#S.E#\n#####\n")

    def test_get_bounds(self):
        self.assertEqual(self.grid.get(1, 1), Tile.START)
        self.assertIsNone(self.grid.get(-1, 0))
        self.assertIsNone(self.grid.get(0, -1))
        self.assertIsNone(self.grid.get(3, 0))
        self.assertIsNone(self.grid.get(0, 5))
        self.assertTrue(self.grid.is_wall((-1, -1)))

    def test_locate(self):
        self.assertEqual(self.grid.find(Tile.START), (1, 1))
        self.assertEqual(self.grid.locate(lambda c: c == Tile.END), (1, 3))
        with self.assertRaises(LandmarkNotFound):
            parse_maze("###\n#.#\n###").find(Tile.START)

    def test_clone_is_independent(self):
        copy = self.grid.clone()
        copy.set(1, 2, Tile.WALL)
        self.assertEqual(copy.get(1, 2), Tile.WALL)
        self.assertEqual(self.grid.get(1, 2), Tile.OPEN)
        with self.assertRaises(IndexError):
            copy.set(5, 5, Tile.WALL)

    def test_filled(self):
        g = Grid.filled(2, 3, 0)
        self.assertEqual((g.rows, g.cols), (2, 3))
        g.set(0, 0, 1)
        self.assertEqual(g.get(1, 0), 0)
        self.assertEqual(len(list(g.positions())), 6)


class TestParsing(unittest.TestCase):
    def test_unexpected_character(self):
        with self.assertRaises(ParseError) as ctx:
            parse_maze("#S#\n#X#\n#E#")
        self.assertIn("line 2", str(ctx.exception))

    def test_blank_line_and_ragged_rows(self):
        with self.assertRaises(ParseError):
            parse_maze("#S#\n\n#E#")
        with self.assertRaises(ParseError):
            parse_maze("#S#\n#E")
        with self.assertRaises(ParseError):
            parse_maze("")

    def test_callable_legend(self):
        g = parse_grid("12\n34", int)
        self.assertEqual(g.get(1, 0), 3)
        with self.assertRaises(ParseError):
            parse_grid("1a", int)

    def test_records(self):
        pairs = parse_records("1,2\n30,4\n", r"(\d+),(\d+)", lambda a, b: (int(a), int(b)))
        self.assertEqual(pairs, [(1, 2), (30, 4)])
        with self.assertRaises(ParseError):
            parse_records("1,2\n3;4", r"(\d+),(\d+)", lambda a, b: (a, b))


if __name__ == "__main__":
    unittest.main()
