import unittest

from aoc24.core.errors import LandmarkNotFound, NoPathFound, ParseError, PuzzleError
from aoc24.days import day06, day10, day12, day16, day18, day20

from tests.test_search import MAZE_ONE, MAZE_TWO, WALLED_OFF

PATROL = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#..."""

TOPOGRAPHY = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732"""

GARDEN = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE"""

BYTES = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0"""

RACETRACK = """\
###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############"""


class TestDay06(unittest.TestCase):
    def test_part_one(self):
        self.assertEqual(day06.part1(PATROL), 41)

    def test_part_two(self):
        self.assertEqual(day06.part2(PATROL), 6)

    def test_missing_guard(self):
        with self.assertRaises(LandmarkNotFound):
            day06.part1("..#\n...")


class TestDay10(unittest.TestCase):
    def test_part_one(self):
        self.assertEqual(day10.part1(TOPOGRAPHY), 36)
        self.assertEqual(day10.part1("0123\n1234\n8765\n9876"), 1)

    def test_part_two(self):
        self.assertEqual(day10.part2(TOPOGRAPHY), 81)


class TestDay12(unittest.TestCase):
    SMALL = "AAAA\nBBCD\nBBCC\nEEEC"

    def test_part_one(self):
        self.assertEqual(day12.part1(self.SMALL), 140)
        self.assertEqual(day12.part1(GARDEN), 1930)

    def test_part_two(self):
        self.assertEqual(day12.part2(self.SMALL), 80)
        self.assertEqual(day12.part2(GARDEN), 1206)

    def test_labels(self):
        labels = day12.label_regions(day12.parse(self.SMALL))
        self.assertEqual(len({label for _, label in labels.positions()}), 5)

    def test_bad_plot(self):
        with self.assertRaises(ParseError):
            day12.part1("AA\nA1")


class TestDay16(unittest.TestCase):
    def test_part_one(self):
        self.assertEqual(day16.part1(MAZE_ONE), 7036)
        self.assertEqual(day16.part1(MAZE_TWO), 11048)

    def test_part_two(self):
        self.assertEqual(day16.part2(MAZE_ONE), 45)
        self.assertEqual(day16.part2(MAZE_TWO), 64)

    def test_failures(self):
        with self.assertRaises(NoPathFound):
            day16.part1(WALLED_OFF)
        with self.assertRaises(LandmarkNotFound):
            day16.part1("####\n#S.#\n####")
        with self.assertRaises(ParseError):
            day16.part1("####\n#S?E\n####")


class TestDay18(unittest.TestCase):
    def test_part_one(self):
        self.assertEqual(day18.steps_required((7, 7), day18.parse(BYTES)[:12]), 22)

    def test_part_two(self):
        blocking = day18.first_blocking_byte((7, 7), day18.parse(BYTES))
        self.assertEqual(blocking, day18.BytePos(6, 1))
        self.assertEqual(str(blocking), "6,1")

    def test_never_blocked(self):
        with self.assertRaises(PuzzleError):
            day18.first_blocking_byte((7, 7), day18.parse(BYTES)[:12])

    def test_bad_line(self):
        with self.assertRaises(ParseError):
            day18.parse("1,2\n3 4")


class TestDay20(unittest.TestCase):
    def test_part_one(self):
        self.assertEqual(day20.part1(RACETRACK, min_savings=20), 5)
        self.assertEqual(day20.part1(RACETRACK, min_savings=1), 44)

    def test_part_two(self):
        self.assertEqual(day20.part2(RACETRACK, min_savings=50), 285)
        self.assertEqual(day20.part2(RACETRACK, min_savings=76), 3)


if __name__ == "__main__":
    unittest.main()
