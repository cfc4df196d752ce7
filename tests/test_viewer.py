import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from aoc24.app import viewer
from aoc24.core.types import Tile


class TestViewer(unittest.TestCase):
    def setUp(self):
        self.maze = viewer.load_map(viewer.MAP_FILES["16_example_1"])
        self.view = viewer.Viewer(self.maze, map_key="16_example_1")

    def tearDown(self):
        pygame.quit()

    def test_load_map(self):
        self.assertEqual(self.maze.start, self.maze.grid.find(Tile.START))
        self.assertEqual((self.maze.grid.rows, self.maze.grid.cols), (15, 15))

    def _run_to_end(self):
        for _ in range(100000):
            res = self.view._do_step()
            if res.status != "running":
                return res
        self.fail("search did not finish")

    def test_astar_run(self):
        res = self._run_to_end()
        self.assertEqual(self.view.state, "Done")
        self.assertEqual(res.metrics["total_cost"], 7036)
        self.assertTrue(self.view.path)
        self.view._draw()

    def test_all_paths_overlay(self):
        self.view._switch_algo("All optimal paths")
        self._run_to_end()
        self.assertEqual(len(self.view.tiles), 45)
        self.view._reset()
        self.assertEqual(self.view.tiles, set())
        self.assertEqual(self.view.state, "Idle")

    def test_switch_map(self):
        self.view._switch_map("16_example_2")
        self.assertEqual(self.view.selected_map_key, "16_example_2")
        self._run_to_end()
        self.assertEqual(self.view._last_metrics["total_cost"], 11048)

    def test_resolve_map(self):
        os.environ["MAZE_VIEWER_MAP"] = "20_racetrack"
        try:
            self.assertEqual(viewer.resolve_map(), "20_racetrack")
        finally:
            del os.environ["MAZE_VIEWER_MAP"]


if __name__ == "__main__":
    unittest.main()
