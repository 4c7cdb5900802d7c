import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from knmaze.core.grid import Grid, Direction
from knmaze.core.maze import Maze

class TestCursor(unittest.TestCase):
    def make_maze(self, w, h, position):
        return Maze(Grid(w, h), position)

    def test_move_inside(self):
        maze = self.make_maze(3, 3, 4)
        maze.move(Direction.NORTH)
        self.assertEqual(maze.position, 1)
        maze.move(Direction.SOUTH)
        maze.move(Direction.SOUTH)
        self.assertEqual(maze.position, 7)
        maze.move(Direction.WEST)
        self.assertEqual(maze.coords, (0, 2))
        maze.move(Direction.EAST)
        maze.move(Direction.EAST)
        self.assertEqual(maze.coords, (2, 2))

    def test_move_clamped_at_edges(self):
        maze = self.make_maze(4, 3, 0)
        maze.move(Direction.NORTH)
        self.assertEqual(maze.position, 0)
        maze.move(Direction.WEST)
        self.assertEqual(maze.position, 0)

        maze.position = 11
        maze.move(Direction.SOUTH)
        self.assertEqual(maze.position, 11)
        maze.move(Direction.EAST)
        self.assertEqual(maze.position, 11)

    def test_east_does_not_wrap_rows(self):
        maze = self.make_maze(3, 2, 2)
        maze.move(Direction.EAST)
        self.assertEqual(maze.position, 2)
        maze.position = 3
        maze.move(Direction.WEST)
        self.assertEqual(maze.position, 3)

    def test_move_ignores_walls(self):
        # All walls present, but the move still happens
        maze = self.make_maze(2, 2, 0)
        self.assertTrue(maze.is_wall(Direction.EAST))
        maze.move(Direction.EAST)
        self.assertEqual(maze.position, 1)

    def test_single_cell(self):
        maze = self.make_maze(1, 1, 0)
        for d in Direction:
            maze.move(d)
            self.assertEqual(maze.position, 0)
            self.assertTrue(maze.is_wall(d))

    def test_is_wall(self):
        grid = Grid(2, 1)
        grid.open_edge(0, 1, Direction.EAST)
        maze = Maze(grid, 0)
        self.assertFalse(maze.is_wall(Direction.EAST))
        self.assertTrue(maze.is_wall(Direction.WEST))
        self.assertTrue(maze.is_wall(Direction.NORTH))
        maze.move(Direction.EAST)
        self.assertFalse(maze.is_wall(Direction.WEST))
        self.assertTrue(maze.is_wall(Direction.EAST))

    def test_accepts_raw_bits(self):
        grid = Grid(2, 1)
        grid.open_edge(0, 1, Direction.EAST)
        maze = Maze(grid, 0)
        self.assertFalse(maze.is_wall(2))
        maze.move(2)
        self.assertEqual(maze.position, 1)

    def test_rejects_unknown_direction(self):
        maze = self.make_maze(2, 2, 0)
        with self.assertRaises(ValueError):
            maze.is_wall(3)
        with self.assertRaises(ValueError):
            maze.move(16)

    def test_queries_do_not_touch_walls(self):
        grid = Grid(3, 3)
        grid.open_edge(4, 5, Direction.EAST)
        before = grid.cells.tobytes()
        maze = Maze(grid, 4)
        for d in Direction:
            maze.is_wall(d)
            maze.move(d)
        self.assertEqual(grid.cells.tobytes(), before)

if __name__ == '__main__':
    unittest.main()
