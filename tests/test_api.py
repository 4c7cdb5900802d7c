import unittest
import sys
import os
import threading

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from knmaze import api
from knmaze.api import MazeSession, generate, ALGORITHMS
from knmaze.core.grid import Direction
from knmaze.core.rng import ScriptedRandom, SeededRandom
from knmaze.core.complexity import MazeAnalyzer

class TestGenerate(unittest.TestCase):
    def test_registry(self):
        self.assertEqual(sorted(ALGORITHMS), ["depth", "simple", "wilson"])

    def test_generate_each(self):
        for name in ALGORITHMS:
            maze = generate(name, 6, 4, seed=8)
            self.assertEqual((maze.width, maze.height), (6, 4))
            self.assertTrue(MazeAnalyzer.is_perfect(maze.grid), name)

    def test_unknown_algorithm(self):
        with self.assertRaises(ValueError):
            generate("kruskal", 3, 3)

class TestSession(unittest.TestCase):
    def test_query_before_create(self):
        session = MazeSession()
        with self.assertRaises(RuntimeError):
            session.is_wall(Direction.NORTH)
        with self.assertRaises(RuntimeError):
            session.move(Direction.NORTH)

    def test_create_and_walk(self):
        session = MazeSession(rng=ScriptedRandom([0]))
        session.create_maze_simple(2, 1)
        self.assertEqual(session.position, 0)
        self.assertTrue(session.is_wall(Direction.WEST))
        self.assertFalse(session.is_wall(Direction.EAST))
        session.move(Direction.EAST)
        self.assertEqual(session.position, 1)
        self.assertFalse(session.is_wall(Direction.WEST))
        session.move(Direction.EAST)
        self.assertEqual(session.position, 1)

    def test_create_replaces_maze(self):
        session = MazeSession(rng=SeededRandom(1))
        session.create_maze_depth(5, 5)
        first = session.maze
        session.create_maze_wilson(3, 2)
        self.assertIsNot(session.maze, first)
        self.assertEqual((session.maze.width, session.maze.height), (3, 2))
        self.assertTrue(MazeAnalyzer.is_perfect(session.maze.grid))

    def test_failed_create_keeps_previous(self):
        session = MazeSession(rng=ScriptedRandom([0]))
        session.create_maze_depth(1, 1)
        first = session.maze
        with self.assertRaises(ValueError):
            session.create_maze_depth(0, 3)
        self.assertIs(session.maze, first)

    def test_concurrent_creates_stay_consistent(self):
        session = MazeSession(rng=SeededRandom(3))
        errors = []

        def worker(create):
            try:
                for _ in range(5):
                    create(8, 8)
                    if not MazeAnalyzer.is_perfect(session.maze.grid):
                        errors.append("broken maze observed")
            except Exception as e: # collected and asserted below
                errors.append(repr(e))

        threads = [
            threading.Thread(target=worker, args=(session.create_maze_simple,)),
            threading.Thread(target=worker, args=(session.create_maze_depth,)),
            threading.Thread(target=worker, args=(session.create_maze_wilson,)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(errors, [])

class TestModuleSurface(unittest.TestCase):
    def test_default_session(self):
        for create in (api.create_maze_simple, api.create_maze_depth, api.create_maze_wilson):
            create(4, 4)
            maze = api.default_session().maze
            self.assertTrue(MazeAnalyzer.is_perfect(maze.grid))
            start = maze.position
            # Follow the first open direction and check we left the start cell
            for d in Direction:
                if not api.is_wall(d):
                    api.move(d)
                    break
            self.assertNotEqual(api.default_session().position, start)

if __name__ == '__main__':
    unittest.main()
