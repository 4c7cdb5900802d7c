import logging
import threading
from typing import Dict, Optional, Type
from knmaze.core.grid import Grid, Direction
from knmaze.core.maze import Maze
from knmaze.core.rng import SeededRandom
from knmaze.algo.base import Generator
from knmaze.algo.frontier import FrontierGrowth
from knmaze.algo.dfs import RandomizedDFS
from knmaze.algo.wilson import WilsonWalk

logger = logging.getLogger(__name__)

ALGORITHMS: Dict[str, Type[Generator]] = {
    FrontierGrowth.name: FrontierGrowth,
    RandomizedDFS.name: RandomizedDFS,
    WilsonWalk.name: WilsonWalk,
}


def generate(algo: str, width: int, height: int, rng=None, seed: int = None) -> Maze:
    """Builds a fresh maze with the named algorithm ("simple", "depth" or "wilson")."""
    try:
        cls = ALGORITHMS[algo]
    except KeyError:
        raise ValueError(f"Unknown algorithm '{algo}', expected one of {sorted(ALGORITHMS)}") from None
    grid = Grid(width, height)
    return cls(grid, rng=rng, seed=seed).run_all()


class MazeSession:
    """
    The command surface: create a maze, then query walls and move the cursor.

    Each create_* call replaces the current maze as a whole. All calls share
    one lock, so nobody ever sees a grid that is still being carved.
    """
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else SeededRandom()
        self.maze: Optional[Maze] = None
        self._lock = threading.Lock()

    def _create(self, algo: str, width: int, height: int):
        with self._lock:
            # Generate before swapping in, so a failed run keeps the old maze
            maze = generate(algo, width, height, rng=self.rng)
            self.maze = maze
        logger.info(f"Created {algo} maze {width}x{height}, cursor at {maze.coords}")

    def create_maze_simple(self, width: int, height: int):
        self._create(FrontierGrowth.name, width, height)

    def create_maze_depth(self, width: int, height: int):
        self._create(RandomizedDFS.name, width, height)

    def create_maze_wilson(self, width: int, height: int):
        self._create(WilsonWalk.name, width, height)

    def _current(self) -> Maze:
        if self.maze is None:
            raise RuntimeError("No maze has been created yet")
        return self.maze

    def is_wall(self, direction: Direction) -> bool:
        with self._lock:
            return self._current().is_wall(direction)

    def move(self, direction: Direction):
        with self._lock:
            self._current().move(direction)

    @property
    def position(self) -> int:
        with self._lock:
            return self._current().position


_default_session = MazeSession()


def default_session() -> MazeSession:
    return _default_session


def create_maze_simple(width: int, height: int):
    _default_session.create_maze_simple(width, height)


def create_maze_depth(width: int, height: int):
    _default_session.create_maze_depth(width, height)


def create_maze_wilson(width: int, height: int):
    _default_session.create_maze_wilson(width, height)


def is_wall(direction: Direction) -> bool:
    return _default_session.is_wall(direction)


def move(direction: Direction):
    _default_session.move(direction)
