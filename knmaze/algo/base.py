import logging
from abc import ABC, abstractmethod
from typing import Iterator, List
from knmaze.core.grid import Grid
from knmaze.core.maze import Maze
from knmaze.core.rng import SeededRandom

logger = logging.getLogger(__name__)


class Generator(ABC):
    name = "base"

    def __init__(self, grid: Grid, rng=None, seed: int = None):
        self.grid = grid
        # Anything with uniform_int(max_exclusive) works here
        self.rng = rng if rng is not None else SeededRandom(seed)
        self.position = -1
        self.step_count = 0

    def prepare(self):
        """Wipes every mask to 0 and draws the start cell."""
        self.grid.reset()
        self.position = self.rng.uniform_int(self.grid.size)
        self.step_count = 0

    def shuffle_tail(self, items: List, n: int):
        # Might be biased, that's accepted.
        # Each tail slot swaps with any earlier slot of the WHOLE list.
        length = len(items)
        for i in range(length - n, length):
            if i == 0:
                continue
            j = self.rng.uniform_int(i)
            items[i], items[j] = items[j], items[i]

    def shuffle_all(self, items: List):
        """Uniform Fisher-Yates over the whole list, last slot first."""
        for i in range(len(items) - 1, 0, -1):
            j = self.rng.uniform_int(i + 1)
            items[i], items[j] = items[j], items[i]

    def carve(self, cell: int, neighbor: int, direction):
        self.grid.open_edge(cell, neighbor, direction)
        self.step_count += 1

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings while carving self.grid in place, starting
        from self.position. Called after prepare().
        """
        pass

    def run_all(self) -> Maze:
        """Helper to generate from scratch and hand back the finished maze."""
        self.prepare()
        logger.debug(f"{self.name}: {self.grid.width}x{self.grid.height}, start cell {self.position}")
        for _ in self.run():
            pass
        logger.debug(f"{self.name}: carved {self.step_count} passages")
        return Maze(self.grid, self.position)
