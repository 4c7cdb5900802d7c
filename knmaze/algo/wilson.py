import logging
from typing import Iterator, List, Tuple
from knmaze.core.grid import Grid, OPPOSITE
from knmaze.algo.base import Generator

logger = logging.getLogger(__name__)


class WilsonWalk(Generator):
    """
    Wilson's algorithm: loop-erased random walks.

    Every cell outside the maze starts a random walk that stops as soon as it
    touches a cell already in the maze. Whenever the walk crosses its own
    trail the loop is cut out, so the committed path is always simple. This
    gives a uniform spanning tree.

    The start cell is put in the maze by opening all four of its walls. It
    is not really connected to anything yet, so its mask is rebuilt from its
    neighbours once every walk is done.
    """
    name = "wilson"

    def run(self) -> Iterator[str]:
        cells = self.grid.cells
        seed_cell = self.position
        cells[seed_cell] = Grid.ALL_OPEN

        erased = 0
        for start in range(self.grid.size):
            if cells[start] != 0:
                continue
            path, loops = self.walk(start)
            erased += loops
            self.commit(start, path)
            yield f"Walked from {start}, path {len(path)}"

        self.repair(seed_cell)
        logger.debug(f"{self.name}: erased {erased} loops")
        yield "Done"

    def walk(self, start: int) -> Tuple[List[Tuple[int, int]], int]:
        """
        Random walk from 'start' until it reaches the maze. Returns the
        loop-erased path as (cell, direction_into_cell) pairs, beginning with
        (start, 0), and the number of loops erased on the way.
        """
        cells = self.grid.cells
        path: List[Tuple[int, int]] = [(start, 0)]
        # cell -> index in path, mirrors path at all times
        seen = {start: 0}
        loops = 0
        current = start

        while cells[current] == 0:
            neighbors = self.grid.neighbors(current)
            neighbor, direction = neighbors[self.rng.uniform_int(len(neighbors))]

            earlier = seen.get(neighbor)
            if earlier is not None:
                # Loop: keep the earlier visit (with its own direction), drop the rest
                for cell, _ in path[earlier + 1:]:
                    del seen[cell]
                del path[earlier + 1:]
                loops += 1
            else:
                seen[neighbor] = len(path)
                path.append((neighbor, direction))
            current = neighbor

        return path, loops

    def commit(self, start: int, path: List[Tuple[int, int]]):
        current = start
        # First entry is the start itself with a placeholder 0 direction
        for neighbor, direction in path[1:]:
            self.carve(current, neighbor, direction)
            current = neighbor

    def repair(self, seed_cell: int):
        cells = self.grid.cells
        cells[seed_cell] = 0
        for neighbor, direction in self.grid.neighbors(seed_cell):
            if cells[neighbor] & OPPOSITE[direction]:
                cells[seed_cell] |= direction
