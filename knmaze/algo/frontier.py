from typing import Iterator, List
from knmaze.algo.base import Generator


class FrontierGrowth(Generator):
    """
    The "simple" algorithm. Every unvisited neighbour of the current cell is
    linked straight away and queued; only the freshly queued tail gets
    shuffled before the next cell is popped off the end. That leans towards
    recently discovered cells.
    """
    name = "simple"

    def run(self) -> Iterator[str]:
        cells = self.grid.cells
        current = self.position
        queue: List[int] = []

        while True:
            n = 0
            for neighbor, direction in self.grid.neighbors(current):
                # mask 0 == never touched, so each cell is queued at most once
                if cells[neighbor] == 0:
                    queue.append(neighbor)
                    self.carve(current, neighbor, direction)
                    n += 1
                    if self.step_count % 100 == 0:
                        yield f"Growing... Frontier: {len(queue)}"

            self.shuffle_tail(queue, n)

            if not queue:
                break
            current = queue.pop()

        yield "Done"
