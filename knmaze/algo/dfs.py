from typing import Iterator, List
from knmaze.algo.base import Generator


class RandomizedDFS(Generator):
    """
    The "depth" algorithm: stack based depth-first carving.

    Unlike a recursive backtracker, every unvisited neighbour found during a
    visit is linked at once, and for each one the current cell is pushed
    again before the neighbour. A cell with several fresh neighbours
    therefore appears several times on the stack.
    """
    name = "depth"

    def run(self) -> Iterator[str]:
        cells = self.grid.cells
        current = self.position
        stack: List[int] = []

        while True:
            neighbors = self.grid.neighbors(current)
            self.shuffle_all(neighbors)

            for neighbor, direction in neighbors:
                if cells[neighbor] == 0:
                    stack.append(current)
                    self.carve(current, neighbor, direction)
                    stack.append(neighbor)
                    if self.step_count % 100 == 0:
                        yield f"Carving... Stack: {len(stack)}"

            if not stack:
                break
            current = stack.pop()

        yield "Done"
