from typing import Tuple
from knmaze.core.grid import Grid, Direction


class Maze:
    """
    A generated grid plus a cursor. Walls never change after generation;
    only the cursor position moves.
    """
    __slots__ = ('grid', 'position')

    def __init__(self, grid: Grid, position: int):
        self.grid = grid
        self.position = position

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def coords(self) -> Tuple[int, int]:
        return self.grid.get_coords(self.position)

    def is_wall(self, direction) -> bool:
        direction = Direction(direction)
        return not (self.grid.cells[self.position] & direction)

    def move(self, direction):
        """
        Steps one cell in 'direction' if that stays on the grid. Walls are
        NOT checked; combine with is_wall for a wall-respecting walk.
        """
        direction = Direction(direction)
        width = self.grid.width
        y = self.position // width
        x = self.position % width

        if direction == Direction.NORTH and y > 0:
            self.position -= width
        elif direction == Direction.SOUTH and y < self.grid.height - 1:
            self.position += width
        elif direction == Direction.EAST and x < width - 1:
            self.position += 1
        elif direction == Direction.WEST and x > 0:
            self.position -= 1
