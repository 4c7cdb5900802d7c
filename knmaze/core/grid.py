from array import array
from enum import IntEnum
from typing import Iterator, List, Tuple


class Direction(IntEnum):
    # One-hot bits: a set bit in a cell mask means the wall is OPEN
    NORTH = 0b1000
    SOUTH = 0b0100
    EAST  = 0b0010
    WEST  = 0b0001


OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# 90 degrees clockwise
RIGHT = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}


class Grid:
    ALL_OPEN = Direction.NORTH | Direction.SOUTH | Direction.EAST | Direction.WEST

    DX = {Direction.NORTH: 0, Direction.SOUTH: 0, Direction.EAST: 1, Direction.WEST: -1}
    DY = {Direction.NORTH: -1, Direction.SOUTH: 1, Direction.EAST: 0, Direction.WEST: 0}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # Fully walled: every mask starts at 0
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [0] * (width * height))

    @property
    def size(self) -> int:
        return self.width * self.height

    def reset(self):
        for i in range(len(self.cells)):
            self.cells[i] = 0

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_coords(self, cell: int) -> Tuple[int, int]:
        return cell % self.width, cell // self.width

    def neighbors(self, cell: int) -> List[Tuple[int, Direction]]:
        """
        Returns (neighbor_cell, direction_from_cell) for all in-bounds neighbours.
        Order is always N, S, E, W so shuffles replay identically for a given
        random stream. Walls are not consulted.
        """
        width = self.width
        y = cell // width
        x = cell % width
        result = []
        if y > 0:
            result.append((cell - width, Direction.NORTH))
        if y < self.height - 1:
            result.append((cell + width, Direction.SOUTH))
        if x < width - 1:
            result.append((cell + 1, Direction.EAST))
        if x > 0:
            result.append((cell - 1, Direction.WEST))
        return result

    def open_edge(self, cell: int, neighbor: int, direction: Direction):
        """
        Opens the wall of 'cell' towards 'neighbor' and the OPPOSITE wall of
        'neighbor', keeping both endpoints consistent.
        """
        self.cells[cell] |= direction
        self.cells[neighbor] |= OPPOSITE[direction]

    def is_open(self, cell: int, direction: Direction) -> bool:
        return (self.cells[cell] & direction) != 0

    def open_edges(self) -> Iterator[Tuple[int, int]]:
        """
        Yields each open passage once as (cell, neighbor), looking only
        South and East so no edge is reported twice.
        """
        width = self.width
        for cell, mask in enumerate(self.cells):
            if mask & Direction.SOUTH and cell + width < len(self.cells):
                yield (cell, cell + width)
            if mask & Direction.EAST and (cell % width) < width - 1:
                yield (cell, cell + 1)
