import numpy as np
from array import array
from typing import TextIO
from knmaze.core.grid import Grid


class MaskDump:
    """
    Raw wall-mask dump, for debugging.
    Format (text):
    - WIDTH on the first line
    - every cell mask, row-major, comma separated, on the second line
    Height is implied by the number of masks.
    """

    @staticmethod
    def dumps(grid: Grid) -> str:
        return f"{grid.width}\n" + ",".join(str(m) for m in grid.cells) + "\n"

    @staticmethod
    def write(grid: Grid, fp: TextIO):
        fp.write(MaskDump.dumps(grid))

    @staticmethod
    def save(grid: Grid, filepath: str):
        with open(filepath, "w", encoding="ascii") as f:
            MaskDump.write(grid, f)

    @staticmethod
    def loads(text: str) -> Grid:
        lines = text.split()
        if len(lines) != 2:
            raise ValueError("Invalid mask dump: expected a width line and a mask line")
        try:
            width = int(lines[0])
            masks = [int(m) for m in lines[1].split(",")]
        except ValueError:
            raise ValueError("Invalid mask dump: non-integer value") from None

        if width <= 0 or len(masks) % width != 0:
            raise ValueError(f"Invalid mask dump: {len(masks)} masks do not fill rows of width {width}")
        if any(not 0 <= m <= Grid.ALL_OPEN for m in masks):
            raise ValueError("Invalid mask dump: mask outside 0-15")

        grid = Grid(width, len(masks) // width)
        grid.cells = array('B', masks)
        return grid

    @staticmethod
    def load(filepath: str) -> Grid:
        with open(filepath, "r", encoding="ascii") as f:
            return MaskDump.loads(f.read())

    @staticmethod
    def to_array(grid: Grid) -> np.ndarray:
        """(height, width) uint8 copy of the masks."""
        return np.frombuffer(grid.cells.tobytes(), dtype=np.uint8).reshape(grid.height, grid.width).copy()

    @staticmethod
    def from_array(masks: np.ndarray) -> Grid:
        if masks.ndim != 2:
            raise ValueError(f"Expected a 2D mask array, got shape {masks.shape}")
        if masks.size and (masks.min() < 0 or masks.max() > Grid.ALL_OPEN):
            raise ValueError("Invalid mask array: mask outside 0-15")
        height, width = masks.shape
        grid = Grid(width, height)
        grid.cells = array('B', masks.astype(np.uint8).ravel().tobytes())
        return grid
