"""
Directions and board geometry.

Cells are plain (x, y) tuples in pixel coordinates, aligned to the unit size.
"""

from enum import Enum
from typing import Tuple

Cell = Tuple[int, int]


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def vector(self) -> Tuple[int, int]:
        """Unit vector for this direction; y grows downwards."""
        return _VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite(self, other: "Direction") -> bool:
        return _OPPOSITES[self] is other


_VECTORS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def step(cell: Cell, direction: Direction, unit_size: int) -> Cell:
    """Return the cell one unit away from `cell` in `direction` (no bounds handling)."""
    dx, dy = direction.vector
    return (cell[0] + dx * unit_size, cell[1] + dy * unit_size)


def wrap_cell(cell: Cell, width: int, height: int, unit_size: int) -> Cell:
    """
    Wrap a cell that left the board back onto the opposite edge.

    The playfield is toroidal: a coordinate below zero moves to the last cell of
    that axis, a coordinate at or past the bound moves to zero.

    Args:
        cell: (x, y) in pixels
        width, height: board size in pixels
        unit_size: size of one cell in pixels

    Returns:
        The wrapped cell (unchanged if it was already on the board).
    """
    x, y = cell
    if x < 0:
        x = width - unit_size
    elif x >= width:
        x = 0
    if y < 0:
        y = height - unit_size
    elif y >= height:
        y = 0
    return (x, y)


def in_bounds(cell: Cell, width: int, height: int) -> bool:
    x, y = cell
    return 0 <= x < width and 0 <= y < height
