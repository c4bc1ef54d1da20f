"""
Snake entity for the game engine.
"""

from collections import deque
from itertools import islice
from typing import Iterable, List

from .constants import UNIT_SIZE
from .geometry import Cell, Direction, step, wrap_cell


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        body: deque of (x, y) from head at index 0 to tail at the end
        direction: direction applied on the next move
        unit_size: distance covered by one move, in pixels
    """

    def __init__(self, body: Iterable[Cell], direction: Direction = Direction.RIGHT,
                 unit_size: int = UNIT_SIZE):
        self.body = deque(body)
        if not self.body:
            raise ValueError("A snake needs at least one cell.")
        self.direction = direction
        self.unit_size = unit_size

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self.body

    def cells(self) -> List[Cell]:
        return list(self.body)

    def set_direction(self, direction: Direction) -> bool:
        """
        Queue a direction change for the next move.

        A reversal onto the snake's own neck is silently ignored.

        Returns:
            True if the direction was accepted.
        """
        if self.direction.is_opposite(direction):
            return False
        self.direction = direction
        return True

    def move(self) -> Cell:
        """Prepend a new head one unit ahead. The tail is left in place."""
        new_head = step(self.head, self.direction, self.unit_size)
        self.body.appendleft(new_head)
        return new_head

    def remove_tail(self) -> None:
        if self.body:
            self.body.pop()

    def wrap_around(self, width: int, height: int) -> Cell:
        """Move a head that left the board to the opposite edge."""
        wrapped = wrap_cell(self.head, width, height, self.unit_size)
        self.body[0] = wrapped
        return wrapped

    def check_self_collision(self) -> bool:
        """True if the head shares a cell with any other segment."""
        head = self.head
        return any(head == segment for segment in islice(self.body, 1, None))
