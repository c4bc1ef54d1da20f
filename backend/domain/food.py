"""
Food entities: the regular food item and the timed special food.

Both kinds share the same placement algorithm (`find_free_cell`). Only the
special food carries lifecycle state; its timers are deadlines checked by
`SpecialFood.poll()` from the game loop, so no background threads touch it.
"""

import logging
import random
import time
from enum import Enum
from typing import Callable, Collection, Optional

from .constants import (
    FOOD_PLACEMENT_ATTEMPTS,
    FOOD_SCORE,
    GAME_HEIGHT,
    GAME_WIDTH,
    SPECIAL_FOOD_COOLDOWN,
    SPECIAL_FOOD_DURATION,
    SPECIAL_FOOD_SCORE,
    SPECIAL_FOOD_SPAWN_CHECK_INTERVAL,
    UNIT_SIZE,
)
from .geometry import Cell

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class FoodKind(Enum):
    REGULAR = "regular"
    SPECIAL = "special"


def find_free_cell(
    width: int,
    height: int,
    unit_size: int,
    occupied: Collection[Cell],
    rng: random.Random,
    attempts: int = FOOD_PLACEMENT_ATTEMPTS,
) -> Optional[Cell]:
    """
    Pick a grid cell that is not in `occupied`.

    Tries `attempts` random cells first, then scans the board left to right,
    top to bottom and returns the first free cell.

    Returns:
        The chosen cell, or None if every cell is occupied.
    """
    columns = width // unit_size
    rows = height // unit_size
    if columns <= 0 or rows <= 0:
        return None

    occupied = set(occupied)
    for _ in range(attempts):
        cell = (rng.randrange(columns) * unit_size, rng.randrange(rows) * unit_size)
        if cell not in occupied:
            return cell

    for y in range(0, rows * unit_size, unit_size):
        for x in range(0, columns * unit_size, unit_size):
            if (x, y) not in occupied:
                return (x, y)
    return None


class Food:
    """
    A single food item.

    Attributes:
        kind: FoodKind.REGULAR or FoodKind.SPECIAL
        points: score awarded when eaten
        position: (x, y) or None when the food is absent
    """

    def __init__(self, kind: FoodKind = FoodKind.REGULAR, points: int = FOOD_SCORE,
                 unit_size: int = UNIT_SIZE, rng: Optional[random.Random] = None):
        self.kind = kind
        self.points = points
        self.unit_size = unit_size
        self.rng = rng or random.Random()
        self.position: Optional[Cell] = None

    def generate(self, width: int, height: int, snake_body: Collection[Cell]) -> Optional[Cell]:
        """Place the food on a cell outside `snake_body`; None if the board is full."""
        self.position = find_free_cell(width, height, self.unit_size, snake_body, self.rng)
        if self.position is None:
            logger.warning("No free cell left for %s food", self.kind.value)
        return self.position

    def is_eaten(self, head: Cell) -> bool:
        return self.position is not None and self.position == head

    def clear(self) -> None:
        self.position = None

    def __repr__(self):
        return f"<Food kind={self.kind.value} position={self.position} points={self.points}>"


class SpecialFood:
    """
    The bonus food with its own spawn/visibility lifecycle.

    States:
        cooldown  - can_spawn is False, waiting for the cooldown deadline
        spawnable - can_spawn is True, the next spawn check places the food
        visible   - placed on the board until eaten or its existence time runs out

    Every timer is a deadline on `clock`. While paused nothing advances: the
    remaining existence time is snapshotted by `pause()` and restored by
    `resume()`. Resuming also restarts the spawn cooldown from full duration.
    """

    def __init__(
        self,
        width: int = GAME_WIDTH,
        height: int = GAME_HEIGHT,
        unit_size: int = UNIT_SIZE,
        clock: Clock = time.monotonic,
        rng: Optional[random.Random] = None,
        duration: float = SPECIAL_FOOD_DURATION,
        cooldown: float = SPECIAL_FOOD_COOLDOWN,
        spawn_check_interval: float = SPECIAL_FOOD_SPAWN_CHECK_INTERVAL,
    ):
        self.width = width
        self.height = height
        self.clock = clock
        self.duration = duration
        self.cooldown = cooldown
        self.spawn_check_interval = spawn_check_interval
        self.food = Food(FoodKind.SPECIAL, SPECIAL_FOOD_SCORE, unit_size, rng)

        self.visible = False
        self.can_spawn = False
        self.created_at: Optional[float] = None
        self.paused = False

        self._expires_at: Optional[float] = None
        self._cooldown_ends_at: Optional[float] = None
        self._next_spawn_check: Optional[float] = None
        self._remaining_at_pause: Optional[float] = None

        self.start()

    @property
    def position(self) -> Optional[Cell]:
        return self.food.position

    @property
    def points(self) -> int:
        return self.food.points

    def start(self) -> None:
        """Begin the first cooldown and the periodic spawn checks."""
        self.start_spawn_cooldown()
        self._next_spawn_check = self.clock()

    def start_spawn_cooldown(self) -> None:
        """(Re)start the cooldown from its full duration."""
        self._cooldown_ends_at = self.clock() + self.cooldown

    def poll(self, snake_body: Collection[Cell]) -> None:
        """
        Advance every special-food deadline that has passed.

        Called by the game loop, ideally every `spawn_check_interval` seconds.
        Does nothing while paused.

        Args:
            snake_body: current snake cells, used to place the food
        """
        if self.paused:
            return
        now = self.clock()

        if self.visible and self._expires_at is not None and now >= self._expires_at:
            self.disappear()

        if self._cooldown_ends_at is not None and now >= self._cooldown_ends_at:
            self._cooldown_ends_at = None
            self.can_spawn = True
            logger.debug("Special food cooldown over, spawning allowed")

        if self._next_spawn_check is not None and now >= self._next_spawn_check:
            self._next_spawn_check = now + self.spawn_check_interval
            if self.can_spawn and not self.visible:
                self.generate(snake_body)

    def generate(self, snake_body: Collection[Cell]) -> bool:
        """
        Try to place the special food.

        Only succeeds when not paused, spawning is allowed and the food is not
        already on the board. A successful spawn starts the existence countdown
        and a new cooldown.

        Returns:
            True if the food became visible.
        """
        if self.paused or not self.can_spawn or self.visible:
            return False

        position = self.food.generate(self.width, self.height, snake_body)
        if position is None:
            return False

        now = self.clock()
        self.visible = True
        self.can_spawn = False
        self.created_at = now
        self._expires_at = now + self.duration
        self.start_spawn_cooldown()
        logger.info("Special food at %s for %.0f seconds", position, self.duration)
        return True

    def disappear(self) -> None:
        """Remove the visible special food and start a fresh cooldown."""
        if not self.visible:
            return
        self.food.clear()
        self.visible = False
        self.created_at = None
        self._expires_at = None
        self._remaining_at_pause = None
        self.can_spawn = False
        self.start_spawn_cooldown()
        logger.info("Special food gone, cooldown %.0f seconds", self.cooldown)

    def is_eaten(self, head: Cell) -> bool:
        return self.visible and self.food.is_eaten(head)

    def remaining_time(self) -> float:
        """Seconds of visibility left; 0 when not visible."""
        if not self.visible or self._expires_at is None:
            return 0.0
        if self.paused and self._remaining_at_pause is not None:
            return self._remaining_at_pause
        return max(0.0, self._expires_at - self.clock())

    def pause(self) -> None:
        if self.paused:
            return
        self.paused = True
        if self.visible and self._expires_at is not None:
            self._remaining_at_pause = max(0.0, self._expires_at - self.clock())

    def resume(self) -> None:
        """
        Resume after a pause.

        The existence countdown continues with exactly the time that was left
        when the game was paused. The cooldown always restarts from full.
        """
        if not self.paused:
            return
        self.paused = False
        now = self.clock()

        if self.visible:
            remaining = self._remaining_at_pause
            self._remaining_at_pause = None
            if remaining is not None and remaining > 0:
                self._expires_at = now + remaining
                self.created_at = now - (self.duration - remaining)
            else:
                self.disappear()

        self.start_spawn_cooldown()
        self._next_spawn_check = now

    def clean_up(self) -> None:
        """Cancel every pending deadline and clear the food."""
        self._expires_at = None
        self._cooldown_ends_at = None
        self._next_spawn_check = None
        self._remaining_at_pause = None
        self.food.clear()
        self.visible = False
        self.can_spawn = False
        self.created_at = None

    def reset(self) -> None:
        """Cancel everything, then start a new cooldown for a fresh game."""
        self.clean_up()
        self.paused = False
        self.start()

    def __repr__(self):
        return (
            f"<SpecialFood visible={self.visible} can_spawn={self.can_spawn} "
            f"position={self.position} paused={self.paused}>"
        )
