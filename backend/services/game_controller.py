"""
GameController - runs one simulation tick at a time and reports changes.

The controller owns the snake, the regular food, the score and the game
state. Listeners are notified synchronously, in registration order, and only
when a value actually changes.
"""

import logging
import random
from typing import List, Optional, Protocol

from domain.constants import (
    FOOD_SCORE,
    GAME_HEIGHT,
    GAME_WIDTH,
    INITIAL_SNAKE_LENGTH,
    UNIT_SIZE,
)
from domain.food import Food, FoodKind
from domain.game_state import GameState
from domain.geometry import Direction, wrap_cell
from domain.snake import Snake

logger = logging.getLogger(__name__)


class GameStateListener(Protocol):
    def on_game_state_changed(self, new_state: GameState) -> None: ...

    def on_score_changed(self, new_score: int) -> None: ...

    def on_high_score_changed(self, new_high_score: int) -> None: ...


class HighScoreStore(Protocol):
    """What the controller needs from a player session (see data_access.PlayerData)."""

    def is_logged_in(self) -> bool: ...

    @property
    def current_high_score(self) -> int: ...

    def update_high_score(self, score: int) -> bool: ...


class GameController:
    """
    Manages:
      - Snake and regular food
      - Score and high score (player store when logged in, local otherwise)
      - Game state transitions
      - Listener notifications
    """

    def __init__(
        self,
        player_data: Optional[HighScoreStore] = None,
        width: int = GAME_WIDTH,
        height: int = GAME_HEIGHT,
        unit_size: int = UNIT_SIZE,
        initial_length: int = INITIAL_SNAKE_LENGTH,
        rng: Optional[random.Random] = None
    ):
        if width <= 0 or height <= 0 or width % unit_size or height % unit_size:
            raise ValueError(
                f"Board {width}x{height} must be positive multiples of the unit size {unit_size}."
            )
        if not 1 <= initial_length <= width // unit_size:
            raise ValueError(f"Initial length {initial_length} does not fit the board width.")

        self.player_data = player_data
        self.width = width
        self.height = height
        self.unit_size = unit_size
        self.initial_length = initial_length
        self.rng = rng or random.Random()

        self.listeners: List[GameStateListener] = []
        self.local_high_score = 0
        self.score = 0
        self.game_state: Optional[GameState] = None
        self.snake: Snake
        self.food: Food

        self.reset_game()

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def add_listener(self, listener: GameStateListener) -> None:
        self.listeners.append(listener)

    def remove_listener(self, listener: GameStateListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    def _notify_game_state_changed(self, new_state: GameState) -> None:
        for listener in list(self.listeners):
            listener.on_game_state_changed(new_state)

    def _notify_score_changed(self, new_score: int) -> None:
        for listener in list(self.listeners):
            listener.on_score_changed(new_score)

    def _notify_high_score_changed(self, new_high_score: int) -> None:
        for listener in list(self.listeners):
            listener.on_high_score_changed(new_high_score)

    # -------------------------------------------------------------------------
    # Game lifecycle
    # -------------------------------------------------------------------------

    def reset_game(self) -> None:
        """Start a new game: snake at the centre facing right, fresh food, score 0."""
        start = (self.width // 2 // self.unit_size * self.unit_size,
                 self.height // 2 // self.unit_size * self.unit_size)
        body = [
            wrap_cell((start[0] - i * self.unit_size, start[1]), self.width, self.height, self.unit_size)
            for i in range(self.initial_length)
        ]
        self.snake = Snake(body, Direction.RIGHT, self.unit_size)

        self.food = Food(FoodKind.REGULAR, FOOD_SCORE, self.unit_size, self.rng)
        self.food.generate(self.width, self.height, self.snake.body)

        if self.score != 0:
            self.score = 0
            self._notify_score_changed(self.score)
        self.set_game_state(GameState.RUNNING)

    def update(self) -> None:
        """
        Execute one tick:
          1) Move the snake and wrap it around the board edges
          2) Self collision ends the game (nothing else happens this tick)
          3) Eating food scores and grows the snake by keeping the tail
          4) Otherwise drop the tail
        """
        if self.game_state is not GameState.RUNNING:
            return

        self.snake.move()
        self.snake.wrap_around(self.width, self.height)

        if self.snake.check_self_collision():
            self.game_over()
            return

        if self.food.is_eaten(self.snake.head):
            self.add_score(self.food.points)
            self.food.generate(self.width, self.height, self.snake.body)
        else:
            self.snake.remove_tail()

    def game_over(self) -> None:
        self.set_game_state(GameState.GAME_OVER)
        self.check_and_update_high_score()
        logger.info("Game over. Score: %s, high score: %s", self.score, self.high_score)

    def add_score(self, points: int) -> None:
        if points == 0:
            return
        self.score += points
        self._notify_score_changed(self.score)

    def set_game_state(self, game_state: GameState) -> None:
        """Change the state; listeners hear about it only if it differs."""
        old_state = self.game_state
        self.game_state = game_state
        if old_state is not game_state:
            self._notify_game_state_changed(game_state)

    def set_direction(self, direction: Direction) -> bool:
        return self.snake.set_direction(direction)

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    # -------------------------------------------------------------------------
    # High score
    # -------------------------------------------------------------------------

    def is_player_logged_in(self) -> bool:
        if self.player_data is None:
            return False
        try:
            return bool(self.player_data.is_logged_in())
        except Exception as e:  # noqa: BLE001 - the store must never stop the game
            logger.warning("Player store unavailable, using local high score: %s", e)
            return False

    @property
    def high_score(self) -> int:
        if self.is_player_logged_in():
            try:
                return max(self.player_data.current_high_score, self.local_high_score)
            except Exception as e:  # noqa: BLE001
                logger.warning("Could not read stored high score: %s", e)
        return self.local_high_score

    def is_new_record(self) -> bool:
        return self.score > self.high_score

    def check_and_update_high_score(self) -> bool:
        """
        Record the current score as the high score if it beats it.

        Writes go to the player store when a player is logged in and to the
        local session score otherwise. A failing store is logged and the
        score is kept locally instead.

        Returns:
            True if the high score changed
        """
        if not self.is_new_record():
            return False

        stored = False
        if self.is_player_logged_in():
            try:
                self.player_data.update_high_score(self.score)
                stored = True
            except Exception as e:  # noqa: BLE001
                logger.warning("Could not store high score %s: %s", self.score, e)
        if not stored:
            self.local_high_score = self.score

        self._notify_high_score_changed(self.score)
        return True
