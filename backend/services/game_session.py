"""
GameSession - one player's game: controller, special food, pause and speed.

The session is what an input collaborator talks to (via intents) and what a
presentation layer reads from (via snapshots and controller listeners). All
special-food timing is driven from here on the same thread as the tick, so
there is no shared state to lock.
"""

import logging
import random
import time
from typing import Callable, Optional

from domain.constants import (
    DEFAULT_SPEED_LEVEL,
    GAME_HEIGHT,
    GAME_WIDTH,
    INITIAL_SNAKE_LENGTH,
    PAUSE_TOGGLE_DEBOUNCE,
    SPEED_PRESETS,
    UNIT_SIZE,
)
from domain.food import SpecialFood
from domain.game_state import GameSnapshot, GameState
from domain.intents import Intent, IntentType
from .game_controller import GameController, HighScoreStore

logger = logging.getLogger(__name__)


class GameSession:
    """
    Coordinates a GameController with the SpecialFood lifecycle.

    Attributes:
        controller: the tick-level game rules
        special_food: the timed bonus food
        speed_level: current speed preset (1-4)
        tick_count: ticks played in the current game
        quit_requested: set once a QUIT intent was handled
    """

    def __init__(
        self,
        player_data: Optional[HighScoreStore] = None,
        width: int = GAME_WIDTH,
        height: int = GAME_HEIGHT,
        unit_size: int = UNIT_SIZE,
        initial_length: int = INITIAL_SNAKE_LENGTH,
        speed_level: int = DEFAULT_SPEED_LEVEL,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
        special_food: Optional[SpecialFood] = None
    ):
        rng = rng or random.Random()
        self.clock = clock
        self.controller = GameController(
            player_data=player_data,
            width=width,
            height=height,
            unit_size=unit_size,
            initial_length=initial_length,
            rng=rng,
        )
        self.special_food = special_food or SpecialFood(
            width=width, height=height, unit_size=unit_size, clock=clock, rng=rng
        )
        self.speed_level = DEFAULT_SPEED_LEVEL
        self.set_speed(speed_level)
        self.tick_count = 0
        self.quit_requested = False
        self._last_toggle_at: Optional[float] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def game_state(self) -> GameState:
        return self.controller.game_state

    @property
    def paused(self) -> bool:
        return self.controller.game_state is GameState.PAUSED

    @property
    def tick_interval(self) -> float:
        """Seconds between ticks for the current speed preset."""
        return SPEED_PRESETS[self.speed_level][1] / 1000.0

    def snapshot(self) -> GameSnapshot:
        """Read-only view of everything needed to draw the current frame."""
        controller = self.controller
        player_data = controller.player_data
        username = None
        if player_data is not None and controller.is_player_logged_in():
            username = getattr(player_data, 'current_username', None)

        return GameSnapshot(
            tick=self.tick_count,
            snake=controller.snake.cells(),
            direction=controller.direction,
            food=controller.food.position,
            special_food=self.special_food.position if self.special_food.visible else None,
            special_food_remaining=self.special_food.remaining_time(),
            score=controller.score,
            high_score=controller.high_score,
            state=controller.game_state,
            width=controller.width,
            height=controller.height,
            unit_size=controller.unit_size,
            username=username,
        )

    # -------------------------------------------------------------------------
    # Loop entry points
    # -------------------------------------------------------------------------

    def tick(self) -> None:
        """
        Execute one game tick:
          1) Advance the controller (move, collide, eat regular food)
          2) Advance the special food deadlines
          3) Award the special food if the head landed on it
        """
        if self.game_state is not GameState.RUNNING:
            return

        self.controller.update()
        self.tick_count += 1
        if self.game_state is not GameState.RUNNING:
            return

        self.poll_special_food()
        self.check_special_food_collision()

    def poll_special_food(self) -> None:
        """Advance special-food deadlines; also scheduled on its own faster interval."""
        if self.game_state is not GameState.RUNNING:
            return
        self.special_food.poll(self.controller.snake.body)

    def check_special_food_collision(self) -> bool:
        if self.paused:
            return False
        if not self.special_food.is_eaten(self.controller.snake.head):
            return False

        self.controller.add_score(self.special_food.points)
        logger.info("Special food eaten! +%s points", self.special_food.points)
        self.special_food.disappear()
        return True

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def toggle_pause(self) -> bool:
        """
        Pause a running game or resume a paused one.

        Toggles within PAUSE_TOGGLE_DEBOUNCE seconds of the last accepted one
        and toggles in GAME_OVER are ignored.

        Returns:
            True if the state changed
        """
        now = self.clock()
        if self._last_toggle_at is not None and now - self._last_toggle_at < PAUSE_TOGGLE_DEBOUNCE:
            logger.debug("Pause toggle ignored - too fast")
            return False

        state = self.game_state
        if state is GameState.RUNNING:
            self._last_toggle_at = now
            self.special_food.pause()
            self.controller.set_game_state(GameState.PAUSED)
            logger.info("Game paused")
            return True
        if state is GameState.PAUSED:
            self._last_toggle_at = now
            self.controller.set_game_state(GameState.RUNNING)
            self.special_food.resume()
            logger.info("Game resumed")
            return True

        logger.debug("Cannot toggle pause in state %s", state.value)
        return False

    def restart(self) -> None:
        """Record the high score, cancel special-food timers, start a new game."""
        self.controller.check_and_update_high_score()
        self.special_food.clean_up()
        self.controller.reset_game()
        self.special_food.reset()
        self.tick_count = 0
        self._last_toggle_at = None
        logger.info("Game restarted")

    def set_speed(self, level: int) -> None:
        if level not in SPEED_PRESETS:
            raise ValueError(
                f"Unknown speed level {level}. Available levels: {sorted(SPEED_PRESETS)}"
            )
        if level != self.speed_level:
            name, delay_ms = SPEED_PRESETS[level]
            logger.info("Game speed set to %s (%s ms)", name, delay_ms)
        self.speed_level = level

    def shutdown(self) -> None:
        """Stop the game for good: cancel the special food and pause the controller."""
        self.special_food.clean_up()
        self.special_food.paused = True
        if self.game_state is GameState.RUNNING:
            self.controller.set_game_state(GameState.PAUSED)
        self.quit_requested = True

    def handle_intent(self, intent: Optional[Intent]) -> None:
        """
        Apply an input intent.

        Moves only apply while RUNNING; reversing the current direction is
        ignored by the snake. Restart, quit and speed changes apply in any state.
        """
        if intent is None:
            return

        if intent.kind is IntentType.MOVE:
            if self.game_state is GameState.RUNNING and intent.direction is not None:
                self.controller.set_direction(intent.direction)
        elif intent.kind is IntentType.TOGGLE_PAUSE:
            self.toggle_pause()
        elif intent.kind is IntentType.RESTART:
            self.restart()
        elif intent.kind is IntentType.QUIT:
            self.shutdown()
        elif intent.kind is IntentType.SET_SPEED and intent.speed_level is not None:
            self.set_speed(intent.speed_level)
