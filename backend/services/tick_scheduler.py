"""
Cooperative game loop built on the `schedule` library.

Two jobs run on one thread:
 - the game tick, every `session.tick_interval` seconds (rescheduled when the speed changes)
 - the special-food poll, every SPECIAL_FOOD_SPAWN_CHECK_INTERVAL seconds

`run_simulated` drives the same cadence against a ManualClock without
sleeping, for headless games and tests.
"""

import logging
import time
from typing import Callable, Optional

import schedule

from domain.constants import SPECIAL_FOOD_SPAWN_CHECK_INTERVAL
from domain.game_state import GameSnapshot, GameState
from players.base import Player
from .clock import ManualClock
from .game_session import GameSession

logger = logging.getLogger(__name__)

TICK_TAG = "tick"
SPECIAL_FOOD_TAG = "special-food"
LOOP_SLEEP_SECONDS = 0.005


class TickScheduler:
    """
    Drives a GameSession.

    Attributes:
        session: the game being played
        player: input collaborator asked for an intent before every tick
        on_frame: called with a fresh snapshot after every tick
        scheduler: the schedule.Scheduler holding the loop's jobs
        ticks: number of ticks executed by this scheduler
    """

    def __init__(
        self,
        session: GameSession,
        player: Optional[Player] = None,
        on_frame: Optional[Callable[[GameSnapshot], None]] = None,
        scheduler: Optional[schedule.Scheduler] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.session = session
        self.player = player
        self.on_frame = on_frame
        self.scheduler = scheduler or schedule.Scheduler()
        self.sleep = sleep
        self.ticks = 0
        self._tick_interval: Optional[float] = None

    def start(self) -> None:
        """Register the tick and special-food jobs, replacing any existing ones."""
        self.scheduler.clear()
        self._schedule_tick()
        self.scheduler.every(SPECIAL_FOOD_SPAWN_CHECK_INTERVAL).seconds.do(
            self.session.poll_special_food
        ).tag(SPECIAL_FOOD_TAG)
        logger.info("Game loop started (tick every %.3fs)", self._tick_interval)

    def stop(self) -> None:
        """Cancel every pending job."""
        self.scheduler.clear()
        logger.info("Game loop stopped after %s ticks", self.ticks)

    def _schedule_tick(self) -> None:
        self.scheduler.clear(TICK_TAG)
        self._tick_interval = self.session.tick_interval
        self.scheduler.every(self._tick_interval).seconds.do(self.step).tag(TICK_TAG)

    def step(self) -> None:
        """One tick: read input, advance the game, publish a frame."""
        if self.player is not None:
            intent = self.player.get_intent(self.session.snapshot())
            self.session.handle_intent(intent)

        if self.session.quit_requested:
            return

        self.session.tick()
        self.ticks += 1

        if self.on_frame is not None:
            self.on_frame(self.session.snapshot())

        if self._tick_interval is not None and self.session.tick_interval != self._tick_interval:
            self._schedule_tick()
            logger.debug("Tick job rescheduled every %.3fs", self._tick_interval)

    def _finished(self, max_ticks: Optional[int], stop_on_game_over: bool) -> bool:
        if self.session.quit_requested:
            return True
        if max_ticks is not None and self.ticks >= max_ticks:
            return True
        return stop_on_game_over and self.session.game_state is GameState.GAME_OVER

    def run(self, max_ticks: Optional[int] = None, stop_on_game_over: bool = True) -> int:
        """
        Run in real time until the session quits, the game ends (if
        `stop_on_game_over`) or `max_ticks` ticks ran.

        Returns:
            Number of ticks executed
        """
        self.start()
        try:
            while not self._finished(max_ticks, stop_on_game_over):
                self.scheduler.run_pending()
                self.sleep(LOOP_SLEEP_SECONDS)
        finally:
            self.stop()
        return self.ticks

    def run_simulated(self, clock: ManualClock, max_ticks: int, stop_on_game_over: bool = True) -> int:
        """
        Run without sleeping, moving `clock` forward one tick interval per tick.

        The special food is polled every spawn-check interval in between, the
        same cadence the real-time jobs use. `clock` must be the clock the
        session was built with.

        Returns:
            Number of ticks executed
        """
        while not self._finished(max_ticks, stop_on_game_over):
            elapsed = 0.0
            interval = self.session.tick_interval
            while elapsed + SPECIAL_FOOD_SPAWN_CHECK_INTERVAL <= interval + 1e-9:
                clock.advance(SPECIAL_FOOD_SPAWN_CHECK_INTERVAL)
                elapsed += SPECIAL_FOOD_SPAWN_CHECK_INTERVAL
                self.session.poll_special_food()
            if interval - elapsed > 1e-9:
                clock.advance(interval - elapsed)

            self.step()
        return self.ticks
