"""
Tests for GameController - tick rules, listeners and high-score resolution.
"""

import os
import random
import sys
from unittest.mock import MagicMock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import FOOD_SCORE  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from domain.geometry import Direction  # noqa: E402
from domain.snake import Snake  # noqa: E402
from services.game_controller import GameController  # noqa: E402


class RecordingListener:
    """Collects every notification as (kind, value) tuples."""

    def __init__(self, name="listener", log=None):
        self.name = name
        self.events = [] if log is None else log

    def on_game_state_changed(self, new_state):
        self.events.append((self.name, "state", new_state))

    def on_score_changed(self, new_score):
        self.events.append((self.name, "score", new_score))

    def on_high_score_changed(self, new_high_score):
        self.events.append((self.name, "high_score", new_high_score))


class FakeStore:
    def __init__(self, logged_in=True, high_score=0):
        self.logged_in = logged_in
        self.current_high_score = high_score
        self.writes = []

    def is_logged_in(self):
        return self.logged_in

    def update_high_score(self, score):
        self.writes.append(score)
        if score > self.current_high_score:
            self.current_high_score = score
            return True
        return False


@pytest.fixture
def controller():
    return GameController(rng=random.Random(42))


@pytest.fixture
def listener(controller):
    recorder = RecordingListener()
    controller.add_listener(recorder)
    return recorder


def collision_snake():
    # Head at (100, 100) turning down into its own body at (100, 120)
    body = [(100, 100), (120, 100), (120, 120), (100, 120), (80, 120)]
    return Snake(body, Direction.DOWN, 20)


class TestReset:
    def test_start_position(self, controller):
        """A new game starts at the centre of the board facing right."""
        assert controller.snake.cells() == [(300, 300), (280, 300), (260, 300)]
        assert controller.direction == Direction.RIGHT
        assert controller.score == 0
        assert controller.game_state == GameState.RUNNING

    def test_food_not_on_snake(self, controller):
        """Initial food is placed outside the snake."""
        assert controller.food.position is not None
        assert controller.food.position not in controller.snake

    def test_reset_without_changes_is_silent(self, controller, listener):
        """Resetting a fresh game emits nothing."""
        controller.reset_game()
        assert listener.events == []

    def test_reset_after_game_over_notifies(self, controller, listener):
        """Resetting reports the score drop and the return to RUNNING."""
        controller.add_score(30)
        controller.set_game_state(GameState.GAME_OVER)
        listener.events.clear()

        controller.reset_game()
        assert listener.events == [
            ("listener", "score", 0),
            ("listener", "state", GameState.RUNNING),
        ]

    def test_rejects_bad_board(self):
        """Board sizes must be positive multiples of the unit."""
        with pytest.raises(ValueError):
            GameController(width=610)
        with pytest.raises(ValueError):
            GameController(height=0)

    def test_rejects_snake_longer_than_row(self):
        """The initial snake has to fit on one row."""
        with pytest.raises(ValueError):
            GameController(width=60, height=60, initial_length=4)

    def test_small_board_wraps_initial_body(self):
        """On a narrow board the starting body wraps around the left edge."""
        controller = GameController(width=60, height=60, initial_length=3, rng=random.Random(0))
        assert controller.snake.cells() == [(20, 20), (0, 20), (40, 20)]


class TestUpdate:
    def test_single_tick_moves_right(self, controller):
        """One tick moves the head one unit and keeps the length."""
        controller.food.position = (0, 0)
        controller.update()
        assert controller.snake.head == (320, 300)
        assert len(controller.snake) == 3
        assert controller.score == 0

    def test_eating_food(self, controller, listener):
        """Eating grows the snake, scores and places new food."""
        controller.snake = Snake([(100, 100), (80, 100), (60, 100)], Direction.RIGHT, 20)
        controller.food.position = (120, 100)

        controller.update()

        assert controller.snake.head == (120, 100)
        assert len(controller.snake) == 4
        assert controller.score == FOOD_SCORE
        assert controller.food.position not in controller.snake
        assert listener.events == [("listener", "score", FOOD_SCORE)]

    def test_wraps_right_edge(self, controller):
        """Leaving the right edge re-enters on the left."""
        controller.snake = Snake([(580, 300), (560, 300), (540, 300)], Direction.RIGHT, 20)
        controller.food.position = (0, 0)
        controller.update()
        assert controller.snake.head == (0, 300)

    def test_wraps_top_edge(self, controller):
        """Leaving the top edge re-enters at the bottom."""
        controller.snake = Snake([(100, 0), (100, 20), (100, 40)], Direction.UP, 20)
        controller.food.position = (0, 0)
        controller.update()
        assert controller.snake.head == (100, 580)

    def test_self_collision_ends_game(self, controller, listener):
        """Running into the body ends the game and keeps the tail."""
        controller.snake = collision_snake()
        controller.food.position = (100, 120)

        controller.update()

        assert controller.game_state == GameState.GAME_OVER
        assert len(controller.snake) == 6
        assert controller.score == 0
        assert ("listener", "state", GameState.GAME_OVER) in listener.events

    def test_update_ignored_when_not_running(self, controller):
        """Paused and finished games do not move."""
        controller.set_game_state(GameState.PAUSED)
        controller.update()
        assert controller.snake.head == (300, 300)

        controller.set_game_state(GameState.GAME_OVER)
        controller.update()
        assert controller.snake.head == (300, 300)

    def test_reversal_ignored(self, controller):
        """Turning back onto the neck is refused."""
        assert controller.set_direction(Direction.LEFT) is False
        assert controller.direction == Direction.RIGHT
        assert controller.set_direction(Direction.UP) is True


class TestListeners:
    def test_state_change_is_edge_triggered(self, controller, listener):
        """Setting the same state twice notifies once."""
        controller.set_game_state(GameState.PAUSED)
        controller.set_game_state(GameState.PAUSED)
        assert listener.events == [("listener", "state", GameState.PAUSED)]

    def test_zero_points_do_not_notify(self, controller, listener):
        """Adding no points is not a score change."""
        controller.add_score(0)
        assert listener.events == []

    def test_registration_order(self, controller):
        """Listeners hear events in the order they were added."""
        log = []
        controller.add_listener(RecordingListener("first", log))
        controller.add_listener(RecordingListener("second", log))

        controller.add_score(10)
        assert [event[0] for event in log] == ["first", "second"]

    def test_remove_listener(self, controller, listener):
        """Removed listeners get nothing; removing twice is harmless."""
        controller.remove_listener(listener)
        controller.remove_listener(listener)
        controller.add_score(10)
        assert listener.events == []


class TestHighScore:
    def test_local_high_score_for_guest(self, controller, listener):
        """Without a store the session-local high score is used."""
        controller.snake = collision_snake()
        controller.add_score(50)
        listener.events.clear()

        controller.update()

        assert controller.high_score == 50
        assert controller.local_high_score == 50
        assert listener.events == [
            ("listener", "state", GameState.GAME_OVER),
            ("listener", "high_score", 50),
        ]

    def test_lower_score_keeps_record(self, controller, listener):
        """A game that does not beat the record leaves it alone."""
        controller.local_high_score = 50
        controller.add_score(20)
        listener.events.clear()

        assert controller.is_new_record() is False
        assert controller.check_and_update_high_score() is False
        assert controller.high_score == 50
        assert listener.events == []

    def test_logged_in_player_uses_store(self):
        """A logged-in player's record lives in the store."""
        store = FakeStore(high_score=100)
        controller = GameController(player_data=store, rng=random.Random(1))
        assert controller.high_score == 100

        controller.add_score(150)
        assert controller.check_and_update_high_score() is True
        assert store.writes == [150]
        assert controller.high_score == 150
        assert controller.local_high_score == 0

    def test_logged_out_store_uses_local(self):
        """A store without a logged-in player is ignored."""
        store = FakeStore(logged_in=False, high_score=999)
        controller = GameController(player_data=store, rng=random.Random(1))
        assert controller.high_score == 0

        controller.add_score(10)
        controller.check_and_update_high_score()
        assert store.writes == []
        assert controller.local_high_score == 10

    def test_failing_store_write_falls_back_to_local(self):
        """A store error is logged and the score is kept locally."""
        store = MagicMock()
        store.is_logged_in.return_value = True
        store.current_high_score = 0
        store.update_high_score.side_effect = RuntimeError("database is locked")

        controller = GameController(player_data=store, rng=random.Random(1))
        listener = RecordingListener()
        controller.add_listener(listener)
        controller.add_score(40)

        assert controller.check_and_update_high_score() is True
        assert controller.local_high_score == 40
        assert ("listener", "high_score", 40) in listener.events
        assert controller.high_score == 40
        assert controller.is_new_record() is False

    def test_failing_login_check_means_guest(self):
        """If the store cannot say who is logged in, play as a guest."""
        store = MagicMock()
        store.is_logged_in.side_effect = RuntimeError("gone")

        controller = GameController(player_data=store, rng=random.Random(1))
        controller.local_high_score = 25
        assert controller.is_player_logged_in() is False
        assert controller.high_score == 25
