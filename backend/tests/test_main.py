"""
Tests for main.py - the headless runner and its status panel.
"""

import json
import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.game_state import GameState  # noqa: E402
from main import build_player, build_player_data, main, run_games  # noqa: E402
from players.random_player import RandomPlayer  # noqa: E402
from players.scripted_player import ScriptedPlayer  # noqa: E402
from services.clock import ManualClock  # noqa: E402
from services.game_session import GameSession  # noqa: E402
from services.status_panel import StatusPanel  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_db(tmp_path, monkeypatch):
    monkeypatch.setenv("SNAKE_DB_PATH", str(tmp_path / "main.db"))


class TestBuildPlayer:
    def test_random(self):
        """The default player is the random autopilot."""
        assert isinstance(build_player("random", None, random.Random(0)), RandomPlayer)

    def test_scripted_needs_keys(self):
        """A scripted player without keys is an error."""
        with pytest.raises(ValueError):
            build_player("scripted", None, random.Random(0))

    def test_scripted(self):
        player = build_player("scripted", "UP,LEFT", random.Random(0))
        assert isinstance(player, ScriptedPlayer)
        assert list(player.keys) == ["UP", "LEFT"]


class TestBuildPlayerData:
    def test_guest(self):
        """No username plays as a guest."""
        assert build_player_data(None, None, False) is None

    def test_password_required(self):
        with pytest.raises(ValueError):
            build_player_data("alice", None, False)

    def test_register_then_login(self):
        """A registered player can log in on the next run."""
        assert build_player_data("alice", "pass", register=True).current_username == "alice"
        assert build_player_data("alice", "pass", register=False).is_logged_in()

    def test_bad_login(self):
        with pytest.raises(ValueError, match="Login failed"):
            build_player_data("ghost", "pass", register=False)


class TestRunGames:
    def test_scripted_game(self):
        """A scripted run ticks once per key until ESC."""
        clock = ManualClock()
        session = GameSession(clock=clock, rng=random.Random(0))
        session.controller.food.position = (0, 0)
        player = ScriptedPlayer.from_string("UP - ESC")

        result = run_games(session, player, games=1, max_ticks=100, clock=clock)

        assert result["games"] == [
            {"game": 1, "ticks": 2, "score": 0, "length": 3, "state": "PAUSED"},
        ]
        assert result["player"] == "Guest"
        assert session.controller.snake.head == (300, 260)

    def test_multiple_games(self):
        """Each game after the first starts from a restart."""
        clock = ManualClock()
        session = GameSession(clock=clock, rng=random.Random(4))

        result = run_games(session, RandomPlayer(rng=random.Random(4)),
                           games=2, max_ticks=20, clock=clock)

        assert [g["game"] for g in result["games"]] == [1, 2]
        assert all(g["ticks"] <= 20 for g in result["games"])

    def test_show_board(self, capsys):
        """--show-board prints a frame per tick."""
        clock = ManualClock()
        session = GameSession(clock=clock, rng=random.Random(0))
        player = ScriptedPlayer.from_string("-")

        run_games(session, player, games=1, max_ticks=5, clock=clock, show_board=True)

        assert "H" in capsys.readouterr().out


class TestMain:
    def test_guest_run(self, capsys):
        """A seeded guest run prints and returns a summary."""
        result = main(["--seed", "1", "--max-ticks", "50"])

        assert len(result["games"]) == 1
        assert result["games"][0]["ticks"] <= 50
        assert result["player"] == "Guest"

        out = capsys.readouterr().out
        assert "Game Summary:" in out
        assert "Player: Guest" in out
        assert json.loads(out[out.index("{"):]) == result

    def test_registered_player(self):
        """High scores of a registered player are kept between runs."""
        result = main(["--seed", "2", "--max-ticks", "300", "--username", "alice",
                       "--password", "pass", "--register"])
        assert result["player"] == "alice"

        again = main(["--seed", "2", "--max-ticks", "0", "--username", "alice",
                      "--password", "pass"])
        assert again["high_score"] == result["high_score"]

    def test_leaderboard(self, capsys):
        """--leaderboard lists stored players best first."""
        build_player_data("alice", "pass", register=True).update_high_score(90)
        build_player_data("bob", "pass", register=True).update_high_score(40)

        main(["--seed", "3", "--max-ticks", "0", "--leaderboard"])

        out = capsys.readouterr().out
        board = out[out.index("Leaderboard:"):]
        assert board.index("alice") < board.index("bob")
        assert " 1. alice" in board

    @pytest.mark.parametrize("argv", [
        ["--player", "scripted"],
        ["--username", "alice"],
        ["--games", "0"],
        ["--speed", "7"],
    ])
    def test_invalid_arguments(self, argv):
        """Bad argument combinations exit through argparse."""
        with pytest.raises(SystemExit):
            main(argv)


class TestStatusPanel:
    def test_defaults(self):
        """Before the first state change the panel reads Start."""
        panel = StatusPanel()
        assert str(panel) == "Player: Guest | Score: 0 | High Score: 0 | State: Start"

    def test_follows_controller(self):
        """The panel tracks the controller through its listener callbacks."""
        session = GameSession(clock=ManualClock(), rng=random.Random(0))
        panel = StatusPanel(state=session.game_state)
        session.controller.add_listener(panel)

        session.controller.add_score(10)
        session.toggle_pause()
        assert panel.labels()["score"] == "Score: 10"
        assert panel.labels()["state"] == "State: Paused"

        session.controller.set_game_state(GameState.GAME_OVER)
        session.controller.check_and_update_high_score()
        assert panel.labels()["state"] == "State: Game Over"
        assert panel.labels()["high_score"] == "High Score: 10"

    def test_update_username(self):
        panel = StatusPanel(username="alice")
        panel.update_username(None)
        assert panel.labels()["player"] == "Player: Guest"
