"""
Headless SnakeArcade runner.

Plays one or more games with an autopilot or scripted player and prints a
JSON summary. Games run on a simulated clock by default; pass --realtime to
run the schedule-driven loop at the chosen speed.
"""

import argparse
import json
import logging
import os
import random
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from data_access import get_leaderboard
from data_access.player_data import PlayerData
from domain.constants import DEFAULT_SPEED_LEVEL, SPEED_PRESETS
from domain.game_state import GameSnapshot, GameState
from players import get_player_class, AVAILABLE_VARIANTS
from players.base import Player
from players.random_player import RandomPlayer
from players.scripted_player import ScriptedPlayer
from services.clock import ManualClock
from services.game_session import GameSession
from services.status_panel import StatusPanel
from services.tick_scheduler import TickScheduler

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 2000


def build_player(kind: str, keys: Optional[str], rng: random.Random) -> Player:
    player_class = get_player_class(kind)
    if player_class is ScriptedPlayer:
        if not keys:
            raise ValueError("The scripted player needs --keys.")
        return ScriptedPlayer.from_string(keys)
    if player_class is RandomPlayer:
        return RandomPlayer(rng=rng)
    return player_class()


def build_player_data(username: Optional[str], password: Optional[str],
                      register: bool) -> Optional[PlayerData]:
    """Log in (or register) the named player; None plays as a guest."""
    if not username:
        return None
    if not password:
        raise ValueError("--password is required with --username.")

    player_data = PlayerData()
    if register:
        if not player_data.register(username, password):
            raise ValueError(
                f"Could not register '{username}' (taken, or name/password length invalid)."
            )
    elif not player_data.login(username, password):
        raise ValueError(f"Login failed for '{username}'.")
    return player_data


def run_games(
    session: GameSession,
    player: Player,
    games: int,
    max_ticks: int,
    clock: Optional[ManualClock] = None,
    show_board: bool = False
) -> Dict[str, Any]:
    """
    Play `games` games in a row on one session.

    Uses the simulated loop when `clock` is given, the real-time loop otherwise.

    Returns:
        Summary dict with per-game results and the final high score
    """
    def on_frame(snapshot: GameSnapshot) -> None:
        if show_board:
            print(snapshot.print_board())
            print()

    # Scripted players drive restarts and quitting themselves
    stop_on_game_over = not isinstance(player, ScriptedPlayer)

    results: List[Dict[str, Any]] = []
    for game_index in range(games):
        if game_index > 0:
            session.restart()

        scheduler = TickScheduler(session, player=player, on_frame=on_frame)
        if clock is not None:
            ticks = scheduler.run_simulated(clock, max_ticks, stop_on_game_over)
        else:
            ticks = scheduler.run(max_ticks, stop_on_game_over)

        snapshot = session.snapshot()
        results.append({
            "game": game_index + 1,
            "ticks": ticks,
            "score": snapshot.score,
            "length": len(snapshot.snake),
            "state": snapshot.state.value,
        })
        logger.info("Finished game %s: %s", game_index + 1, results[-1])

        if session.quit_requested:
            break

    # A game cut short by max_ticks still counts towards the high score
    if session.game_state is not GameState.GAME_OVER:
        session.controller.check_and_update_high_score()

    return {
        "games": results,
        "high_score": session.controller.high_score,
        "player": session.snapshot().username or "Guest",
    }


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Run headless Snake games with an autopilot or scripted player."
    )
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play in a row")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help="Maximum number of ticks per game")
    parser.add_argument("--speed", type=int, choices=sorted(SPEED_PRESETS), default=DEFAULT_SPEED_LEVEL,
                        help="Speed preset: 1=Slow, 2=Medium, 3=Fast, 4=Lightning")
    parser.add_argument("--player", choices=AVAILABLE_VARIANTS, default="random",
                        help="Who presses the keys")
    parser.add_argument("--keys", type=str, default=None,
                        help="Key presses for the scripted player, one per tick (e.g. 'UP,-,LEFT,SPACE')")
    parser.add_argument("--username", type=str, default=None,
                        help="Play as this registered player (high score is stored)")
    parser.add_argument("--password", type=str, default=None)
    parser.add_argument("--register", action="store_true",
                        help="Register --username before playing")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the autopilot")
    parser.add_argument("--realtime", action="store_true",
                        help="Run the real-time loop instead of a simulated clock")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--leaderboard", action="store_true",
                        help="Print the top stored players after the run")
    parser.add_argument("--log-level", type=str, default=os.getenv("SNAKE_LOG_LEVEL", "INFO"))

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.games < 1:
        parser.error("--games must be at least 1")

    rng = random.Random(args.seed)
    try:
        player = build_player(args.player, args.keys, rng)
        player_data = build_player_data(args.username, args.password, args.register)
    except ValueError as e:
        parser.error(str(e))

    clock = None if args.realtime else ManualClock()
    session_kwargs = {"player_data": player_data, "speed_level": args.speed, "rng": rng}
    if clock is not None:
        session_kwargs["clock"] = clock
    session = GameSession(**session_kwargs)

    panel = StatusPanel(username=player_data.current_username if player_data else None,
                        high_score=session.controller.high_score,
                        state=session.game_state)
    session.controller.add_listener(panel)

    result = run_games(session, player, args.games, args.max_ticks, clock, args.show_board)
    session.shutdown()

    print("\nGame Summary:")
    print(panel)
    print(json.dumps(result, indent=2))

    if args.leaderboard:
        print("\nLeaderboard:")
        for rank, entry in enumerate(get_leaderboard(), start=1):
            print(f"{rank:2}. {entry['username']:<10} {entry['high_score']}")

    return result


if __name__ == "__main__":
    main()
