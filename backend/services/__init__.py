"""
Game services: the tick controller, the session that coordinates it with the
special food, the cooperative scheduler that drives it, and the status panel
presentation model.
"""

from .clock import ManualClock
from .game_controller import GameController, GameStateListener, HighScoreStore
from .game_session import GameSession
from .status_panel import StatusPanel

__all__ = [
    'ManualClock',
    'GameController',
    'GameStateListener',
    'HighScoreStore',
    'GameSession',
    'StatusPanel',
]
