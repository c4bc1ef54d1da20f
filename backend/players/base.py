"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameSnapshot
from domain.intents import Intent


class Player:
    """
    Base class/interface for input collaborators.

    A player is asked for at most one intent before every tick, given a
    snapshot of the current game.
    """

    def __init__(self, name: str = "player"):
        self.name = name

    def get_intent(self, snapshot: GameSnapshot) -> Optional[Intent]:
        """
        Return the next intent given the current game snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            An Intent, or None to keep going as before
        """
        raise NotImplementedError
