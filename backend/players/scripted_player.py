"""
Scripted player - replays a fixed sequence of key presses, one per tick.
"""

from collections import deque
from typing import Iterable, Optional

from domain.game_state import GameSnapshot
from domain.intents import Intent
from .base import Player
from .keys import translate_key

# Placeholder key meaning "press nothing this tick"
IDLE_KEY = "-"


class ScriptedPlayer(Player):
    """
    Presses the next key from `keys` before each tick.

    When the script runs out the player quits, unless `quit_when_done` is False.
    """

    def __init__(self, keys: Iterable[str], name: str = "scripted", quit_when_done: bool = True):
        super().__init__(name)
        self.keys = deque(keys)
        self.quit_when_done = quit_when_done

    @classmethod
    def from_string(cls, script: str, **kwargs) -> "ScriptedPlayer":
        """Build from a comma or whitespace separated list of key names."""
        keys = [k for k in script.replace(",", " ").split() if k]
        return cls(keys, **kwargs)

    def get_intent(self, snapshot: GameSnapshot) -> Optional[Intent]:
        if not self.keys:
            return Intent.quit() if self.quit_when_done else None

        key = self.keys.popleft()
        if key == IDLE_KEY:
            return None
        return translate_key(key, snapshot.state)
