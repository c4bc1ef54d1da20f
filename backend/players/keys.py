"""
Key bindings: translate key names into intents.

Key names follow the usual toolkit spelling ("LEFT", "A", "SPACE", "F2", "1").
"""

from typing import Dict, Optional

from domain.game_state import GameState
from domain.geometry import Direction
from domain.intents import Intent

MOVE_KEYS: Dict[str, Direction] = {
    "LEFT": Direction.LEFT,
    "A": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
    "D": Direction.RIGHT,
    "UP": Direction.UP,
    "W": Direction.UP,
    "DOWN": Direction.DOWN,
    "S": Direction.DOWN,
}

SPEED_KEYS: Dict[str, int] = {"1": 1, "2": 2, "3": 3, "4": 4}


def translate_key(key: str, state: Optional[GameState] = None) -> Optional[Intent]:
    """
    Map a key press to an intent.

    While the game is over only SPACE/F2 (restart) and ESC (quit) do anything.

    Returns:
        The intent, or None for an unbound key
    """
    key = key.strip().upper()

    if state is GameState.GAME_OVER:
        if key in ("SPACE", "F2"):
            return Intent.restart()
        if key == "ESC":
            return Intent.quit()
        return None

    if key in MOVE_KEYS:
        return Intent.move(MOVE_KEYS[key])
    if key == "SPACE":
        return Intent.toggle_pause()
    if key == "F2":
        return Intent.restart()
    if key == "ESC":
        return Intent.quit()
    if key in SPEED_KEYS:
        return Intent.set_speed(SPEED_KEYS[key])
    return None
