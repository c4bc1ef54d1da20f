"""
Input intents delivered to a game session by an input collaborator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .geometry import Direction


class IntentType(Enum):
    MOVE = "move"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    QUIT = "quit"
    SET_SPEED = "set_speed"


@dataclass(frozen=True)
class Intent:
    kind: IntentType
    direction: Optional[Direction] = None
    speed_level: Optional[int] = None

    @classmethod
    def move(cls, direction: Direction) -> "Intent":
        return cls(IntentType.MOVE, direction=direction)

    @classmethod
    def toggle_pause(cls) -> "Intent":
        return cls(IntentType.TOGGLE_PAUSE)

    @classmethod
    def restart(cls) -> "Intent":
        return cls(IntentType.RESTART)

    @classmethod
    def quit(cls) -> "Intent":
        return cls(IntentType.QUIT)

    @classmethod
    def set_speed(cls, level: int) -> "Intent":
        return cls(IntentType.SET_SPEED, speed_level=level)
