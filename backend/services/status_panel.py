"""
Status panel model: the four labels shown above the board.

Implements the controller listener interface and keeps label text that any
front end can display. Changes are logged at DEBUG.
"""

import logging
from typing import Dict, Optional

from domain.game_state import GameState

logger = logging.getLogger(__name__)


class StatusPanel:
    def __init__(self, username: Optional[str] = None, score: int = 0, high_score: int = 0,
                 state: Optional[GameState] = None):
        self.username = username or "Guest"
        self.score = score
        self.high_score = high_score
        self.status = state.label if state else "Start"

    def on_game_state_changed(self, new_state: GameState) -> None:
        self.status = new_state.label
        logger.debug("State: %s", self.status)

    def on_score_changed(self, new_score: int) -> None:
        self.score = new_score
        logger.debug("Score: %s", new_score)

    def on_high_score_changed(self, new_high_score: int) -> None:
        self.high_score = new_high_score
        logger.info("New high score: %s", new_high_score)

    def update_username(self, username: Optional[str]) -> None:
        self.username = username or "Guest"

    def labels(self) -> Dict[str, str]:
        return {
            'player': f"Player: {self.username}",
            'score': f"Score: {self.score}",
            'high_score': f"High Score: {self.high_score}",
            'state': f"State: {self.status}",
        }

    def __str__(self):
        return " | ".join(self.labels().values())
