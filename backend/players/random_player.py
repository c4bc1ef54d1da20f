"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.game_state import GameSnapshot, GameState
from domain.geometry import Direction, step, wrap_cell
from domain.intents import Intent
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction that avoids running into itself.

    The tail cell counts as free because it moves away on a normal tick.
    """

    def __init__(self, name: str = "random", rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng or random.Random()

    def safe_directions(self, snapshot: GameSnapshot) -> List[Direction]:
        head = snapshot.snake[0]
        blocked = set(snapshot.snake[1:-1])

        safe: List[Direction] = []
        for direction in Direction:
            # Reversing is rejected by the snake anyway
            if direction.is_opposite(snapshot.direction):
                continue
            target = wrap_cell(step(head, direction, snapshot.unit_size),
                               snapshot.width, snapshot.height, snapshot.unit_size)
            if target not in blocked:
                safe.append(direction)
        return safe

    def get_intent(self, snapshot: GameSnapshot) -> Optional[Intent]:
        if snapshot.state is GameState.GAME_OVER:
            return Intent.quit()
        if snapshot.state is not GameState.RUNNING:
            return None

        safe = self.safe_directions(snapshot)
        # If no safe moves, keep going (we'll die anyway)
        if not safe:
            return None
        return Intent.move(self.rng.choice(safe))
