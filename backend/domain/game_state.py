"""
GameState enumeration and GameSnapshot - a read-only view of the game at a point in time.
"""

from enum import Enum
from typing import List, Optional

from .geometry import Cell, Direction, in_bounds


class GameState(Enum):
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"
    GAME_OVER = "GAME_OVER"

    @property
    def label(self) -> str:
        """Human readable name used by the status panel."""
        return _LABELS[self]


_LABELS = {
    GameState.RUNNING: "Playing",
    GameState.PAUSED: "Paused",
    GameState.GAME_OVER: "Game Over",
}


class GameSnapshot:
    """
    Everything a presentation layer needs to draw one frame.

    Attributes:
        tick: number of ticks played in the current game
        snake: list of (x, y), head first
        direction: the snake's facing direction
        food: regular food position or None
        special_food: special food position or None when not visible
        special_food_remaining: seconds of special food visibility left
        score, high_score: current values
        state: GameState
        width, height, unit_size: board geometry in pixels
        username: logged-in player name, or None for a guest
    """

    def __init__(
        self,
        tick: int,
        snake: List[Cell],
        direction: Direction,
        food: Optional[Cell],
        special_food: Optional[Cell],
        special_food_remaining: float,
        score: int,
        high_score: int,
        state: GameState,
        width: int,
        height: int,
        unit_size: int,
        username: Optional[str] = None
    ):
        self.tick = tick
        self.snake = snake
        self.direction = direction
        self.food = food
        self.special_food = special_food
        self.special_food_remaining = special_food_remaining
        self.score = score
        self.high_score = high_score
        self.state = state
        self.width = width
        self.height = height
        self.unit_size = unit_size
        self.username = username

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty cell
        F = food
        * = special food
        H = snake head
        S = snake body
        Rows run top to bottom, matching screen coordinates.
        """
        columns = self.width // self.unit_size
        rows = self.height // self.unit_size
        board = [['.' for _ in range(columns)] for _ in range(rows)]

        def put(cell: Optional[Cell], mark: str) -> None:
            if cell is None or not in_bounds(cell, self.width, self.height):
                return
            board[cell[1] // self.unit_size][cell[0] // self.unit_size] = mark

        put(self.food, 'F')
        put(self.special_food, '*')
        for cell in reversed(self.snake[1:]):
            put(cell, 'S')
        if self.snake:
            put(self.snake[0], 'H')

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameSnapshot tick={self.tick}, state={self.state.value}, "
            f"length={len(self.snake)}, score={self.score}, high_score={self.high_score}>"
        )
