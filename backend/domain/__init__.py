"""
Domain entities for the SnakeArcade game engine.

This module contains the core game entities that are independent of
infrastructure concerns (scheduling, persistence, presentation).
"""

from .constants import (
    GAME_WIDTH,
    GAME_HEIGHT,
    UNIT_SIZE,
    INITIAL_SNAKE_LENGTH,
    FOOD_SCORE,
    SPECIAL_FOOD_SCORE,
    SPEED_PRESETS,
)
from .geometry import Cell, Direction, step, wrap_cell
from .snake import Snake
from .food import Food, FoodKind, SpecialFood, find_free_cell
from .game_state import GameState, GameSnapshot
from .intents import Intent, IntentType

__all__ = [
    'GAME_WIDTH', 'GAME_HEIGHT', 'UNIT_SIZE', 'INITIAL_SNAKE_LENGTH',
    'FOOD_SCORE', 'SPECIAL_FOOD_SCORE', 'SPEED_PRESETS',
    'Cell', 'Direction', 'step', 'wrap_cell',
    'Snake',
    'Food', 'FoodKind', 'SpecialFood', 'find_free_cell',
    'GameState', 'GameSnapshot',
    'Intent', 'IntentType',
]
