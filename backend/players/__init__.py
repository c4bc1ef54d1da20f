"""
Player implementations for SnakeArcade.

Players are the input side of the game: before every tick they look at a
snapshot and may hand the session one intent.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .keys import translate_key
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'translate_key',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
