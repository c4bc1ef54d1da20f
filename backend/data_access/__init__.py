"""
Data access layer for SnakeArcade player records.

This module provides functions for looking up players, registering them and
recording high scores, plus the PlayerData login session used by the game.
"""

from .player_store import (
    hash_password,
    verify_password,
    lookup_player,
    create_player,
    update_high_score,
    get_leaderboard,
)
from .player_data import PlayerData, PlayerRecord

__all__ = [
    'hash_password',
    'verify_password',
    'lookup_player',
    'create_player',
    'update_high_score',
    'get_leaderboard',
    'PlayerData',
    'PlayerRecord',
]
