"""
Player record store functions.

These functions delegate to the PlayerRepository for actual database operations.
"""

import hashlib
import secrets
from typing import Any, Dict, List, Optional

from .repositories import PlayerRepository

# Repository instance
_player_repo = PlayerRepository()


def hash_password(password: str, salt: Optional[str] = None) -> tuple:
    """
    Hash a password with a per-player salt.

    Returns:
        Tuple (password_hash, salt), both hex strings
    """
    if salt is None:
        salt = secrets.token_hex(16)
    digest = hashlib.sha256((salt + password).encode('utf-8')).hexdigest()
    return digest, salt


def verify_password(password: str, password_hash: str, salt: str) -> bool:
    return secrets.compare_digest(hash_password(password, salt)[0], password_hash)


def lookup_player(username: str) -> Optional[Dict[str, Any]]:
    """Return the stored record for `username`, or None."""
    return _player_repo.get_by_username(username)


def create_player(username: str, password: str, high_score: int = 0) -> int:
    """Insert a new player with a freshly salted password hash."""
    password_hash, salt = hash_password(password)
    return _player_repo.create(username, password_hash, salt, high_score)


def update_high_score(username: str, score: int) -> bool:
    """Store `score` as the player's high score if it beats the stored one."""
    return _player_repo.update_high_score(username, score)


def get_leaderboard(limit: int = 10) -> List[Dict[str, Any]]:
    """Top players by high score, without credential columns."""
    return [
        {'username': p['username'], 'high_score': p['high_score']}
        for p in _player_repo.get_all(limit=limit)
    ]
