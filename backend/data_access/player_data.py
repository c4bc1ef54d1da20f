"""
PlayerData - the login session the game controller reads high scores from.

Wraps the player repository with the current logged-in player. The game only
needs `is_logged_in()`, `current_high_score` and `update_high_score()`;
registration and login exist for the entry points.
"""

import logging
import sqlite3
from dataclasses import dataclass
from typing import Optional

from .player_store import hash_password, verify_password
from .repositories import PlayerRepository

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 10
PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 10

GUEST_NAME = "Guest"


@dataclass
class PlayerRecord:
    username: str
    high_score: int = 0


class PlayerData:
    """
    Player login session backed by a PlayerRepository.

    Attributes:
        repository: store used for lookups and high-score writes
        current_player: PlayerRecord of the logged-in player, or None
    """

    def __init__(self, repository: Optional[PlayerRepository] = None):
        self.repository = repository or PlayerRepository()
        self.current_player: Optional[PlayerRecord] = None

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def login(self, username: str, password: str) -> bool:
        record = self.repository.get_by_username(username)
        if record is None:
            return False
        if not verify_password(password, record['password_hash'], record['password_salt']):
            return False

        self.current_player = PlayerRecord(record['username'], record['high_score'])
        logger.info("Player login: %s", username)
        return True

    def register(self, username: str, password: str) -> bool:
        """
        Create a new player and log them in.

        Usernames must be 3-10 characters and unused; passwords 4-10 characters.

        Returns:
            True on success, False if validation failed or the name is taken
        """
        if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            return False
        if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
            return False
        if self.repository.get_by_username(username) is not None:
            return False

        password_hash, salt = hash_password(password)
        try:
            self.repository.create(username, password_hash, salt)
        except sqlite3.IntegrityError:
            return False

        self.current_player = PlayerRecord(username, 0)
        logger.info("New player registered: %s", username)
        return True

    def logout(self) -> None:
        if self.current_player is not None:
            logger.info("Player logout: %s", self.current_player.username)
        self.current_player = None

    def is_logged_in(self) -> bool:
        return self.current_player is not None

    @property
    def current_username(self) -> str:
        return self.current_player.username if self.current_player else GUEST_NAME

    # -------------------------------------------------------------------------
    # High score
    # -------------------------------------------------------------------------

    @property
    def current_high_score(self) -> int:
        return self.current_player.high_score if self.current_player else 0

    def is_new_record(self, score: int) -> bool:
        return self.current_player is not None and score > self.current_player.high_score

    def update_high_score(self, score: int) -> bool:
        """
        Record `score` for the logged-in player if it beats their high score.

        The in-memory record is only raised after the store accepted the write.

        Returns:
            True if the high score changed
        """
        if not self.is_new_record(score):
            return False

        self.repository.update_high_score(self.current_player.username, score)
        self.current_player.high_score = score
        logger.info("New high score recorded: %s = %s", self.current_player.username, score)
        return True
