"""
Player repository for player-record database operations.
"""

from typing import Any, Dict, List, Optional

from .base import BaseRepository


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        'id': row['id'],
        'username': row['username'],
        'password_hash': row['password_hash'],
        'password_salt': row['password_salt'],
        'high_score': row['high_score'],
    }


class PlayerRepository(BaseRepository):
    """
    Repository for players table operations.
    """

    # -------------------------------------------------------------------------
    # Query operations
    # -------------------------------------------------------------------------

    def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        """
        Look up a player record.

        Args:
            username: The player's unique name

        Returns:
            Player dictionary or None if not found
        """
        with self.read_connection() as (conn, cursor):
            cursor.execute(
                """
                SELECT id, username, password_hash, password_salt, high_score
                FROM players
                WHERE username = ?
                """,
                (username,)
            )
            row = cursor.fetchone()
            return _row_to_dict(row) if row else None

    def get_all(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Get all players sorted by high score (best first).

        Args:
            limit: Optional maximum number of players to return
        """
        query = """
            SELECT id, username, password_hash, password_salt, high_score
            FROM players
            ORDER BY high_score DESC, username ASC
        """
        params: tuple = ()
        if limit is not None:
            query += " LIMIT ?"
            params = (limit,)

        with self.read_connection() as (conn, cursor):
            cursor.execute(query, params)
            return [_row_to_dict(row) for row in cursor.fetchall()]

    # -------------------------------------------------------------------------
    # Write operations
    # -------------------------------------------------------------------------

    def create(self, username: str, password_hash: str, password_salt: str,
               high_score: int = 0) -> int:
        """
        Insert a new player.

        Returns:
            The new player id

        Raises:
            sqlite3.IntegrityError: If the username is taken
        """
        with self.connection() as (conn, cursor):
            cursor.execute(
                """
                INSERT INTO players (username, password_hash, password_salt, high_score)
                VALUES (?, ?, ?, ?)
                """,
                (username, password_hash, password_salt, high_score)
            )
            return cursor.lastrowid

    def upsert(self, username: str, password_hash: str, password_salt: str,
               high_score: int = 0) -> bool:
        """
        Insert a player or refresh an existing one's credentials.

        An existing high score is never lowered.

        Returns:
            True if a new row was inserted, False if an existing row was updated
        """
        with self.connection() as (conn, cursor):
            cursor.execute("SELECT id FROM players WHERE username = ?", (username,))
            existing = cursor.fetchone()
            if existing:
                cursor.execute(
                    """
                    UPDATE players
                    SET password_hash = ?,
                        password_salt = ?,
                        high_score = MAX(high_score, ?),
                        updated_at = CURRENT_TIMESTAMP
                    WHERE username = ?
                    """,
                    (password_hash, password_salt, high_score, username)
                )
                return False

            cursor.execute(
                """
                INSERT INTO players (username, password_hash, password_salt, high_score)
                VALUES (?, ?, ?, ?)
                """,
                (username, password_hash, password_salt, high_score)
            )
            return True

    def update_high_score(self, username: str, score: int) -> bool:
        """
        Raise a player's high score.

        The stored value only changes when `score` is strictly greater.

        Returns:
            True if the stored high score changed
        """
        with self.connection() as (conn, cursor):
            cursor.execute(
                """
                UPDATE players
                SET high_score = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE username = ? AND high_score < ?
                """,
                (score, username, score)
            )
            return cursor.rowcount > 0

