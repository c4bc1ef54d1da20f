"""
Seed the players table from the YAML player list.

This script loads players from backend/player_lists/player_list.yaml and
inserts them into the database (or refreshes their credentials if they
already exist).
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from data_access.player_store import hash_password
from data_access.repositories import PlayerRepository
from database import get_database_path

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_LIST = Path(__file__).parent / 'player_lists' / 'player_list.yaml'


def load_yaml_players(yaml_path: Optional[Path] = None) -> List[Dict[str, Any]]:
    """Load players from the YAML configuration file."""
    yaml_path = yaml_path or DEFAULT_PLAYER_LIST
    with open(yaml_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    return data.get('players', []) or []


def seed_players(yaml_path: Optional[Path] = None,
                 repository: Optional[PlayerRepository] = None) -> Dict[str, int]:
    """
    Seed the players table from YAML.

    Entries without a username or password are skipped.

    Returns:
        Counts of inserted, updated and skipped players
    """
    repository = repository or PlayerRepository()
    players = load_yaml_players(yaml_path)
    logger.info("Found %s players in YAML", len(players))

    stats = {'inserted': 0, 'updated': 0, 'skipped': 0}
    for player in players:
        username = player.get('username')
        password = player.get('password')
        if not username or not password:
            logger.warning("Skipping player entry without username/password: %s", player)
            stats['skipped'] += 1
            continue

        password_hash, salt = hash_password(str(password))
        high_score = int(player.get('high_score') or 0)
        if repository.upsert(str(username), password_hash, salt, high_score):
            stats['inserted'] += 1
            logger.info("  Inserted: %s", username)
        else:
            stats['updated'] += 1
            logger.info("  Updated: %s", username)

    logger.info(
        "Seeding complete: inserted=%s updated=%s skipped=%s",
        stats['inserted'], stats['updated'], stats['skipped'],
    )
    return stats


if __name__ == "__main__":
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    print(f"Database path: {get_database_path()}\n")
    seed_players()
