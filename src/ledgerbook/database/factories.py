"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from ledgerbook.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENVVAR = "LEDGERBOOK_DB_PATH"
MEMORY_PATH = ":memory:"


def default_database_path() -> Path:
    """Return ~/.ledgerbook/ledgerbook.db, creating the directory."""
    db_dir = Path.home() / ".ledgerbook"
    db_dir.mkdir(exist_ok=True)
    return db_dir / "ledgerbook.db"


def sqlite_url(database_path: str) -> str:
    """Build a SQLite URL; ":memory:" gives a throwaway in-memory book."""
    if database_path == MEMORY_PATH:
        return "sqlite://"
    return f"sqlite:///{Path(database_path).expanduser()}"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    The path is taken from the argument, then the LEDGERBOOK_DB_PATH
    environment variable, then the per-user default.

    Args:
        database_path: Path to SQLite database file, or ":memory:"

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    database_path = database_path or os.environ.get(DB_PATH_ENVVAR) or str(default_database_path())

    url = sqlite_url(database_path)
    logger.debug("Opening book at %s", url)
    return SQLAlchemyDatabase(url)
