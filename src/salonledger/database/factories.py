"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from salonledger.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "SALONLEDGER_DB_PATH"
IN_MEMORY = ":memory:"


def default_database_path() -> Path:
    """Location used when no path is configured: ~/.salonledger/salonledger.db"""
    return Path.home() / ".salonledger" / "salonledger.db"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to the SQLite file, or ":memory:" for a throwaway
            store. If None, SALONLEDGER_DB_PATH is used, then the default path.

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    database_path = database_path or os.environ.get(DB_PATH_ENV)

    if database_path == IN_MEMORY:
        logger.debug("Using in-memory store")
        return SQLAlchemyDatabase("sqlite://")

    if database_path is None:
        path = default_database_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        database_path = str(path)

    logger.debug("Using store at {}", database_path)
    return SQLAlchemyDatabase(f"sqlite:///{database_path}")
