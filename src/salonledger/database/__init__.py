"""Database layer for salonledger application."""

from salonledger.database.base import Database
from salonledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
