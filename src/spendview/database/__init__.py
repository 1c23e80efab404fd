"""Database layer for spendview application."""

from spendview.database.base import Database
from spendview.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
