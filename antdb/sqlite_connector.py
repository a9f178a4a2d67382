# antdb/sqlite_connector.py
"""
SQLite driver connector.

This module provides a concrete implementation of the `DatabaseConnector`
for local SQLite databases. It wraps the standard `sqlite3` library; the
config's 'name' field is the database file path (":memory:" works too) and
the server fields are ignored.
"""

import sqlite3
from typing import Any, Dict, Tuple

import structlog

from antdb.base_connector import DatabaseConnector, register_connector
from config import DEFAULT_ERROR_CODE

log = structlog.get_logger(__name__)


class SQLiteConnector(DatabaseConnector):
    """Opens and recognizes `sqlite3` connections."""

    name = "sqlite"
    placeholder = "?"
    driver_error = sqlite3.Error

    def connect(self, config: Dict[str, Any]) -> sqlite3.Connection:
        """
        Opens the SQLite file named by `config['name']`.

        Workflow:
        1.  Calls `sqlite3.connect()` in autocommit mode (`isolation_level=None`),
            so every statement commits on its own, like the server drivers.
        2.  Enables foreign key support with a PRAGMA command for data integrity.
        """
        path = config.get("name")
        if not path:
            raise sqlite3.OperationalError("No database file given in config 'name'.")
        try:
            conn = sqlite3.connect(path, isolation_level=None)
            conn.execute("PRAGMA foreign_keys = ON;")
        except sqlite3.Error as e:
            log.error("Failed to open SQLite database.", path=path, error=str(e))
            raise
        log.info("SQLite connection successful.", path=path)
        return conn

    def owns(self, connection) -> bool:
        return isinstance(connection, sqlite3.Connection)

    def error_details(self, exc: Exception) -> Tuple[Any, str]:
        # `sqlite_errorcode` is only set on errors raised by the library itself.
        code = getattr(exc, "sqlite_errorcode", None)
        return (code if code is not None else DEFAULT_ERROR_CODE), str(exc)


register_connector(SQLiteConnector())
