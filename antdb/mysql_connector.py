# antdb/mysql_connector.py
"""
MySQL / MariaDB driver connector via PyMySQL.

This module provides a concrete implementation of the `DatabaseConnector`
for MySQL-compatible servers. PyMySQL uses the "format" paramstyle, so the
statement builder emits `%s` placeholders for connections it opens.
"""

from typing import Any, Dict

import pymysql
import structlog

from antdb.base_connector import DatabaseConnector, register_connector
from config import MYSQL_CHARSET, mask_sensitive_data

log = structlog.get_logger(__name__)


class MySQLConnector(DatabaseConnector):
    """Opens and recognizes PyMySQL connections."""

    name = "mysql"
    placeholder = "%s"
    driver_error = pymysql.Error

    def connect(self, config: Dict[str, Any]) -> pymysql.connections.Connection:
        """
        Opens a session on the configured server.

        Connections are opened with `autocommit=True` and a plain tuple cursor;
        `AntDb` applies the requested row shape itself.
        """
        kwargs = {
            "host": config.get("host") or "localhost",
            "user": config.get("user"),
            "password": config.get("pass") or "",
            "database": config.get("name"),
            "charset": MYSQL_CHARSET,
            "autocommit": True,
        }
        if config.get("port"):
            kwargs["port"] = int(config["port"])
        try:
            conn = pymysql.connect(**kwargs)
        except pymysql.Error as e:
            log.error(
                "Failed to connect to MySQL server.",
                config=mask_sensitive_data(kwargs),
                error=str(e),
            )
            raise
        log.info("MySQL connection successful.", config=mask_sensitive_data(kwargs))
        return conn

    def owns(self, connection) -> bool:
        return isinstance(connection, pymysql.connections.Connection)


register_connector(MySQLConnector())
