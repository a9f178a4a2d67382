# antdb/antdb.py
"""
The `AntDb` wrapper.

A thin layer over a DB-API connection with one mission: make plain SQL
access approachable. Query helpers never raise; they return `False` on
failure and record what went wrong in the instance's error log. Since
`0 == False` in Python, check results with `is False`:

    db = AntDb({"name": "app.db", "options": {"driver": "sqlite"}})
    if db.update("users", {"password": "secret"}, {"username": "steve"}) is False:
        print(db.get_last_error())
"""

from typing import Any, Dict, Mapping, Optional, Sequence

import structlog

# Importing the connector modules registers them.
import antdb.mysql_connector  # noqa: F401
import antdb.sqlite_connector  # noqa: F401
from antdb.base_connector import DatabaseConnector, connector_for, get_connector
from antdb.errors import ErrorLog
from antdb.params import ParamType, TypeHints, bind_params
from antdb.results import FetchStyle, ResultSet
from antdb.statements import Statement, build_delete, build_insert, build_update
from config import DEFAULT_DRIVER, NO_CONNECTION_MESSAGE, mask_sensitive_data

log = structlog.get_logger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "host": None,
    "user": None,
    "pass": None,
    "name": None,
    "port": None,
    "options": {
        "autoconnect": True,
        "fetch_style": FetchStyle.OBJ,
        "driver": DEFAULT_DRIVER,
    },
}


class AntDb:
    """
    Beginner-friendly wrapper owning zero or one driver connection.

    Args:
        - config (dict): Connection fields ('host', 'user', 'pass', 'name',
                         'port') and an 'options' dict ('autoconnect',
                         'fetch_style', 'driver'). Missing keys take the
                         values of `DEFAULT_CONFIG`.
        - connection: An existing DB-API connection to adopt instead of
                      opening one. Adopted connections are never closed by
                      the wrapper.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, connection=None):
        self._connection = None
        self._owned = False
        self._errors = ErrorLog()

        config = dict(config or {})
        options = {**DEFAULT_CONFIG["options"], **(config.pop("options", None) or {})}
        self.config: Dict[str, Any] = {**DEFAULT_CONFIG, **config, "options": options}
        self.config["options"]["fetch_style"] = FetchStyle(options["fetch_style"])

        if connection is not None:
            self.connect(connection)
        elif self.get_option("autoconnect"):
            self.connect()

    # --- Error log ---

    def has_error(self) -> bool:
        return self._errors.has_errors()

    def get_last_error(self) -> Optional[str]:
        """Removes and returns the most recent error, or None."""
        return self._errors.pop()

    def get_errors(self) -> list:
        return self._errors.all()

    # --- Connection ---

    def connect(self, connection=None):
        """
        Opens (or adopts) the connection.

        Workflow:
        1.  If already connected, returns the current handle unchanged.
        2.  If `connection` is given, adopts it as-is.
        3.  Otherwise opens a new one through the configured driver connector.

        Returns:
            - The connection handle, or False if it could not be opened (the
              reason is in the error log).
        """
        if self.is_connected():
            return self._connection

        if connection is not None:
            self._connection = connection
            self._owned = False
            log.debug("Adopted existing connection.", type=type(connection).__name__)
            return self._connection

        try:
            connector = get_connector(self.get_option("driver"))
        except ValueError as e:
            self._errors.add(str(e))
            return False

        try:
            self._connection = connector.connect(self.config)
        except connector.error_class() as e:
            code, message = connector.error_details(e)
            self._errors.add(
                message,
                code,
                config=mask_sensitive_data({k: v for k, v in self.config.items() if k != "options"}),
            )
            return False

        self._owned = True
        return self._connection

    def disconnect(self):
        """Drops the connection, closing it if this wrapper opened it. Never raises."""
        connection, owned = self._connection, self._owned
        self._connection = None
        self._owned = False
        if connection is None or not owned:
            return
        try:
            connection.close()
            log.info("Database connection closed.")
        except Exception as e:
            log.warning("Failed to close database connection.", error=str(e))

    def is_connected(self) -> bool:
        return self._connection is not None

    def get_connection(self):
        return self._connection

    def __enter__(self) -> "AntDb":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.disconnect()

    def __del__(self):
        # __init__ may have failed before the attributes existed.
        if hasattr(self, "_connection"):
            self.disconnect()

    # --- Options ---

    def get_option(self, name: str):
        return self.config["options"].get(name)

    def set_fetch_mode(self, mode) -> "AntDb":
        """
        Changes the row shape used by later `read` calls.

        Args:
            - mode (FetchStyle | str): e.g. `FetchStyle.ASSOC` or "assoc".

        Raises:
            - ValueError: If `mode` is not a known fetch style.
        """
        self.config["options"]["fetch_style"] = FetchStyle(mode)
        return self

    # --- Statement helpers ---

    def insert(
        self,
        table: str,
        data: Mapping[str, Any],
        types: Optional[Mapping[str, ParamType]] = None,
    ):
        """
        Inserts one row.

            db.insert("users", {"username": "joe", "password": "secret"},
                      {"username": ParamType.STR, "password": ParamType.STR})

        Returns:
            - Number of affected rows, or False on failure.
        """
        return self._write_statement(
            build_insert, table, data, types=types, placeholder=self._placeholder()
        )

    def update(
        self,
        table: str,
        data: Mapping[str, Any],
        where: Mapping[str, Any],
        types: Optional[Mapping[str, ParamType]] = None,
    ):
        """
        Updates the rows matching every `where` column.

            db.update("users", {"password": "secret"}, {"id": 1},
                      {"password": ParamType.STR, "id": ParamType.INT})

        `types` covers the columns of both `data` and `where`.

        Returns:
            - Number of affected rows, or False on failure.
        """
        return self._write_statement(
            build_update, table, data, where, types=types, placeholder=self._placeholder()
        )

    def delete(
        self,
        table: str,
        where: Mapping[str, Any],
        types: Optional[Mapping[str, ParamType]] = None,
    ):
        """Deletes the rows matching every `where` column. Returns the row count or False."""
        return self._write_statement(
            build_delete, table, where, types=types, placeholder=self._placeholder()
        )

    def fetch_assoc(self, sql: str, params: Sequence[Any] = ()):
        """Returns the first row as a column -> value dict, or False."""
        return self._fetch_first(sql, params, FetchStyle.ASSOC)

    def fetch_array(self, sql: str, params: Sequence[Any] = ()):
        """Returns the first row as a positional list, or False."""
        return self._fetch_first(sql, params, FetchStyle.NUM)

    def read(self, sql: str, params: Sequence[Any] = (), types: TypeHints = None):
        """
        Runs a statement that returns rows.

        Returns:
            - A `ResultSet` shaped by the current fetch style, or False on failure.
        """
        return self._exec_read(sql, params, types)

    def write(self, sql: str, params: Sequence[Any] = (), types: TypeHints = None):
        """
        Runs a statement that does not return rows.

        Returns:
            - Number of affected rows, or False on failure.
        """
        return self._exec_write(sql, params, types)

    # --- Execution ---

    def _connector(self) -> DatabaseConnector:
        connector = connector_for(self._connection)
        if connector is not None:
            return connector
        try:
            return get_connector(self.get_option("driver"))
        except ValueError:
            return get_connector(DEFAULT_DRIVER)

    def _placeholder(self) -> str:
        return self._connector().placeholder

    def _write_statement(self, builder, *args, **kwargs):
        try:
            statement: Statement = builder(*args, **kwargs)
        except ValueError as e:
            self._errors.add(str(e))
            return False
        return self._exec_write(statement.sql, statement.params, statement.types)

    def _fetch_first(self, sql: str, params: Sequence[Any], style: FetchStyle):
        result = self._exec_read(sql, params)
        if result is False:
            return False
        try:
            return result.fetch(style)
        finally:
            result.close()

    def _bind(self, sql: str, params: Sequence[Any], types: TypeHints):
        try:
            return bind_params(params, types)
        except (TypeError, ValueError) as e:
            self._errors.add(f"Cannot bind parameters: {e}", sql=sql)
            return None

    def _execute(self, sql: str, params):
        """
        Runs `sql` on a new cursor and returns it, or False on a driver error.

        `params=None` executes the SQL directly, without a parameter argument.
        Drivers raise plain OverflowError / TypeError / ValueError for values
        they cannot bind; those are recorded like driver errors.
        """
        connector = self._connector()
        cursor = None
        try:
            cursor = self._connection.cursor()
            if params is None:
                cursor.execute(sql)
            else:
                cursor.execute(sql, params)
            return cursor
        except (
            connector.error_class(self._connection),
            OverflowError,
            TypeError,
            ValueError,
        ) as e:
            if cursor is not None:
                cursor.close()
            code, message = connector.error_details(e)
            self._errors.add(message, code, sql=sql)
            return False

    def _exec_read(self, sql: str, params: Sequence[Any] = (), types: TypeHints = None):
        if not self.is_connected():
            self._errors.add(NO_CONNECTION_MESSAGE, sql=sql)
            return False

        bound = self._bind(sql, params, types)
        if bound is None:
            return False

        cursor = self._execute(sql, bound)
        if cursor is False:
            return False
        return ResultSet(cursor, self.get_option("fetch_style"))

    def _exec_write(self, sql: str, params: Sequence[Any] = (), types: TypeHints = None):
        if not self.is_connected():
            self._errors.add(NO_CONNECTION_MESSAGE, sql=sql)
            return False

        bound = None
        if params:
            bound = self._bind(sql, params, types)
            if bound is None:
                return False

        cursor = self._execute(sql, bound)
        if cursor is False:
            return False
        try:
            # DB-API reports -1 when the statement has no row count (DDL).
            return max(cursor.rowcount, 0)
        finally:
            cursor.close()
