# antdb/base_connector.py
"""
Defines the abstract base class for all driver connectors.

This module provides the `DatabaseConnector` Abstract Base Class (ABC).
`AntDb` never talks to a driver module directly: it asks a connector to open
a connection, to tell which placeholder the driver expects, and to turn a
driver exception into a `(code, message)` pair for the error log. Adding a
new database backend means adding a connector, nothing else.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Type

from config import DEFAULT_ERROR_CODE


class DatabaseConnector(ABC):
    """
    Abstract Base Class that defines the interface for driver connectors.

    Any class that inherits from DatabaseConnector MUST implement all methods
    decorated with `@abstractmethod` and set `name` and `placeholder`.
    """

    name: str = ""
    placeholder: str = "?"
    driver_error: Type[Exception] = Exception

    @abstractmethod
    def connect(self, config: Dict[str, Any]):
        """
        Opens a new driver connection from the wrapper configuration.

        Args:
            - config (Dict[str, Any]): The merged wrapper config
                                       ('host', 'user', 'pass', 'name', 'port').

        Returns:
            - A DB-API 2.0 connection object.

        Raises:
            - The driver's own exception when the connection cannot be opened.
        """
        pass

    @abstractmethod
    def owns(self, connection) -> bool:
        """Returns True when `connection` was produced by this connector's driver."""
        pass

    def error_class(self, connection=None) -> Type[Exception]:
        """
        Returns the exception base to catch around driver calls.

        DB-API drivers may expose their `Error` class on the connection object;
        that one wins so that adopted connections are handled correctly.
        """
        error = getattr(connection, "Error", None)
        if isinstance(error, type) and issubclass(error, Exception):
            return error
        return self.driver_error

    def error_details(self, exc: Exception) -> Tuple[Any, str]:
        """
        Extracts the driver error code and message from an exception.

        The default handles drivers that raise `Error(code, message)`. Anything
        else is reported with `DEFAULT_ERROR_CODE` and the exception text.
        """
        args = getattr(exc, "args", ())
        if len(args) >= 2 and isinstance(args[0], int):
            return args[0], str(args[1])
        return DEFAULT_ERROR_CODE, str(exc)


_REGISTRY: Dict[str, DatabaseConnector] = {}


def register_connector(connector: DatabaseConnector) -> DatabaseConnector:
    """Adds a connector instance to the registry under its `name`."""
    _REGISTRY[connector.name] = connector
    return connector


def get_connector(name: str) -> DatabaseConnector:
    """
    Looks up a registered connector by name.

    Raises:
        - ValueError: If no connector is registered under `name`.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown database driver '{name}'. Available: {sorted(_REGISTRY)}"
        ) from None


def connector_for(connection) -> Optional[DatabaseConnector]:
    """Returns the registered connector whose driver produced `connection`, if any."""
    for connector in _REGISTRY.values():
        if connector.owns(connection):
            return connector
    return None
