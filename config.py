# config.py
"""
Centralized configuration management, project-wide constants, and logging setup.

This module acts as the single source of truth for the wrapper's defaults,
preventing the use of "magic strings" or numbers throughout the library.
It also provides the logging setup used by the command-line entry point so
that every module emits consistent, structured logs.
"""

import logging
import os
import sys
from typing import Dict, Any

import structlog

# --- Project Constants ---

# --- Error Log ---
# Code recorded when a failure does not carry a driver-supplied error code.
DEFAULT_ERROR_CODE = 999
# Message recorded when a query is attempted without an open connection.
NO_CONNECTION_MESSAGE = "No connection to database is open."

# --- Drivers ---
DEFAULT_DRIVER = "mysql"  # Name of the connector used when none is configured.
MYSQL_CHARSET = "utf8mb4"  # Equivalent of `SET NAMES utf8` on every new session.

# Environment variables read by `get_db_config_from_env`, keyed by config field.
ENV_VARS: Dict[str, str] = {
    "host": "ANTDB_HOST",
    "user": "ANTDB_USER",
    "pass": "ANTDB_PASS",
    "name": "ANTDB_NAME",
    "port": "ANTDB_PORT",
    "driver": "ANTDB_DRIVER",
}


# --- Logging Setup ---


def setup_logging(level: int = logging.INFO):
    """
    Configures structlog for rich, context-aware, and structured logging.

    Workflow:
    1.  Sets up Python's standard logging module as the base.
    2.  Configures structlog to wrap this base logger.
    3.  Defines a chain of "processors" that enrich and format log records before output.
    4.  The final processor (`ConsoleRenderer`) formats the log record into a
        human-readable, colorized line.

    Library code never calls this; it is the application's job.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,  # stdout is reserved for query output in the CLI.
    )

    structlog.configure(
        processors=[
            # Merges context from `structlog.contextvars` into the event dict.
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            # `fmt="iso"` gives `YYYY-MM-DDTHH:MM:SS`.
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            # For production, this could be swapped with `structlog.processors.JSONRenderer()`.
            structlog.dev.ConsoleRenderer(colors=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# --- Connection Configuration ---


def get_db_config_from_env() -> Dict[str, Any]:
    """
    Loads the wrapper configuration from environment variables.

    Workflow:
    1.  Reads every variable listed in `ENV_VARS`.
    2.  Checks that the database name is present; it is the only required one.
    3.  If it is missing, terminates the application.
    4.  Otherwise returns a config dict ready for `AntDb(config)`.

    Expected Input:
    - Environment variables:
        - ANTDB_NAME: Database name (file path for the sqlite driver). Required.
        - ANTDB_HOST, ANTDB_USER, ANTDB_PASS, ANTDB_PORT: Server credentials.
        - ANTDB_DRIVER: Connector name ("mysql" or "sqlite").

    Returns:
        - A dictionary such as
          {'host': ..., 'user': ..., 'pass': ..., 'name': ..., 'port': 3306,
           'options': {'driver': 'mysql'}}

    Raises:
        - SystemExit: If ANTDB_NAME is not set, or ANTDB_PORT is not a number.
    """
    log = structlog.get_logger("config.env")
    values = {field: os.getenv(var) for field, var in ENV_VARS.items()}

    if not values["name"]:
        log.error(
            "Database config missing from environment",
            missing_keys=[ENV_VARS["name"]],
            error_type="ConfigurationError",
        )
        sys.exit("Error: Required environment variable ANTDB_NAME is not set. Exiting.")

    port = values.pop("port")
    if port:
        try:
            port = int(port)
        except ValueError:
            log.error("Invalid port in environment", port=port)
            sys.exit("Error: ANTDB_PORT must be an integer. Exiting.")

    config: Dict[str, Any] = {
        "host": values["host"],
        "user": values["user"],
        "pass": values["pass"],
        "name": values["name"],
        "port": port or None,
        "options": {"driver": values["driver"] or DEFAULT_DRIVER},
    }

    log.info(
        "Database configuration loaded from environment variables",
        config=mask_sensitive_data(config),
    )
    return config


def mask_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Creates a copy of a dictionary and masks sensitive values for safe logging.

    Any string value whose key contains 'pass', 'token', 'secret' or 'key'
    (case-insensitive) is replaced with '***REDACTED***'. Nested dicts are
    returned as-is.

    Args:
        - data (Dict[str, Any]): The dictionary to process.

    Returns:
        - A new dictionary (Dict[str, Any]) with sensitive values redacted.
    """
    sensitive_keys = ["pass", "token", "secret", "key"]
    safe_data = data.copy()
    for key, value in safe_data.items():
        if any(sens_key in key.lower() for sens_key in sensitive_keys):
            if isinstance(value, str):
                safe_data[key] = "***REDACTED***"
    return safe_data
