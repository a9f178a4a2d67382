# main.py
"""
Command-line interface for running ad-hoc statements through AntDb.
Connection settings come from the ANTDB_* environment variables.
"""

import argparse
import sys

import structlog

from antdb.antdb import AntDb
from antdb.results import FetchStyle
from config import get_db_config_from_env, setup_logging

log = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run SQL statements through AntDb.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--fetch-style",
        choices=[style.value for style in FetchStyle],
        default=FetchStyle.ASSOC.value,
        help="Row shape printed by 'read'.",
    )
    subparsers = parser.add_subparsers(
        dest="command", required=True, help="Available commands"
    )

    # --- 'read' command ---
    parser_read = subparsers.add_parser(
        "read", help="Run a query and print one row per line."
    )
    parser_read.add_argument("sql", help="SQL query with positional placeholders.")
    parser_read.add_argument("params", nargs="*", help="Values bound to the placeholders.")

    # --- 'write' command ---
    parser_write = subparsers.add_parser(
        "write", help="Run a statement and print the affected-row count."
    )
    parser_write.add_argument("sql", help="SQL statement with positional placeholders.")
    parser_write.add_argument("params", nargs="*", help="Values bound to the placeholders.")
    return parser


def main(argv=None) -> int:
    """Parses command-line arguments and executes the requested statement."""
    args = build_parser().parse_args(argv)
    config = get_db_config_from_env()

    with AntDb(config) as db:
        if not db.is_connected():
            for error in db.get_errors():
                log.error("Could not connect.", error=error)
            return 1

        db.set_fetch_mode(args.fetch_style)
        if args.command == "read":
            result = db.read(args.sql, args.params)
            if result is not False:
                for row in result:
                    print(vars(row) if args.fetch_style == FetchStyle.OBJ.value else row)
                result.close()
        else:
            result = db.write(args.sql, args.params)
            if result is not False:
                print(result)

        if result is False:
            for error in db.get_errors():
                log.error("Statement failed.", error=error)
            return 1
    return 0


def run():
    # Initialize logging as the very first step
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
