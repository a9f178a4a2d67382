# antdb/statements.py
"""
SQL builders for the INSERT, UPDATE and DELETE helpers.

Each builder turns a column -> value mapping into a statement with
positional placeholders and the matching, ordered parameter tuple. Columns
appear in the mapping's iteration order so that parameter positions line
up with placeholders. Table and column names are interpolated as-is.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from antdb.params import ParamType


@dataclass
class Statement:
    """A built SQL string with its positional parameters and type hints."""

    sql: str
    params: Tuple[Any, ...] = ()
    types: List[Optional[ParamType]] = field(default_factory=list)


def _positional_types(
    columns: List[str], types: Optional[Mapping[str, ParamType]]
) -> List[Optional[ParamType]]:
    # Hints are keyed by column name; the executor needs them by position.
    if not types:
        return []
    return [types.get(column) for column in columns]


def _conditions(where: Mapping[str, Any], placeholder: str) -> str:
    return " AND ".join(f"{column} = {placeholder}" for column in where)


def build_insert(
    table: str,
    data: Mapping[str, Any],
    types: Optional[Mapping[str, ParamType]] = None,
    placeholder: str = "?",
) -> Statement:
    """
    Builds `INSERT INTO table (a, b) VALUES (?, ?)`.

    Raises:
        - ValueError: If `data` is empty.
    """
    if not data:
        raise ValueError(f"Cannot insert into {table}: no column values given.")
    columns = list(data)
    sql = "INSERT INTO {} ({}) VALUES ({})".format(
        table, ", ".join(columns), ", ".join([placeholder] * len(columns))
    )
    return Statement(sql, tuple(data.values()), _positional_types(columns, types))


def build_update(
    table: str,
    data: Mapping[str, Any],
    where: Mapping[str, Any],
    types: Optional[Mapping[str, ParamType]] = None,
    placeholder: str = "?",
) -> Statement:
    """
    Builds `UPDATE table SET a = ?, b = ? WHERE c = ? AND d = ?`.

    Parameters are the `data` values followed by the `where` values. `types`
    covers both mappings; a column present in both gets the same hint twice.

    Raises:
        - ValueError: If `data` or `where` is empty.
    """
    if not data:
        raise ValueError(f"Cannot update {table}: no column values given.")
    if not where:
        raise ValueError(f"Cannot update {table}: no WHERE conditions given.")
    assignments = ", ".join(f"{column} = {placeholder}" for column in data)
    sql = f"UPDATE {table} SET {assignments} WHERE {_conditions(where, placeholder)}"
    params = tuple(data.values()) + tuple(where.values())
    return Statement(sql, params, _positional_types(list(data) + list(where), types))


def build_delete(
    table: str,
    where: Mapping[str, Any],
    types: Optional[Mapping[str, ParamType]] = None,
    placeholder: str = "?",
) -> Statement:
    """
    Builds `DELETE FROM table WHERE c = ? AND d = ?`.

    Raises:
        - ValueError: If `where` is empty, which would otherwise wipe the table.
    """
    if not where:
        raise ValueError(f"Cannot delete from {table}: no WHERE conditions given.")
    sql = f"DELETE FROM {table} WHERE {_conditions(where, placeholder)}"
    return Statement(sql, tuple(where.values()), _positional_types(list(where), types))
