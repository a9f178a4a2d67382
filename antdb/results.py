# antdb/results.py
"""
Result handles returned by `AntDb.read`.

A `ResultSet` wraps a DB-API cursor and shapes each row on the way out:
as an object with attribute access, a column -> value dict, or a plain
positional list. The driver's own row type does not matter; tuples,
`sqlite3.Row` and dict rows are all normalized by column order first.
"""

from enum import Enum
from types import SimpleNamespace
from typing import Any, Iterator, List, Mapping, Optional


class FetchStyle(Enum):
    OBJ = "obj"
    ASSOC = "assoc"
    NUM = "num"


class ResultSet:
    """Iterable view over an executed cursor."""

    def __init__(self, cursor, fetch_style: FetchStyle = FetchStyle.OBJ):
        self.cursor = cursor
        self.fetch_style = fetch_style
        self.columns: List[str] = [col[0] for col in (cursor.description or [])]

    @property
    def rowcount(self) -> int:
        return self.cursor.rowcount

    def set_fetch_mode(self, style: FetchStyle) -> "ResultSet":
        self.fetch_style = style
        return self

    def _values(self, row) -> List[Any]:
        if isinstance(row, Mapping):
            return [row[column] for column in self.columns]
        return list(row)

    def _shape(self, row, style: Optional[FetchStyle]):
        values = self._values(row)
        style = style or self.fetch_style
        if style is FetchStyle.NUM:
            return values
        assoc = dict(zip(self.columns, values))
        if style is FetchStyle.ASSOC:
            return assoc
        return SimpleNamespace(**assoc)

    def fetch(self, style: Optional[FetchStyle] = None):
        """Returns the next row in `style` (default: the set's style), or False when exhausted."""
        row = self.cursor.fetchone()
        if row is None:
            return False
        return self._shape(row, style)

    def fetchall(self, style: Optional[FetchStyle] = None) -> list:
        """Returns all remaining rows."""
        return [self._shape(row, style) for row in self.cursor.fetchall()]

    def __iter__(self) -> Iterator:
        while True:
            row = self.fetch()
            if row is False:
                return
            yield row

    def close(self):
        self.cursor.close()
