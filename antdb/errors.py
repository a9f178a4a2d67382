# antdb/errors.py
"""Append-only log of failed operations."""

from typing import Any, List, Optional

import structlog

from config import DEFAULT_ERROR_CODE

log = structlog.get_logger(__name__)


class ErrorLog:
    """
    Ordered list of "code : message" records.

    Nothing is ever removed except by `pop()`; there is no deduplication
    and no size cap.
    """

    def __init__(self):
        self._errors: List[str] = []

    def add(self, message: str, code: Any = DEFAULT_ERROR_CODE, **context):
        """Records a failure; `context` (e.g. sql=...) only goes to the log event."""
        self._errors.append(f"{code} : {message}")
        log.error("Database operation failed.", code=code, error=message, **context)

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def all(self) -> List[str]:
        return list(self._errors)

    def pop(self) -> Optional[str]:
        """Removes and returns the most recent record, or None when empty."""
        return self._errors.pop() if self._errors else None

    def __len__(self) -> int:
        return len(self._errors)
