"""
Database port.

The invoice actions reach the store through a single parameterized-statement
gateway. Implementations: SQLite (src/adapters/sqlite_db.py).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class PersistenceError(Exception):
    """A statement could not be executed by the store."""


class SqlGatewayPort(Protocol):
    """
    Executes one parameterized statement.

    Values are always bound through ``params``; statement text never contains
    caller data.
    """

    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        """Run the statement and return the number of affected rows.

        Raises:
            PersistenceError: If the store rejects or cannot run the statement.
        """
        ...
