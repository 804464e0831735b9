"""
SQLite persistence gateway.

Implements SqlGatewayPort on top of sqlite3. Statements use ``?`` placeholders
and values are always bound, never interpolated into the statement text.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence
from typing import Any

from src.core.ports.db import PersistenceError

logger = logging.getLogger(__name__)


def dict_factory(cursor: sqlite3.Cursor, row: tuple[Any, ...]) -> dict[str, Any]:
    """Convert SQLite row to dictionary."""
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


class SQLiteGateway:
    """One connection per statement unless an external connection is supplied."""

    def __init__(self, db_path: str, connection: sqlite3.Connection | None = None):
        self.db_path = db_path
        self._external_conn = connection

    def _get_conn(self) -> sqlite3.Connection:
        """Get database connection (uses external if provided)."""
        if self._external_conn is not None:
            return self._external_conn

        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def _should_close(self) -> bool:
        """Whether to close connection after use."""
        return self._external_conn is None

    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot open database {self.db_path}: {e}") from e

        try:
            cursor = conn.execute(statement, tuple(params))
            conn.commit()
            logger.debug("Statement affected %d row(s)", cursor.rowcount)
            return cursor.rowcount
        except sqlite3.Error as e:
            conn.rollback()
            raise PersistenceError(str(e)) from e
        finally:
            if self._should_close():
                conn.close()

    def fetch_one(self, statement: str, params: Sequence[Any] = ()) -> dict[str, Any] | None:
        """Run a query and return its first row, or None."""
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot open database {self.db_path}: {e}") from e

        try:
            row: dict[str, Any] | None = conn.execute(statement, tuple(params)).fetchone()
            return row
        except sqlite3.Error as e:
            raise PersistenceError(str(e)) from e
        finally:
            if self._should_close():
                conn.close()

    def fetch_all(self, statement: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """Run a query and return every row."""
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot open database {self.db_path}: {e}") from e

        try:
            rows: list[dict[str, Any]] = conn.execute(statement, tuple(params)).fetchall()
            return rows
        except sqlite3.Error as e:
            raise PersistenceError(str(e)) from e
        finally:
            if self._should_close():
                conn.close()
