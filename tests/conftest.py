from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from src.adapters.navigation import RaisingRedirector
from src.adapters.revalidation import StubRevalidationAdapter
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.core.ports.db import PersistenceError

PROJECT_ROOT = Path(__file__).parent.parent
MIGRATIONS_DIR = PROJECT_ROOT / "migrations"


# --- Port fakes ---


class RecordingGateway:
    """Gateway that records statements instead of running them."""

    def __init__(self, rowcount: int = 1) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.rowcount = rowcount

    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        self.calls.append((statement, tuple(params)))
        return self.rowcount


class FailingGateway:
    """Gateway simulating a store outage."""

    def __init__(self) -> None:
        self.attempts = 0

    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        self.attempts += 1
        raise PersistenceError("connection refused")


class FixedClock:
    def __init__(self, fixed_time: datetime | None = None) -> None:
        self._time = fixed_time or datetime(2024, 6, 15, 23, 30, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        return self._time


# --- Fixtures ---


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture
def failing_gateway() -> FailingGateway:
    return FailingGateway()


@pytest.fixture
def revalidator() -> StubRevalidationAdapter:
    return StubRevalidationAdapter()


@pytest.fixture
def redirector() -> RaisingRedirector:
    return RaisingRedirector()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """Migrated SQLite database in a temp dir."""
    path = str(tmp_path / "dashboard.db")
    SQLiteMigrator(path, str(MIGRATIONS_DIR)).run_migrations()
    return path
