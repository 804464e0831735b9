from datetime import UTC, datetime


class SystemClock:
    """Wall clock, always timezone-aware UTC."""

    def now_utc(self) -> datetime:
        return datetime.now(UTC)
