"""
Time port.

All dates written by the actions are derived from UTC "now".
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...
