"""
Invoices component port definitions.

The statement gateway and the clock are shared core ports, re-exported here.
"""

from __future__ import annotations

from typing import NoReturn, Protocol

from src.core.ports.db import SqlGatewayPort
from src.core.ports.time import TimePort

__all__ = ["RedirectPort", "RevalidationPort", "SqlGatewayPort", "TimePort"]


class RevalidationPort(Protocol):
    """
    Port for page-cache revalidation.

    Implementations wrap whatever holds rendered pages for a path.
    """

    def revalidate_path(self, path: str) -> bool:
        """Mark cached renderings of ``path`` stale. Returns True if triggered."""
        ...


class RedirectPort(Protocol):
    """Port for ending an action by sending the caller elsewhere."""

    def redirect(self, path: str) -> NoReturn:
        """Transfer control to ``path``. Never returns."""
        ...
