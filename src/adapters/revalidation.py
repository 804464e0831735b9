"""
Page-cache revalidation adapters.

Implementations of RevalidationPort. The in-process page cache keeps rendered
bodies per path and drops them when a path is revalidated, so the next read
renders fresh data.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Normalize a path for cache keys."""
    if not path:
        return "/"
    path = path.rstrip("/") or "/"
    if not path.startswith("/"):
        path = "/" + path
    return path


class RevalidationAdapter(ABC):
    """Base class for revalidation adapters."""

    @abstractmethod
    def revalidate_path(self, path: str) -> bool:
        """Revalidate by path."""
        pass


class InMemoryPageCache(RevalidationAdapter):
    """
    Process-local cache of rendered pages keyed by path.

    Sync endpoints run in a thread pool, so access is guarded by a lock.
    Each path carries a generation number that revalidation bumps; a render
    started before a revalidation is not stored.
    """

    def __init__(self) -> None:
        self._pages: dict[str, str] = {}
        self._stale: set[str] = set()
        self._generations: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> str | None:
        """Return the cached body, or None if missing or stale."""
        key = normalize_path(path)
        with self._lock:
            if key in self._stale:
                return None
            return self._pages.get(key)

    def generation(self, path: str) -> int:
        """Current generation of ``path``; read it before rendering."""
        key = normalize_path(path)
        with self._lock:
            return self._generations.get(key, 0)

    def put(self, path: str, body: str, generation: int | None = None) -> bool:
        """
        Store a rendered body.

        With ``generation``, the body is dropped if the path was revalidated
        since that generation was read. Returns whether the body was stored.
        """
        key = normalize_path(path)
        with self._lock:
            if generation is not None and generation != self._generations.get(key, 0):
                logger.debug("Discarded render of %s from generation %d", key, generation)
                return False
            self._pages[key] = body
            self._stale.discard(key)
            return True

    def is_stale(self, path: str) -> bool:
        key = normalize_path(path)
        with self._lock:
            return key in self._stale or key not in self._pages

    def revalidate_path(self, path: str) -> bool:
        key = normalize_path(path)
        with self._lock:
            self._pages.pop(key, None)
            self._stale.add(key)
            self._generations[key] = self._generations.get(key, 0) + 1
        logger.info("Revalidated %s", key)
        return True

    def clear(self) -> None:
        with self._lock:
            self._pages.clear()
            self._stale.clear()
            self._generations.clear()


class StubRevalidationAdapter(RevalidationAdapter):
    """
    Stub adapter for testing.

    Records all revalidation calls without performing actual revalidation.
    """

    def __init__(self) -> None:
        self.revalidated_paths: list[str] = []

    def revalidate_path(self, path: str) -> bool:
        self.revalidated_paths.append(path)
        return True

    def reset(self) -> None:
        self.revalidated_paths = []
