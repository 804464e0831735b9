"""
Page cache revalidation.
"""

import pytest

from src.adapters.revalidation import (
    InMemoryPageCache,
    StubRevalidationAdapter,
    normalize_path,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/dashboard/invoices", "/dashboard/invoices"),
        ("/dashboard/invoices/", "/dashboard/invoices"),
        ("dashboard/invoices", "/dashboard/invoices"),
        ("", "/"),
        ("/", "/"),
    ],
)
def test_normalize_path(raw: str, expected: str) -> None:
    assert normalize_path(raw) == expected


class TestInMemoryPageCache:
    def test_put_then_get(self) -> None:
        cache = InMemoryPageCache()
        cache.put("/dashboard/invoices", "body")

        assert cache.get("/dashboard/invoices") == "body"
        assert cache.get("/dashboard/invoices/") == "body"
        assert not cache.is_stale("/dashboard/invoices")

    def test_missing_path_is_stale(self) -> None:
        cache = InMemoryPageCache()
        assert cache.get("/dashboard") is None
        assert cache.is_stale("/dashboard")

    def test_revalidate_drops_entry(self) -> None:
        cache = InMemoryPageCache()
        cache.put("/dashboard/invoices", "old")

        assert cache.revalidate_path("/dashboard/invoices") is True
        assert cache.get("/dashboard/invoices") is None
        assert cache.is_stale("/dashboard/invoices")

        cache.put("/dashboard/invoices", "new")
        assert cache.get("/dashboard/invoices") == "new"

    def test_revalidate_only_touches_its_path(self) -> None:
        cache = InMemoryPageCache()
        cache.put("/dashboard", "home")
        cache.put("/dashboard/invoices", "list")

        cache.revalidate_path("/dashboard/invoices")

        assert cache.get("/dashboard") == "home"

    def test_revalidate_unknown_path_succeeds(self) -> None:
        assert InMemoryPageCache().revalidate_path("/never/rendered") is True

    def test_put_with_current_generation_is_stored(self) -> None:
        cache = InMemoryPageCache()
        cache.revalidate_path("/dashboard/invoices")
        generation = cache.generation("/dashboard/invoices")

        assert cache.put("/dashboard/invoices", "fresh", generation) is True
        assert cache.get("/dashboard/invoices") == "fresh"

    def test_render_overtaken_by_revalidation_is_discarded(self) -> None:
        cache = InMemoryPageCache()
        generation = cache.generation("/dashboard/invoices")

        # A mutation commits while the page is being rendered.
        cache.revalidate_path("/dashboard/invoices")

        assert cache.put("/dashboard/invoices", "old rows", generation) is False
        assert cache.get("/dashboard/invoices") is None
        assert cache.is_stale("/dashboard/invoices")

    def test_generation_is_per_path(self) -> None:
        cache = InMemoryPageCache()
        generation = cache.generation("/dashboard")
        cache.revalidate_path("/dashboard/invoices")

        assert cache.put("/dashboard", "home", generation) is True

    def test_clear(self) -> None:
        cache = InMemoryPageCache()
        cache.put("/a", "x")
        cache.clear()
        assert cache.get("/a") is None


def test_stub_records_and_resets() -> None:
    stub = StubRevalidationAdapter()
    stub.revalidate_path("/dashboard/invoices")
    assert stub.revalidated_paths == ["/dashboard/invoices"]

    stub.reset()
    assert stub.revalidated_paths == []
