"""Tests for the time-expiring fetch cache."""

import asyncio
from typing import Any, List, Tuple

import pytest

from quectodom.net import CachedFile
from quectodom.shared import CacheConfig


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeFetcher:
    """Records calls and returns a counter."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []
        self.fail = False

    async def __call__(self, method: str, uri: str) -> Any:
        # Yield so concurrent callers interleave like a real request
        await asyncio.sleep(0)
        if self.fail:
            raise RuntimeError("network down")
        self.calls.append((method, uri))
        return {"fetch": len(self.calls)}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


class TestCachedFile:
    """Test expiry-driven refetching."""

    def test_expiry_scenario(self, clock: FakeClock, fetcher: FakeFetcher) -> None:
        """Test one fetch within the TTL and another after it."""
        cache = CachedFile("GET", "/data.json", 1000, fetcher=fetcher, clock=clock)

        assert asyncio.run(cache.get()) == {"fetch": 1}
        clock.now = 500
        assert asyncio.run(cache.get()) == {"fetch": 1}
        assert len(fetcher.calls) == 1

        clock.now = 1500
        assert asyncio.run(cache.get()) == {"fetch": 2}
        assert fetcher.calls == [("GET", "/data.json"), ("GET", "/data.json")]

    def test_value_still_fresh_at_exact_expiry(
        self, clock: FakeClock, fetcher: FakeFetcher
    ) -> None:
        """Test a value is only stale once the expiry has passed."""
        cache = CachedFile("GET", "/d", 1000, fetcher=fetcher, clock=clock)
        asyncio.run(cache.get())
        clock.now = 1000
        asyncio.run(cache.get())
        assert len(fetcher.calls) == 1
        assert cache.expiry == 1000

    def test_force_refetches(self, clock: FakeClock, fetcher: FakeFetcher) -> None:
        """Test force bypasses a fresh value."""
        cache = CachedFile("GET", "/d", 1000, fetcher=fetcher, clock=clock)
        asyncio.run(cache.get())
        assert asyncio.run(cache.get(force=True)) == {"fetch": 2}

    def test_invalidate(self, clock: FakeClock, fetcher: FakeFetcher) -> None:
        """Test invalidate makes the next get fetch."""
        cache = CachedFile("GET", "/d", 1000, fetcher=fetcher, clock=clock)
        asyncio.run(cache.get())
        cache.invalidate()
        assert cache.is_stale
        assert asyncio.run(cache.get()) == {"fetch": 2}

    def test_failed_refresh_keeps_previous_value(
        self, clock: FakeClock, fetcher: FakeFetcher
    ) -> None:
        """Test an error propagates and the old value and expiry survive."""
        cache = CachedFile("GET", "/d", 1000, fetcher=fetcher, clock=clock)
        asyncio.run(cache.get())
        fetcher.fail = True

        with pytest.raises(RuntimeError, match="network down"):
            asyncio.run(cache.get(force=True))

        assert cache.expiry == 1000
        fetcher.fail = False
        assert asyncio.run(cache.get()) == {"fetch": 1}

    def test_concurrent_gets_both_fetch(
        self, clock: FakeClock, fetcher: FakeFetcher
    ) -> None:
        """Test there is no single-flight de-duplication."""
        cache = CachedFile("GET", "/d", 1000, fetcher=fetcher, clock=clock)

        async def two_gets() -> None:
            await asyncio.gather(cache.get(), cache.get())

        asyncio.run(two_gets())
        assert len(fetcher.calls) == 2

    def test_default_ttl_is_one_day(self, clock: FakeClock, fetcher: FakeFetcher) -> None:
        """Test the default lifetime is 86 400 000 ms."""
        cache = CachedFile("GET", "/d", fetcher=fetcher, clock=clock)
        asyncio.run(cache.get())
        assert cache.expiry == 86_400_000
        assert cache.config.ttl_ms == 86_400_000

    def test_from_config(self, clock: FakeClock, fetcher: FakeFetcher) -> None:
        """Test construction from a CacheConfig."""
        cache = CachedFile.from_config(
            "GET", "/d", CacheConfig(ttl_ms=10), fetcher=fetcher, clock=clock
        )
        asyncio.run(cache.get())
        assert cache.expiry == 10
        assert cache.config == CacheConfig(ttl_ms=10)

    def test_negative_ttl_rejected(self) -> None:
        """Test a negative lifetime is invalid."""
        with pytest.raises(ValueError, match="ttl_ms"):
            CachedFile("GET", "/d", -1)
