"""Time-expiring cache for a single fetched resource."""

import time
from typing import Any, Awaitable, Callable, Optional

from quectodom.shared import DEFAULT_CACHE_TTL_MS, CacheConfig, get_logger

from .fetch import request_json

Fetcher = Callable[[str, str], Awaitable[Any]]
Clock = Callable[[], float]


def _now_ms() -> float:
    return time.time() * 1000.0


class CachedFile:
    """Fetch a resource and cache it for a given period.

    ``get()`` returns the cached value until it is older than ``ttl_ms``, then
    fetches again.  Concurrent ``get()`` calls on an expired cache each fetch
    independently; there is no single-flight de-duplication.  A failed fetch
    propagates its error and leaves the previous value and expiry in place.

    Args:
        method: HTTP method used for the fetch
        uri: Resource URI
        ttl_ms: Cache lifetime in milliseconds (default one day)
        fetcher: Coroutine function ``(method, uri) -> value``; defaults to
            :func:`~quectodom.net.fetch.request_json`
        clock: Returns the current time in milliseconds
    """

    def __init__(
        self,
        method: str,
        uri: str,
        ttl_ms: int = DEFAULT_CACHE_TTL_MS,
        *,
        fetcher: Optional[Fetcher] = None,
        clock: Optional[Clock] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.config = CacheConfig(ttl_ms=ttl_ms)
        self._method = method
        self._uri = uri
        self._fetcher = fetcher or request_json
        self._clock = clock or _now_ms
        self._expiry: Optional[float] = None
        self._data: Any = None
        self.logger = get_logger(__name__, correlation_id, "cached_file").bind(
            uri=uri
        )

    @classmethod
    def from_config(
        cls, method: str, uri: str, config: CacheConfig, **kwargs: Any
    ) -> "CachedFile":
        return cls(method, uri, config.ttl_ms, **kwargs)

    @property
    def expiry(self) -> Optional[float]:
        """Time (ms) after which the cached value is stale; None before the first fetch."""
        return self._expiry

    @property
    def is_stale(self) -> bool:
        return self._expiry is None or self._expiry < self._clock()

    def invalidate(self) -> None:
        """Force the next :meth:`get` to fetch, keeping the current value until then."""
        self._expiry = None

    async def get(self, force: bool = False) -> Any:
        if force or self.is_stale:
            self.logger.debug("Refreshing cached resource", extra={"forced": force})
            data = await self._fetcher(self._method, self._uri)
            self._data = data
            self._expiry = self._clock() + self.config.ttl_ms
        else:
            self.logger.debug("Serving cached resource")
        return self._data
