"""
Edge cache for idempotent GET responses.

Only response bodies and status codes are stored; headers are rebuilt on
every hit. Entries expire after a TTL and are never invalidated explicitly,
so a cached body may lag behind the store for up to one TTL.
"""

from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional
import logging
import re
import time

from core.config import settings
from core.exceptions import CacheError

logger = logging.getLogger(__name__)


# Route shapes whose GET responses may be served from the cache
CACHEABLE_PATHS = tuple(
    re.compile(pattern)
    for pattern in (
        r"^/elements$",
        r"^/elements/\d+$",
        r"^/elements/symbol/[A-Za-z]{1,3}$",
        r"^/elements/name/[A-Za-z]+$",
        r"^/elements/categories$",
        r"^/elements/liquid$",
        r"^/elements/gas$",
    )
)


def is_cacheable(method: str, path: str) -> bool:
    """True when a request may be answered from, and stored in, the cache"""
    if method.upper() != "GET":
        return False
    return any(pattern.match(path) for pattern in CACHEABLE_PATHS)


def cache_key(method: str, url: str) -> str:
    """Method plus the full URL; query strings produce distinct entries"""
    return f"{method.upper()} {url}"


@dataclass(frozen=True)
class CachedResponse:
    """A stored response body. Headers are deliberately absent."""
    body: bytes
    status_code: int
    expires_at: float


class ResponseCache(ABC):
    """Keyed store of previously computed responses."""

    @abstractmethod
    async def get(self, key: str) -> Optional[CachedResponse]:
        """Return a live entry or None"""

    @abstractmethod
    async def set(self, key: str, body: bytes, status_code: int = 200, ttl_seconds: Optional[int] = None) -> None:
        """Store a response body under key"""

    @abstractmethod
    async def clear(self) -> None:
        """Drop every entry"""


class InMemoryResponseCache(ResponseCache):
    """
    Process-local TTL cache.

    Each worker process holds its own copy. Beyond `max_entries` the
    oldest insertion is evicted. All operations are synchronous dict
    updates, so concurrent coroutines cannot interleave inside them.
    """

    def __init__(
        self,
        ttl_seconds: int = 3600,
        max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic
    ):
        if ttl_seconds <= 0:
            raise CacheError("ttl_seconds must be positive", context={"ttl_seconds": ttl_seconds})
        if max_entries <= 0:
            raise CacheError("max_entries must be positive", context={"max_entries": max_entries})
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[str, CachedResponse]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> Optional[CachedResponse]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            del self._entries[key]
            return None
        return entry

    async def set(self, key: str, body: bytes, status_code: int = 200, ttl_seconds: Optional[int] = None) -> None:
        ttl = ttl_seconds if ttl_seconds is not None else self.ttl_seconds
        self._entries.pop(key, None)
        self._entries[key] = CachedResponse(
            body=body,
            status_code=status_code,
            expires_at=self._clock() + ttl
        )
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted cache entry {evicted}")

    async def clear(self) -> None:
        self._entries.clear()


async def store_response(cache: ResponseCache, key: str, body: bytes, status_code: int = 200) -> None:
    """
    Background cache write.

    Runs after the response has been sent. A failure here never affects the
    caller: it is logged and the entry is simply not stored.
    """
    try:
        await cache.set(key, body, status_code)
        logger.debug(f"Cached response for {key}")
    except Exception as e:
        logger.warning(f"Cache write failed for {key}: {e}")


def build_response_cache() -> Optional[ResponseCache]:
    """Cache configured from settings, or None when caching is disabled"""
    if not settings.CACHE_ENABLED:
        logger.info("Edge cache disabled")
        return None
    return InMemoryResponseCache(
        ttl_seconds=settings.CACHE_TTL_SECONDS,
        max_entries=settings.CACHE_MAX_ENTRIES
    )
