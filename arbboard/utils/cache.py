"""In-memory caching utilities for provider responses."""

import time
from typing import Any, TypeVar, Generic
from dataclasses import dataclass, field

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """Single cache entry with the monotonic time it was stored."""
    value: T
    stored_at: float = field(default_factory=time.monotonic)

    def is_expired(self, max_age_seconds: float) -> bool:
        """Check if entry is expired."""
        return time.monotonic() - self.stored_at > max_age_seconds


class InMemoryCache:
    """Simple in-memory cache with TTL support."""

    def __init__(self, default_ttl_seconds: float = 30.0):
        self._cache: dict[str, CacheEntry] = {}
        self._default_ttl = default_ttl_seconds

    def get(self, key: str, max_age_seconds: float | None = None) -> Any | None:
        """Get value from cache if not expired."""
        entry = self._cache.get(key)
        if entry is None:
            return None

        ttl = max_age_seconds if max_age_seconds is not None else self._default_ttl
        if entry.is_expired(ttl):
            del self._cache[key]
            return None

        return entry.value

    def set(self, key: str, value: Any) -> None:
        """Set value in cache."""
        self._cache[key] = CacheEntry(value=value)

    def clear(self) -> None:
        """Clear all cache entries."""
        self._cache.clear()

    def size(self) -> int:
        """Return number of entries in cache."""
        return len(self._cache)


# Shared cache for provider HTTP responses
response_cache = InMemoryCache()
