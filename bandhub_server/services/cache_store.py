"""
Cache Store abstraction.

Key/value cache with per-entry TTL for related-video responses. Values are
JSON-compatible dicts. Implementations: in-process (local runs, tests) and Redis.
Callers treat every cache error as a miss.
"""

import json
import time
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

import redis


class CacheStore(Protocol):
    """Protocol for the response cache."""

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None when absent or expired."""
        ...

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        ...

    def delete_by_prefix(self, prefix: str) -> int:
        """Delete every key starting with prefix; return how many were removed."""
        ...


class InMemoryCache:
    """Dict-backed cache; expiry uses a monotonic clock."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        self._entries[key] = (self._clock() + ttl_seconds, value)

    def delete_by_prefix(self, prefix: str) -> int:
        keys = [k for k in self._entries if k.startswith(prefix)]
        for k in keys:
            del self._entries[k]
        return len(keys)

    def __len__(self) -> int:
        return len(self._entries)


class RedisCache:
    """Redis-backed cache. Values are stored as JSON strings with SETEX."""

    SCAN_BATCH = 500

    def __init__(self, url: Optional[str] = None, client: Optional[redis.Redis] = None):
        if client is None:
            if not url:
                raise ValueError("RedisCache needs a url or a client")
            client = redis.from_url(url, decode_responses=True)
        self._client = client

    def get(self, key: str) -> Optional[Any]:
        raw = self._client.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        self._client.setex(key, ttl_seconds, json.dumps(value, separators=(",", ":")))

    def delete_by_prefix(self, prefix: str) -> int:
        deleted = 0
        batch = []
        for key in self._client.scan_iter(match=f"{prefix}*", count=self.SCAN_BATCH):
            batch.append(key)
            if len(batch) >= self.SCAN_BATCH:
                deleted += self._client.delete(*batch)
                batch = []
        if batch:
            deleted += self._client.delete(*batch)
        return deleted

    def is_available(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
