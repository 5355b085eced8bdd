"""
In-memory TTL cache for generated horoscope payloads.
Why: identical readings inside the TTL window must not hit the generator twice.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry:
    payload: Any
    expires_at: float


def cache_key(kind: str, *parts: Optional[str]) -> str:
    """Build a key like ``daily:leo:today:en``; ``None`` parts become ``-``."""
    return ":".join([kind, *(p if p else "-" for p in parts)])


class ResponseCache:
    """Lazy-expiry store; expired entries stay until overwritten."""

    def __init__(self, clock: Clock = time.time) -> None:
        self._clock = clock
        self._data: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[CacheEntry]:
        entry = self._data.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            return None
        return entry

    def put(self, key: str, payload: Any, ttl_seconds: float) -> CacheEntry:
        entry = CacheEntry(payload=payload, expires_at=self._clock() + ttl_seconds)
        self._data[key] = entry
        return entry

    def __len__(self) -> int:
        return len(self._data)
