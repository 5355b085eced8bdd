"""
In-memory metrics for the /metrics endpoint (rough p50/p95, cache counters).
Why: quick visibility into hit rate and generator fallbacks without Prometheus.
"""

from collections import deque
from typing import Deque, Dict, List

_MAX_SAMPLES = 1000


def _percentile(values: List[int], p: float) -> int:
    if not values:
        return 0
    idx = max(0, min(len(values) - 1, int(len(values) * p)))
    return sorted(values)[idx]


class _Metrics:
    def __init__(self) -> None:
        self.total_requests = 0
        self.total_errors = 0
        self.cache_hits = 0
        self.cache_misses = 0
        self.fallbacks = 0
        self._latencies: Deque[int] = deque(maxlen=_MAX_SAMPLES)

    def increment_requests(self) -> None:
        self.total_requests += 1

    def increment_errors(self) -> None:
        self.total_errors += 1

    def increment_cache_hits(self) -> None:
        self.cache_hits += 1

    def increment_cache_misses(self) -> None:
        self.cache_misses += 1

    def increment_fallbacks(self) -> None:
        self.fallbacks += 1

    def record_latency(self, ms: int) -> None:
        self._latencies.append(ms)

    def snapshot(self) -> Dict[str, int]:
        lat = list(self._latencies)
        return {
            "total_requests": self.total_requests,
            "total_errors": self.total_errors,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "fallbacks": self.fallbacks,
            "p50_ms": _percentile(lat, 0.50),
            "p95_ms": _percentile(lat, 0.95),
        }


metrics = _Metrics()
