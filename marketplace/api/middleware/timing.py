"""
Request Timing Middleware
Rolling request latency window, reported on ``/health``.
"""

import logging
import time
from collections import deque
from threading import Lock
from typing import Callable, Dict, List, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def nearest_rank(sorted_values: List[float], percentile: int) -> float:
    if not sorted_values:
        return 0.0
    index = min(int(percentile / 100.0 * len(sorted_values)), len(sorted_values) - 1)
    return sorted_values[index]


class LatencyTracker:
    """Latencies (ms) of the most recent ``window_size`` requests, plus a slow-request count."""

    def __init__(self, window_size: int = 1000):
        self.window_size = window_size
        self._samples: deque = deque(maxlen=window_size)
        self._slow = 0
        self._lock = Lock()

    def record(self, latency_ms: float, slow: bool = False) -> None:
        with self._lock:
            self._samples.append(latency_ms)
            if slow:
                self._slow += 1

    def get_stats(self) -> Dict[str, float]:
        """
        Returns:
            Dict with count, slow, p50, p95, p99, mean, min, max over the window
        """
        with self._lock:
            samples = sorted(self._samples)
            slow = self._slow

        count = len(samples)
        return {
            "count": count,
            "slow": slow,
            "p50": nearest_rank(samples, 50),
            "p95": nearest_rank(samples, 95),
            "p99": nearest_rank(samples, 99),
            "mean": sum(samples) / count if count else 0.0,
            "min": samples[0] if samples else 0.0,
            "max": samples[-1] if samples else 0.0,
        }

    def summary(self) -> Dict[str, float]:
        """Rounded figures for status endpoints."""
        stats = self.get_stats()
        return {
            "request_count": stats["count"],
            "slow_request_count": stats["slow"],
            "latency_p50_ms": round(stats["p50"], 2),
            "latency_p95_ms": round(stats["p95"], 2),
            "latency_p99_ms": round(stats["p99"], 2),
        }


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Records every request in a ``LatencyTracker`` and sets ``X-Response-Time``."""

    def __init__(
        self,
        app,
        tracker: Optional[LatencyTracker] = None,
        slow_request_ms: float = 300.0,
    ):
        super().__init__(app)
        self.tracker = tracker or LatencyTracker()
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        slow = duration_ms > self.slow_request_ms
        self.tracker.record(duration_ms, slow=slow)
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

        if slow:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} took {duration_ms:.1f}ms",
                extra={"threshold_ms": self.slow_request_ms},
            )

        return response
