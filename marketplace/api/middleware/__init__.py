"""
Middleware
Request logging and latency tracking.
"""

from .logging import RequestLoggingMiddleware
from .timing import LatencyTracker, RequestTimingMiddleware

__all__ = [
    "LatencyTracker",
    "RequestLoggingMiddleware",
    "RequestTimingMiddleware",
]
