"""Unit tests for request logging and timing middleware."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from marketplace.api.middleware import (
    LatencyTracker,
    RequestLoggingMiddleware,
    RequestTimingMiddleware,
)


class TestLatencyTracker:
    def test_empty(self):
        stats = LatencyTracker().get_stats()

        assert stats["count"] == 0
        assert stats["p95"] == 0.0

    def test_percentiles(self):
        tracker = LatencyTracker()
        for value in range(1, 101):
            tracker.record(float(value))

        stats = tracker.get_stats()
        assert stats["count"] == 100
        assert stats["p50"] == 51.0
        assert stats["p99"] == 100.0
        assert stats["min"] == 1.0
        assert stats["mean"] == 50.5

    def test_window(self):
        tracker = LatencyTracker(window_size=2)
        for value in [100.0, 1.0, 2.0]:
            tracker.record(value)

        assert tracker.get_stats()["max"] == 2.0

    def test_summary_counts_slow_requests(self):
        tracker = LatencyTracker()
        tracker.record(12.345)
        tracker.record(900.0, slow=True)

        summary = tracker.summary()
        assert summary["request_count"] == 2
        assert summary["slow_request_count"] == 1
        assert summary["latency_p50_ms"] == 900.0


def test_middleware_headers_and_tracking():
    tracker = LatencyTracker()
    app = FastAPI()
    app.add_middleware(RequestTimingMiddleware, tracker=tracker, slow_request_ms=0)
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ping")
    def ping():
        return {"ok": True}

    client = TestClient(app)
    response = client.get("/ping", headers={"X-Request-ID": "req-1"})

    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == "req-1"
    assert response.headers["X-Response-Time"].endswith("ms")
    assert tracker.get_stats()["count"] == 1
    assert tracker.get_stats()["slow"] == 1
