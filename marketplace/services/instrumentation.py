"""
Service Instrumentation
Execution-time logging for service methods.
"""

import functools
import logging
import time
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)

# Operations slower than this are logged at WARNING
_slow_operation_ms = 300.0


def configure(slow_operation_ms: float) -> None:
    """Set the slow-operation threshold (milliseconds)."""
    global _slow_operation_ms
    _slow_operation_ms = slow_operation_ms


def log_execution_time(func: F) -> F:
    """
    Log how long the wrapped call took.

    Successful calls are logged at DEBUG, slow ones at WARNING. Exceptions
    are logged with their duration and re-raised unchanged.
    """
    name = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(f"{name} failed after {duration_ms:.2f}ms: {e.__class__.__name__}")
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        if duration_ms > _slow_operation_ms:
            logger.warning(
                "Slow operation detected",
                extra={"operation": name, "duration_ms": duration_ms},
            )
        else:
            logger.debug(f"{name} completed in {duration_ms:.2f}ms")
        return result

    return wrapper
