#!/usr/bin/env python3
"""
In-process timing and counters for chart and dasha calculations.

Every timed operation keeps call/failure counts and duration extremes;
counters track how many periods and chart points were produced.
"""

import threading
import time

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
from typing import Any

# ============================================================================
# TIMING RECORDS
# ============================================================================


@dataclass
class TimingStats:
    """Duration record for one named operation"""

    calls: int = 0
    failures: int = 0
    total_seconds: float = 0.0
    fastest: float | None = None
    slowest: float = 0.0
    last_seconds: float = 0.0

    def observe(self, seconds: float, failed: bool = False):
        self.calls += 1
        self.total_seconds += seconds
        self.last_seconds = seconds
        self.slowest = max(self.slowest, seconds)
        self.fastest = seconds if self.fastest is None else min(self.fastest, seconds)
        if failed:
            self.failures += 1

    def snapshot(self) -> dict[str, Any]:
        calls = self.calls or 1
        return {
            "calls": self.calls,
            "failures": self.failures,
            "failure_rate": self.failures / calls,
            "total_seconds": self.total_seconds,
            "mean_seconds": self.total_seconds / calls,
            "fastest": self.fastest or 0.0,
            "slowest": self.slowest,
            "last_seconds": self.last_seconds,
        }


# ============================================================================
# COLLECTOR
# ============================================================================


class MetricsCollector:
    """Thread-safe store of timings and counters"""

    def __init__(self):
        self._lock = threading.Lock()
        self._timings: dict[str, TimingStats] = {}
        self._counters: dict[str, int] = {}
        self._started = time.monotonic()

    def observe(self, name: str, seconds: float, failed: bool = False):
        with self._lock:
            self._timings.setdefault(name, TimingStats()).observe(seconds, failed)

    def increment(self, name: str, by: int = 1):
        with self._lock:
            self._counters[name] = self._counters.get(name, 0) + by

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "uptime_seconds": time.monotonic() - self._started,
                "timings": {k: v.snapshot() for k, v in self._timings.items()},
                "counters": dict(self._counters),
            }

    def reset(self):
        with self._lock:
            self._timings.clear()
            self._counters.clear()
            self._started = time.monotonic()


_collector = MetricsCollector()

# ============================================================================
# TIMERS
# ============================================================================


@contextmanager
def timer(name: str) -> Iterator[None]:
    """Time the enclosed block; an escaping exception counts as a failure"""
    start = time.perf_counter()
    failed = False
    try:
        yield
    except Exception:
        failed = True
        raise
    finally:
        _collector.observe(name, time.perf_counter() - start, failed)


def timed(name: str | None = None):
    """Decorator form of timer()

    Usage:
        @timed("dasha.mahadasha")
        def compute_mahadashas(...):
            ...
    """

    def decorator(func: Callable) -> Callable:
        metric_name = name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        def wrapper(*args, **kwargs):
            with timer(metric_name):
                return func(*args, **kwargs)

        return wrapper

    return decorator


# ============================================================================
# PUBLIC API
# ============================================================================


def record_timing(name: str, seconds: float, failed: bool = False):
    _collector.observe(name, seconds, failed)


def increment(name: str, by: int = 1):
    _collector.increment(name, by)


def get_metrics() -> dict[str, Any]:
    """Current timings and counters"""
    return _collector.snapshot()


def reset_metrics():
    _collector.reset()
