"""Monotonic clock used to time measurement loops."""

import time
from collections.abc import Callable
from typing import Final

Clock = Callable[[], int]
"""A zero-argument callable returning a monotonic timestamp in nanoseconds."""

NANOS_PER_MILLI: Final[float] = 1e6

perf_counter_ns: Final[Clock] = time.perf_counter_ns


def elapsed_ms(start_ns: int, end_ns: int) -> float:
    """Convert a pair of nanosecond timestamps to elapsed milliseconds."""
    return (end_ns - start_ns) / NANOS_PER_MILLI
