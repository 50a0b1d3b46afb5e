"""Defines the data models used throughout GraphemeBench."""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol


class GraphemeSegmenter(Protocol):
    """
    The segmentation capability under measurement.

    A single instance lives for the whole process and is passed into every
    benchmark. Whatever it caches internally is shared across all calls and
    is never reset between entries.
    """

    def split_graphemes(self, text: str) -> list[str]: ...

    def count_graphemes(self, text: str) -> int: ...

    def iterate_graphemes(self, text: str) -> Iterator[str]: ...


def ops_per_second(iterations: int, duration_ms: float) -> float:
    """
    Compute throughput from a measured duration.

    Sentinels:
        ``0.0`` when no iterations were measured.
        ``math.inf`` when iterations ran but the clock did not advance.

    """
    if iterations == 0:
        return 0.0
    if duration_ms == 0:
        return math.inf
    return (iterations / duration_ms) * 1000


@dataclass(frozen=True)
class BenchmarkResult:
    """
    The numbers produced by one timed measurement loop.

    Attributes:
        name: The label the result is reported under.
        duration_ms: Wall-clock time of the measured loop, in milliseconds.
        ops_per_sec: Throughput derived from ``duration_ms`` and ``iterations``.
        iterations: Number of measured (not warm-up) calls.

    """

    name: str
    duration_ms: float
    ops_per_sec: float
    iterations: int

    def __post_init__(self) -> None:
        """Validate attributes."""
        if self.iterations < 0:
            msg = f"iterations must be non-negative, got {self.iterations}."
            raise ValueError(msg)
        if self.duration_ms < 0:
            msg = f"duration_ms must be non-negative, got {self.duration_ms}."
            raise ValueError(msg)

    @classmethod
    def from_duration(cls, name: str, duration_ms: float, iterations: int) -> "BenchmarkResult":
        """Build a result whose throughput is derived from the stored duration."""
        return cls(
            name=name,
            duration_ms=duration_ms,
            ops_per_sec=ops_per_second(iterations, duration_ms),
            iterations=iterations,
        )


@dataclass(frozen=True)
class CacheProbeResult:
    """Two identical back-to-back measurements and their duration ratio."""

    first: BenchmarkResult
    second: BenchmarkResult

    @property
    def speedup(self) -> float:
        """Return ``first / second`` duration, or ``math.inf`` if the second run took no time."""
        if self.second.duration_ms == 0:
            return math.inf
        return self.first.duration_ms / self.second.duration_ms
