"""Tests for the result models and throughput arithmetic."""

import dataclasses
import math

import pytest

from graphemebench.models import BenchmarkResult, CacheProbeResult, ops_per_second


@pytest.mark.parametrize(
    ("iterations", "duration_ms", "expected"),
    [
        (1000, 2.0, 500_000.0),
        (10_000, 250.0, 40_000.0),
        (1, 1000.0, 1.0),
    ],
)
def test_ops_per_second(iterations: int, duration_ms: float, expected: float) -> None:
    """Throughput is iterations per millisecond scaled to seconds."""
    assert ops_per_second(iterations, duration_ms) == pytest.approx(expected)


def test_ops_per_second_sentinels() -> None:
    """Zero iterations give 0.0; zero duration with work gives infinity."""
    assert ops_per_second(0, 0.0) == 0.0
    assert ops_per_second(0, 5.0) == 0.0
    assert math.isinf(ops_per_second(10, 0.0))


def test_result_is_frozen() -> None:
    """Results cannot be mutated after creation."""
    result = BenchmarkResult.from_duration("frozen", 1.0, 10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.duration_ms = 2.0  # type: ignore[misc]


@pytest.mark.parametrize(("duration_ms", "iterations"), [(-0.1, 10), (1.0, -1)])
def test_result_rejects_negative_values(duration_ms: float, iterations: int) -> None:
    """Negative durations and iteration counts are invalid."""
    with pytest.raises(ValueError, match="non-negative"):
        BenchmarkResult.from_duration("invalid", duration_ms, iterations)


def test_speedup_ratio() -> None:
    """Speedup is the first duration over the second."""
    probe = CacheProbeResult(
        first=BenchmarkResult.from_duration("First run", 6.0, 100),
        second=BenchmarkResult.from_duration("Second run", 4.0, 100),
    )
    assert probe.speedup == pytest.approx(1.5)
