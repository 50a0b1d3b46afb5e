"""Shared fakes for driving the benchmark without a real clock."""

import pytest

from graphemebench.models import BenchmarkResult


class FakeClock:
    """A controllable nanosecond clock that records every read."""

    def __init__(self, start: int = 0) -> None:
        self.now = start
        self.reads: list[int] = []

    def advance(self, nanoseconds: int) -> None:
        self.now += nanoseconds

    def __call__(self) -> int:
        self.reads.append(self.now)
        return self.now


class RecordingReporter:
    """Collects reported results instead of printing them."""

    def __init__(self) -> None:
        self.results: list[BenchmarkResult] = []

    def report(self, result: BenchmarkResult) -> None:
        self.results.append(result)


@pytest.fixture
def clock() -> FakeClock:
    """Provide a fresh fake clock starting at zero."""
    return FakeClock()


@pytest.fixture
def sink() -> RecordingReporter:
    """Provide a reporter that records results."""
    return RecordingReporter()
