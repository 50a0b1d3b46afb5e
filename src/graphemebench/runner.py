"""Runs the warm-up and timed measurement loops for a single operation."""

import logging
from collections.abc import Callable
from typing import Any, Protocol

from .clock import Clock, elapsed_ms, perf_counter_ns
from .config import DEFAULT_SETTINGS, BenchmarkSettings
from .models import BenchmarkResult

logger = logging.getLogger(__name__)

Operation = Callable[[], Any]


class ResultSink(Protocol):
    """Anything that accepts finished results, such as the throughput reporter."""

    def report(self, result: BenchmarkResult) -> None: ...


class BenchmarkRunner:
    """
    Times an operation after a fixed warm-up.

    The warm-up lets any caching inside the measured subject settle, so the
    measured loop reflects warm rather than cold behaviour. The runner never
    catches exceptions: a failing operation aborts the caller with no partial
    result reported.
    """

    def __init__(
        self,
        reporter: ResultSink,
        clock: Clock = perf_counter_ns,
        settings: BenchmarkSettings = DEFAULT_SETTINGS,
    ) -> None:
        """
        Initialize the runner.

        Args:
            reporter: Receives every result produced by ``benchmark``.
            clock: Monotonic nanosecond clock read around the measured loop.
            settings: The protocol constants (warm-up length, defaults).

        """
        self.reporter = reporter
        self.clock = clock
        self.settings = settings

    def measure(self, name: str, operation: Operation, iterations: int | None = None) -> BenchmarkResult:
        """
        Warm up, then time ``iterations`` sequential calls of ``operation``.

        Args:
            name: Label for the result.
            operation: Zero-argument callable under measurement.
            iterations: Measured calls; defaults to ``settings.default_iterations``.

        Returns:
            The measured result. Nothing is reported.

        Raises:
            ValueError: If ``iterations`` is negative.

        """
        if iterations is None:
            iterations = self.settings.default_iterations
        if iterations < 0:
            msg = f"iterations must be non-negative, got {iterations}."
            raise ValueError(msg)

        for _ in range(self.settings.warmup_iterations):
            operation()

        start = self.clock()
        for _ in range(iterations):
            operation()
        end = self.clock()

        result = BenchmarkResult.from_duration(name, elapsed_ms(start, end), iterations)
        logger.debug(
            "Measured '%s': %d iterations in %.4fms (%.1f ops/sec).",
            result.name,
            result.iterations,
            result.duration_ms,
            result.ops_per_sec,
        )
        return result

    def benchmark(self, name: str, operation: Operation, iterations: int | None = None) -> float:
        """Measure ``operation``, report the row and return the duration in milliseconds."""
        result = self.measure(name, operation, iterations)
        self.reporter.report(result)
        return result.duration_ms
