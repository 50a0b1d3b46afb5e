"""Compares two identical back-to-back measurements of the segmenter."""

import logging

from .corpus import CACHE_PROBE_TEXT
from .models import BenchmarkResult, CacheProbeResult, GraphemeSegmenter
from .runner import BenchmarkRunner

logger = logging.getLogger(__name__)

FIRST_RUN_LABEL = "First run"
SECOND_RUN_LABEL = "Second run"


class CacheEffectivenessProbe:
    """
    Measures ``split_graphemes`` on the same input twice in a row.

    Nothing is reset between or before the two runs. By the time the probe
    runs, the segmenter has usually served the whole corpus, so the first run
    is not a cold-cache measurement; the probe only compares a first and a
    second identical invocation. A ratio near 1.0 means no reuse benefit.
    """

    def __init__(
        self,
        runner: BenchmarkRunner,
        segmenter: GraphemeSegmenter,
        text: str = CACHE_PROBE_TEXT,
        iterations: int | None = None,
    ) -> None:
        """
        Initialize the probe.

        Args:
            runner: Runner used for both measurements.
            segmenter: The shared segmenter instance.
            text: Input split in both runs.
            iterations: Measured calls per run; defaults to the runner's default.

        """
        self.runner = runner
        self.segmenter = segmenter
        self.text = text
        self.iterations = iterations

    def run(self) -> CacheProbeResult:
        """Run both measurements, report each row and return the pair."""
        first = self._measure(FIRST_RUN_LABEL)
        second = self._measure(SECOND_RUN_LABEL)
        probe = CacheProbeResult(first=first, second=second)
        logger.debug("Cache probe speedup: %.3fx.", probe.speedup)
        return probe

    def _measure(self, label: str) -> BenchmarkResult:
        result = self.runner.measure(label, lambda: self.segmenter.split_graphemes(self.text), self.iterations)
        self.runner.reporter.report(result)
        return result
