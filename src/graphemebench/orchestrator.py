"""Drives the corpus through every segmenter operation, then the cache probe."""

import logging
from collections.abc import Callable, Sequence
from typing import Final

from .config import DEFAULT_SETTINGS, BenchmarkSettings
from .corpus import CORPUS, CorpusEntry, select_iterations
from .models import CacheProbeResult, GraphemeSegmenter
from .probe import CacheEffectivenessProbe
from .reporting import ThroughputReporter
from .runner import BenchmarkRunner, Operation

logger = logging.getLogger(__name__)

REPORT_TITLE: Final[str] = "Grapheme Segmentation Performance Benchmark"
CACHE_SECTION_TITLE: Final[str] = "Cache Effectiveness Test:"


def _exhaust(segmenter: GraphemeSegmenter, text: str) -> None:
    for _ in segmenter.iterate_graphemes(text):
        pass


OPERATIONS: Final[tuple[tuple[str, Callable[[GraphemeSegmenter, str], object]], ...]] = (
    ("splitGraphemes", lambda segmenter, text: segmenter.split_graphemes(text)),
    ("countGraphemes", lambda segmenter, text: segmenter.count_graphemes(text)),
    ("iterateGraphemes", _exhaust),
)
"""Operation labels and calls, in report order."""


def benchmark_label(entry: CorpusEntry, operation_name: str) -> str:
    """Return the row label for one corpus entry and operation."""
    return f"{entry.name}: {operation_name} ({entry.code_units} chars)"


class Orchestrator:
    """Runs the full benchmark matrix against one shared segmenter."""

    def __init__(
        self,
        segmenter: GraphemeSegmenter,
        runner: BenchmarkRunner,
        reporter: ThroughputReporter,
        corpus: Sequence[CorpusEntry] = CORPUS,
        settings: BenchmarkSettings = DEFAULT_SETTINGS,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            segmenter: Measured for every entry; its state is never reset.
            runner: Times each operation and reports its row.
            reporter: Writes titles, headers and the summary lines.
            corpus: Entries in report order.
            settings: Decides iteration counts per entry.

        """
        self.segmenter = segmenter
        self.runner = runner
        self.reporter = reporter
        self.corpus = corpus
        self.settings = settings

    def _operation(self, call: Callable[[GraphemeSegmenter, str], object], text: str) -> Operation:
        segmenter = self.segmenter
        return lambda: call(segmenter, text)

    def run_corpus(self) -> None:
        """Benchmark every entry with split, count and iterate, in that order."""
        self.reporter.start_section()
        for entry in self.corpus:
            iterations = select_iterations(entry, self.settings)
            logger.debug("Benchmarking '%s' with %d iterations.", entry.name, iterations)
            for operation_name, call in OPERATIONS:
                self.runner.benchmark(
                    benchmark_label(entry, operation_name),
                    self._operation(call, entry.text),
                    iterations,
                )
        self.reporter.end_section()

    def run_cache_probe(self) -> CacheProbeResult:
        """Run the cache-effectiveness probe in its own section."""
        self.reporter.start_section(CACHE_SECTION_TITLE)
        probe = CacheEffectivenessProbe(self.runner, self.segmenter, iterations=self.settings.default_iterations).run()
        self.reporter.cache_summary(probe)
        return probe

    def run(self) -> CacheProbeResult:
        """
        Run the whole report.

        Returns:
            The cache probe result, the only measurement retained after reporting.

        """
        logger.info("Benchmarking %d corpus entries.", len(self.corpus))
        self.reporter.title(REPORT_TITLE)
        self.run_corpus()
        probe = self.run_cache_probe()

        optimizations = getattr(self.segmenter, "optimizations", ())
        if optimizations:
            self.reporter.optimizations(optimizations)

        cache_info = getattr(self.segmenter, "cache_info", None)
        if callable(cache_info):
            logger.debug("Segmenter cache after run: %s", cache_info())
        return probe
