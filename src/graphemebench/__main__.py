"""Main entry point for the GraphemeBench benchmark."""

import logging

from . import __version__
from .graphemer import Graphemer
from .logging_utils import setup_logging
from .orchestrator import Orchestrator
from .reporting import ThroughputReporter
from .runner import BenchmarkRunner

logger = logging.getLogger(__name__)


def main() -> None:
    """
    Run the full benchmark and print the report to standard output.

    Takes no arguments. One segmenter instance serves the whole run, so any
    state it keeps carries over from entry to entry and into the cache probe.
    Exceptions raised by the segmenter are not caught.
    """
    setup_logging(version=__version__)

    reporter = ThroughputReporter()
    runner = BenchmarkRunner(reporter)
    probe = Orchestrator(Graphemer(), runner, reporter).run()

    logger.info("Benchmark complete. Cache speedup %.2fx.", probe.speedup)


if __name__ == "__main__":
    main()
