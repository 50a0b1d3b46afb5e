"""Renders benchmark results as a fixed-width console table."""

from collections.abc import Iterable
from typing import IO, Final

from rich.console import Console

from .models import BenchmarkResult, CacheProbeResult

NAME_WIDTH: Final[int] = 40
DURATION_WIDTH: Final[int] = 10
THROUGHPUT_WIDTH: Final[int] = 12
RULE_WIDTH: Final[int] = 70


def format_row(result: BenchmarkResult) -> str:
    """
    Format one result as a table row.

    The name is truncated or padded to 40 columns, the duration is right
    aligned in 10 columns with two decimals, and the throughput is right
    aligned in 12 columns with no decimals.
    """
    return (
        f"{result.name:<{NAME_WIDTH}.{NAME_WIDTH}} | "
        f"{result.duration_ms:>{DURATION_WIDTH}.2f}ms | "
        f"{result.ops_per_sec:>{THROUGHPUT_WIDTH}.0f} ops/sec"
    )


def format_header() -> str:
    """Return the column header line aligned with ``format_row``."""
    return f"{'Test Case':<{NAME_WIDTH}} | {'Time':>{DURATION_WIDTH + 2}} | {'Operations/sec':>{THROUGHPUT_WIDTH + 8}}"


def separator() -> str:
    """Return the thin rule drawn under headers and after sections."""
    return "-" * RULE_WIDTH


def banner() -> str:
    """Return the thick rule framing titles."""
    return "=" * RULE_WIDTH


class ThroughputReporter:
    """
    Writes benchmark rows to standard output.

    Output goes through a ``rich`` console with markup, highlighting and emoji
    shortcodes turned off, so every line is written exactly as formatted.
    """

    def __init__(self, file: IO[str] | None = None) -> None:
        """
        Initialize the reporter.

        Args:
            file: Stream to write to. Defaults to standard output.

        """
        self.console = Console(file=file, highlight=False, markup=False, emoji=False, soft_wrap=True)

    def _line(self, text: str = "") -> None:
        self.console.print(text)

    def title(self, name: str) -> None:
        """Write the banner that opens the report."""
        self._line()
        self._line(banner())
        self._line(name)
        self._line(banner())

    def start_section(self, title: str | None = None) -> None:
        """Write an optional section title followed by the column header."""
        self._line()
        if title:
            self._line(title)
            self._line(separator())
        self._line(format_header())
        self._line(separator())

    def end_section(self) -> None:
        """Close the current section."""
        self._line(separator())

    def report(self, result: BenchmarkResult) -> None:
        """Write one result row."""
        self._line(format_row(result))

    def cache_summary(self, probe: CacheProbeResult) -> None:
        """Write the first-versus-second run speedup."""
        self._line()
        self._line(f"Cache speedup: {probe.speedup:.2f}x faster")

    def optimizations(self, descriptions: Iterable[str]) -> None:
        """Write the numbered list of optimizations the segmenter applies."""
        self._line()
        self._line(banner())
        self._line("Optimizations Applied:")
        self._line(banner())
        for index, description in enumerate(descriptions, 1):
            self._line(f"{index}. {description}")
        self._line(banner())
