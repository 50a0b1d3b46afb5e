"""Logging setup for the GraphemeBench application."""

import logging
import sys
import time


class ConsoleFormatter(logging.Formatter):
    """A formatter for diagnostic lines written next to the benchmark table."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the application version.

        Args:
            version: The GraphemeBench version.

        """
        super().__init__(
            fmt=f"%(asctime)s | GraphemeBench - {version} | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
        self.converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt, ct) if datefmt else time.strftime(self.default_time_format, ct)
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{s}.{microseconds:06d}Z"


def setup_logging(version: str, *, debug: bool = False) -> None:
    """
    Configure the root logger.

    Log records go to standard error, keeping standard output for the
    benchmark table alone.

    Args:
        version: The application version, included in every line.
        debug: If True, per-measurement details are logged as well.

    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    level = logging.DEBUG if debug else logging.INFO
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(ConsoleFormatter(version))
    root_logger.addHandler(console_handler)
