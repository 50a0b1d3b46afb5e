"""Tests for the main entry point."""

import unittest
from unittest.mock import MagicMock, patch

import pytest

from graphemebench import __version__
from graphemebench.__main__ import main
from graphemebench.graphemer import Graphemer
from graphemebench.reporting import ThroughputReporter
from graphemebench.runner import BenchmarkRunner


class TestMain(unittest.TestCase):
    """Test suite for the main function."""

    @patch("graphemebench.__main__.Orchestrator")
    @patch("graphemebench.__main__.setup_logging")
    def test_main_wires_one_shared_segmenter(self, mock_setup_logging: MagicMock, mock_orchestrator: MagicMock) -> None:
        """1. Wiring: Builds one segmenter, reporter and runner and runs once."""
        mock_orchestrator.return_value.run.return_value.speedup = 1.0

        main()

        mock_setup_logging.assert_called_once_with(version=__version__)
        mock_orchestrator.assert_called_once()
        segmenter, runner, reporter = mock_orchestrator.call_args.args
        assert isinstance(segmenter, Graphemer)
        assert isinstance(runner, BenchmarkRunner)
        assert isinstance(reporter, ThroughputReporter)
        assert runner.reporter is reporter
        mock_orchestrator.return_value.run.assert_called_once_with()

    @patch("graphemebench.__main__.Orchestrator")
    @patch("graphemebench.__main__.setup_logging")
    def test_main_propagates_segmenter_errors(self, _mock_setup_logging: MagicMock, mock_orchestrator: MagicMock) -> None:
        """2. Failure: Errors from the run are not swallowed."""
        mock_orchestrator.return_value.run.side_effect = RuntimeError("segmentation failed")

        with pytest.raises(RuntimeError, match="segmentation failed"):
            main()
