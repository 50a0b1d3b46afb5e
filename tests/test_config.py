"""Tests for the benchmark settings model."""

import unittest

import pytest
from pydantic import ValidationError

from graphemebench.config import DEFAULT_SETTINGS, BenchmarkSettings


class TestBenchmarkSettings(unittest.TestCase):
    """Test suite for BenchmarkSettings."""

    def test_defaults(self) -> None:
        """1. Defaults: The protocol constants match the documented values."""
        assert DEFAULT_SETTINGS.warmup_iterations == 100
        assert DEFAULT_SETTINGS.default_iterations == 10_000
        assert DEFAULT_SETTINGS.long_input_iterations == 1_000
        assert DEFAULT_SETTINGS.long_input_threshold == 100

    def test_frozen(self) -> None:
        """2. Immutability: Settings cannot be changed after creation."""
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.warmup_iterations = 5  # type: ignore[misc]

    def test_rejects_negative_warmup(self) -> None:
        """3. Validation: Negative warm-up counts are rejected."""
        with pytest.raises(ValidationError):
            BenchmarkSettings(warmup_iterations=-1)

    def test_rejects_zero_default_iterations(self) -> None:
        """4. Validation: Iteration counts must be at least one."""
        with pytest.raises(ValidationError):
            BenchmarkSettings(default_iterations=0)

    def test_rejects_unknown_fields(self) -> None:
        """5. Validation: Unknown fields are not silently accepted."""
        with pytest.raises(ValidationError):
            BenchmarkSettings(iterations=5)  # type: ignore[call-arg]

    def test_long_inputs_not_given_more_iterations(self) -> None:
        """6. Consistency: Long inputs may not get more iterations than short ones."""
        with pytest.raises(ValidationError, match="long_input_iterations"):
            BenchmarkSettings(default_iterations=10, long_input_iterations=20)

    def test_zero_warmup_allowed(self) -> None:
        """7. Edge: Warm-up can be disabled."""
        assert BenchmarkSettings(warmup_iterations=0).warmup_iterations == 0
