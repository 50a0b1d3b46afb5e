"""Holds the fixed protocol constants of the benchmark run."""

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BenchmarkSettings(BaseModel):
    """
    Protocol constants for a benchmark run.

    The harness takes no flags, files or environment variables, so these are
    only ever overridden by code (tests build their own instances).

    Attributes:
        warmup_iterations: Discarded calls made before the clock starts.
        default_iterations: Measured calls for short inputs.
        long_input_iterations: Measured calls for inputs above the threshold.
        long_input_threshold: Largest UTF-16 length still treated as short.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    warmup_iterations: int = Field(default=100, ge=0)
    default_iterations: int = Field(default=10_000, ge=1)
    long_input_iterations: int = Field(default=1_000, ge=1)
    long_input_threshold: int = Field(default=100, ge=0)

    @model_validator(mode="after")
    def _check_long_inputs_are_cheaper(self) -> "BenchmarkSettings":
        """Ensure long inputs never get more iterations than short ones."""
        if self.long_input_iterations > self.default_iterations:
            msg = "long_input_iterations must not exceed default_iterations."
            raise ValueError(msg)
        return self


DEFAULT_SETTINGS: Final[BenchmarkSettings] = BenchmarkSettings()
