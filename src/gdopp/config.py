"""Centralized configuration for gdopp.

This module provides configuration classes for check thresholds, burst
windowing, and the default set of checks to run.
"""

import os
from dataclasses import dataclass, field
from typing import Any

from .constants import (
    DEFAULT_CORRELATION_THRESHOLD,
    DEFAULT_SIGNAL_THRESHOLD,
    THRESHOLD_RANGE,
)
from .exceptions import InvalidArgumentError


def validate_threshold(name: str, value: float) -> None:
    """Raise InvalidArgumentError if a percentage threshold is out of range.

    Args:
        name: Parameter name used in the error message
        value: Threshold value to check
    """
    low, high = THRESHOLD_RANGE
    if not low <= value <= high:
        raise InvalidArgumentError(
            f"{name} argument must be between {low:g} and {high:g}, got {value!r}"
        )


@dataclass(frozen=True, slots=True)
class ThresholdConfig:
    """Thresholds forwarded to the quality checks.

    Attributes:
        signal_threshold: Minimum mean signal-to-noise ratio per axis (default: 15)
        correlation_threshold: Minimum mean beam correlation per beam (default: 90)
    """

    signal_threshold: float = DEFAULT_SIGNAL_THRESHOLD
    correlation_threshold: float = DEFAULT_CORRELATION_THRESHOLD

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        validate_threshold("signal_threshold", self.signal_threshold)
        validate_threshold("correlation_threshold", self.correlation_threshold)

    def as_params(self) -> dict[str, Any]:
        """Return the thresholds as keyword parameters for ``check_adv``."""
        return {
            "signal_threshold": self.signal_threshold,
            "correlation_threshold": self.correlation_threshold,
        }


@dataclass(frozen=True, slots=True)
class WindowConfig:
    """Configuration for slicing a continuous record into bursts.

    Attributes:
        freq: Sampling frequency in Hz (default: 32)
        window_mins: Burst length in minutes (default: 10)
        drop_partial: Whether to drop a trailing incomplete burst (default: False)
    """

    freq: float = 32.0
    window_mins: float = 10.0
    drop_partial: bool = False

    def __post_init__(self) -> None:
        """Validate window configuration."""
        if self.freq <= 0:
            raise InvalidArgumentError("freq must be positive")
        if self.window_mins <= 0:
            raise InvalidArgumentError("window_mins must be positive")

    @property
    def samples_per_window(self) -> int:
        """Number of samples in one full burst."""
        return max(1, round(self.freq * 60 * self.window_mins))


@dataclass
class GDoppConfig:
    """Main configuration container for gdopp.

    Attributes:
        thresholds: Thresholds forwarded to the checks
        windows: Burst windowing settings
        tests: Check names to run, or ``("all",)``

    Examples:
        >>> config = GDoppConfig(thresholds=ThresholdConfig(signal_threshold=50))
        >>> check_adv(chunk, tests=list(config.tests), **config.thresholds.as_params())
    """

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    windows: WindowConfig = field(default_factory=WindowConfig)
    tests: tuple[str, ...] = ("all",)

    def __post_init__(self) -> None:
        if not self.tests:
            raise InvalidArgumentError(
                'cannot perform check without any tests specified. use "all" for all tests'
            )

    @classmethod
    def from_env(cls) -> "GDoppConfig":
        """Create configuration from environment variables.

        Supported environment variables:
        - GDOPP_SIGNAL_THRESHOLD: Signal-to-noise threshold
        - GDOPP_CORRELATION_THRESHOLD: Beam correlation threshold
        - GDOPP_FREQ: Sampling frequency in Hz
        - GDOPP_WINDOW_MINS: Burst length in minutes
        - GDOPP_TESTS: Comma separated check names, or "all"

        Returns:
            Configuration instance with values from environment
        """
        thresholds = ThresholdConfig(
            signal_threshold=float(
                os.getenv("GDOPP_SIGNAL_THRESHOLD", DEFAULT_SIGNAL_THRESHOLD)
            ),
            correlation_threshold=float(
                os.getenv("GDOPP_CORRELATION_THRESHOLD", DEFAULT_CORRELATION_THRESHOLD)
            ),
        )
        windows = WindowConfig(
            freq=float(os.getenv("GDOPP_FREQ", "32")),
            window_mins=float(os.getenv("GDOPP_WINDOW_MINS", "10")),
        )
        tests = tuple(
            name.strip()
            for name in os.getenv("GDOPP_TESTS", "all").split(",")
            if name.strip()
        )
        return cls(thresholds=thresholds, windows=windows, tests=tests)


# Global default configuration
DEFAULT_CONFIG = GDoppConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "GDoppConfig",
    "ThresholdConfig",
    "WindowConfig",
    "validate_threshold",
]
