# SPDX-FileCopyrightText: 2025-present gdopp contributors
#
# SPDX-License-Identifier: MIT

"""
gdopp: data quality checks for acoustic doppler velocimeter (ADV) bursts.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

# Import configuration validation first to ensure configs are valid
from . import config_validation  # noqa: F401

from .analysis import velocity_calc
from .api.windows import check_windows, iter_windows, window_adv
from .checks import (
    CHECK_REGISTRY,
    AdvCheck,
    CheckReport,
    beam_correlation_check,
    check_adv,
    frozen_turbulence_check,
    get_adv_checks,
    run_checks,
    signal_noise_check,
)
from .config import DEFAULT_CONFIG, GDoppConfig, ThresholdConfig, WindowConfig
from .exceptions import (
    CheckExecutionError,
    CheckInvocationError,
    CheckParameterError,
    GDoppConfigurationError,
    GDoppError,
    InvalidArgument,
    InvalidArgumentError,
    UnknownCheckError,
)

try:
    __version__ = version("gdopp")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CHECK_REGISTRY",
    "DEFAULT_CONFIG",
    "AdvCheck",
    "CheckExecutionError",
    "CheckInvocationError",
    "CheckParameterError",
    "CheckReport",
    "GDoppConfig",
    "GDoppConfigurationError",
    "GDoppError",
    "InvalidArgument",
    "InvalidArgumentError",
    "ThresholdConfig",
    "UnknownCheckError",
    "WindowConfig",
    "__version__",
    "beam_correlation_check",
    "check_adv",
    "check_windows",
    "frozen_turbulence_check",
    "get_adv_checks",
    "iter_windows",
    "run_checks",
    "signal_noise_check",
    "velocity_calc",
    "window_adv",
]
