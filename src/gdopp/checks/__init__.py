"""Data quality checks for ADV bursts.

Each check takes one chunk and returns True when the chunk fails. The
dispatcher runs any selection of them by name.
"""

import logging

from .base import CheckReport
from .correlation import beam_correlation_check
from .dispatcher import check_adv, resolve_test_names, run_checks
from .formatting import format_check_lines, get_dots
from .registry import (
    CHECK_REGISTRY,
    AdvCheck,
    get_adv_checks,
    resolve_check,
    select_parameters,
)
from .signal import signal_noise_check
from .turbulence import frozen_turbulence_check

__all__ = [
    "CHECK_REGISTRY",
    "AdvCheck",
    "CheckReport",
    "beam_correlation_check",
    "check_adv",
    "format_check_lines",
    "frozen_turbulence_check",
    "get_adv_checks",
    "get_dots",
    "resolve_check",
    "resolve_test_names",
    "run_checks",
    "select_parameters",
    "signal_noise_check",
]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
