"""
Public API functions for windowing and checking ADV records.
"""

from .cli import main
from .windows import check_windows, iter_windows, window_adv

__all__ = [
    "check_windows",
    "iter_windows",
    "main",
    "window_adv",
]
