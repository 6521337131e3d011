"""
Physical quantities derived from ADV bursts.
"""

from .velocity import velocity_calc

__all__ = [
    "velocity_calc",
]
