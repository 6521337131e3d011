"""
Column names and default thresholds for ADV chunks.
"""

from typing import Final

__all__ = [
    "CORRELATION_COLUMNS",
    "DEFAULT_CORRELATION_THRESHOLD",
    "DEFAULT_SIGNAL_THRESHOLD",
    "SIGNAL_COLUMNS",
    "THRESHOLD_RANGE",
    "VELOCITY_COLUMNS",
    "VELOCITY_Z",
    "WINDOW_COLUMN",
]

SIGNAL_COLUMNS: Final = ("signal.rat.X", "signal.rat.Y", "signal.rat.Z")
CORRELATION_COLUMNS: Final = ("correlation.X", "correlation.Y", "correlation.Z")
VELOCITY_COLUMNS: Final = ("velocity.X", "velocity.Y", "velocity.Z")
VELOCITY_Z: Final = "velocity.Z"
WINDOW_COLUMN: Final = "window.idx"

# Kitaigorodskii et al. 1983; Vachon et al. 2010
DEFAULT_SIGNAL_THRESHOLD: Final = 15.0
# Lien & D'Asaro 2006: discard below ~90% beam correlation
DEFAULT_CORRELATION_THRESHOLD: Final = 90.0

THRESHOLD_RANGE: Final = (0.0, 100.0)
