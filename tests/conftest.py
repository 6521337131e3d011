"""
Shared fixtures for gdopp tests.
"""

import numpy as np
import polars as pl
import pytest


def make_chunk(
    n_points: int = 64,
    signal: float = 25.0,
    correlation: float = 95.0,
    mean_flow: float = 1.0,
    w_amplitude: float = 0.1,
) -> pl.DataFrame:
    """Build a synthetic ADV burst.

    ``velocity.Z`` alternates between +/- ``w_amplitude`` so its mean is zero
    and its RMS fluctuation equals ``w_amplitude``.
    """
    rng = np.random.RandomState(42)
    return pl.DataFrame(
        {
            "signal.rat.X": signal + rng.uniform(-1, 1, n_points),
            "signal.rat.Y": signal + rng.uniform(-1, 1, n_points),
            "signal.rat.Z": signal + rng.uniform(-1, 1, n_points),
            "correlation.X": np.full(n_points, correlation),
            "correlation.Y": np.full(n_points, correlation),
            "correlation.Z": np.full(n_points, correlation),
            "velocity.X": np.full(n_points, mean_flow),
            "velocity.Y": np.zeros(n_points),
            "velocity.Z": np.tile([w_amplitude, -w_amplitude], n_points // 2),
        }
    )


@pytest.fixture
def good_chunk():
    """A burst that passes every check."""
    return make_chunk()


@pytest.fixture
def noisy_chunk():
    """A burst with low signal-to-noise and poor beam correlation."""
    return make_chunk(signal=5.0, correlation=50.0)


@pytest.fixture
def signal_chunk():
    """Signal-to-noise columns with means 21, 29 and 25."""
    return pl.DataFrame(
        {
            "signal.rat.X": [20.0, 22.0],
            "signal.rat.Y": [30.0, 28.0],
            "signal.rat.Z": [25.0, 25.0],
        }
    )


@pytest.fixture
def correlation_chunk():
    """Beam correlation columns with a poor Z beam."""
    return pl.DataFrame(
        {
            "correlation.X": [95.0, 95.0],
            "correlation.Y": [92.0, 92.0],
            "correlation.Z": [60.0, 60.0],
        }
    )


@pytest.fixture
def square_wave_chunk():
    """``velocity.Z`` with zero mean and unit RMS."""
    return pl.DataFrame({"velocity.Z": [1.0, -1.0, 1.0, -1.0]})


@pytest.fixture
def continuous_record():
    """Three bursts of 10 samples each; the second one is noisy."""
    return pl.concat(
        [
            make_chunk(n_points=10),
            make_chunk(n_points=10, signal=5.0),
            make_chunk(n_points=10),
        ]
    )
