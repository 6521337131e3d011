"""Frozen turbulence check for ADV bursts.

Lien, Ren-Chieh, and Eric A. D'Asaro. Measurement of turbulent kinetic energy
dissipation rate with a Lagrangian float. Journal of Atmospheric and Oceanic
Technology 23, no. 7 (2006): 964-976.
"""

import logging
from collections.abc import Callable

import numpy as np
import polars as pl

from ..analysis import velocity
from ..constants import VELOCITY_Z
from ..util import ChunkLike, ensure_polars_dataframe

logger = logging.getLogger(__name__)

VelocityCalc = Callable[[pl.DataFrame], float]


def frozen_turbulence_check(
    chunk: ChunkLike, velocity_calc: VelocityCalc | None = None
) -> bool:
    """Fail a burst that violates the frozen turbulence hypothesis.

    The burst fails when ``(rms(w') / V) ** 3 >= 1``, where ``w'`` is the
    mean-removed ``velocity.Z`` series and ``V`` the reference velocity.

    Args:
        chunk: One burst with a ``velocity.Z`` column
        velocity_calc: Callable returning the reference velocity for the
            chunk. Defaults to :func:`gdopp.analysis.velocity_calc`.

    Returns:
        True if the RMS vertical fluctuation is not smaller than ``V``
    """
    df = ensure_polars_dataframe(chunk)

    w_series = df.get_column(VELOCITY_Z).cast(pl.Float64).fill_nan(None)
    if w_series.len() == w_series.null_count():
        logger.warning(f"Column '{VELOCITY_Z}' has no valid values in this chunk")
        return True
    if w_series.null_count() > 0:
        raise ValueError(
            f"Column '{VELOCITY_Z}' has {w_series.null_count()} missing values"
        )

    calc = velocity_calc or velocity.velocity_calc
    reference = float(calc(df))
    if reference <= 0:
        logger.warning(f"Reference velocity is {reference}, ratio is not finite")

    w = w_series.to_numpy()
    fluctuation = w - np.mean(w)
    rms = np.sqrt(np.sum(fluctuation**2) / fluctuation.size)

    # V == 0 gives inf (fails) or nan (passes)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.float64(rms) / np.float64(reference)
    return bool(ratio**3 >= 1)
