"""Reference flow velocity for a burst of ADV data."""

import numpy as np

from ..constants import VELOCITY_COLUMNS
from ..util import ChunkLike, column_means, ensure_polars_dataframe


def velocity_calc(chunk: ChunkLike) -> float:
    """Magnitude of the mean velocity vector over a chunk.

    Uses whichever of ``velocity.X``, ``velocity.Y`` and ``velocity.Z`` are
    present, ignoring missing values. Components without any valid value
    contribute nothing.

    Args:
        chunk: One burst of ADV data

    Returns:
        Mean advection speed in the units of the velocity columns

    Raises:
        KeyError: If the chunk has no velocity columns
    """
    df = ensure_polars_dataframe(chunk)
    present = [col for col in VELOCITY_COLUMNS if col in df.columns]
    if not present:
        raise KeyError(f"Chunk has none of the velocity columns {VELOCITY_COLUMNS}")

    means = np.array(
        [mean for mean in column_means(df, present) if mean is not None], dtype=float
    )
    return float(np.sqrt(np.sum(means**2)))
