"""Beam correlation check for ADV bursts."""

from ..config import validate_threshold
from ..constants import CORRELATION_COLUMNS, DEFAULT_CORRELATION_THRESHOLD
from ..util import ChunkLike, any_below, column_means, ensure_polars_dataframe


def beam_correlation_check(
    chunk: ChunkLike, correlation_threshold: float = DEFAULT_CORRELATION_THRESHOLD
) -> bool:
    """Fail a burst whose mean correlation is too low on any beam.

    Bursts are discarded if the average correlation of any of the three
    beams is below the threshold (Lien & D'Asaro 2006).

    Args:
        chunk: One burst with ``correlation.X``, ``correlation.Y``, ``correlation.Z``
        correlation_threshold: Minimum acceptable mean correlation, in [0, 100]

    Returns:
        True if any per-beam mean is strictly below ``correlation_threshold``

    Raises:
        InvalidArgumentError: If ``correlation_threshold`` is outside [0, 100]
    """
    validate_threshold("correlation_threshold", correlation_threshold)

    df = ensure_polars_dataframe(chunk)
    means = column_means(df, CORRELATION_COLUMNS)
    return any_below(means, correlation_threshold, CORRELATION_COLUMNS)
