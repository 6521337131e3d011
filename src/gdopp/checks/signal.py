"""Signal-to-noise check for ADV bursts.

References:
    Kitaigorodskii, S. A., M. A. Donelan, J. L. Lumley, and E. A. Terray.
    Wave-turbulence interactions in the upper ocean. Part II. Journal of
    Physical Oceanography 13, no. 11 (1983): 1988-1999.

    Vachon, D., Y. T. Prairie, and J. J. Cole. The relationship between
    near-surface turbulence and gas transfer velocity in freshwater systems.
    Limnology and Oceanography 55, no. 4 (2010): 1723.
"""

from ..config import validate_threshold
from ..constants import DEFAULT_SIGNAL_THRESHOLD, SIGNAL_COLUMNS
from ..util import ChunkLike, any_below, column_means, ensure_polars_dataframe


def signal_noise_check(
    chunk: ChunkLike, signal_threshold: float = DEFAULT_SIGNAL_THRESHOLD
) -> bool:
    """Fail a burst whose mean signal-to-noise ratio is too low on any axis.

    Args:
        chunk: One burst with ``signal.rat.X``, ``signal.rat.Y``, ``signal.rat.Z``
        signal_threshold: Minimum acceptable mean ratio, in [0, 100]

    Returns:
        True if any per-axis mean is strictly below ``signal_threshold``

    Raises:
        InvalidArgumentError: If ``signal_threshold`` is outside [0, 100]
    """
    validate_threshold("signal_threshold", signal_threshold)

    df = ensure_polars_dataframe(chunk)
    means = column_means(df, SIGNAL_COLUMNS)
    return any_below(means, signal_threshold, SIGNAL_COLUMNS)
