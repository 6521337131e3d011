"""Helpers for turning chunk inputs into Polars frames and summarising columns."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

import polars as pl
import pyarrow as pa

logger = logging.getLogger(__name__)

ChunkLike: TypeAlias = pl.DataFrame | pa.Table | Mapping[str, Any]


def ensure_polars_dataframe(data: ChunkLike) -> pl.DataFrame:
    """Convert chunk input to a Polars DataFrame.

    Avoids unnecessary conversions when data is already a Polars DataFrame.

    Args:
        data: Chunk as Polars DataFrame, PyArrow Table, or column mapping

    Returns:
        Polars DataFrame
    """
    if isinstance(data, pl.DataFrame):
        return data
    if isinstance(data, pa.Table):
        df_temp = pl.from_arrow(data)
        return df_temp if isinstance(df_temp, pl.DataFrame) else df_temp.to_frame()
    if isinstance(data, pl.Series):
        return data.to_frame()
    return pl.DataFrame(data)


def column_means(df: pl.DataFrame, columns: Iterable[str]) -> list[float | None]:
    """Mean of each column, ignoring null and NaN values.

    A column with no valid values yields ``None``. Missing columns raise
    ``polars.exceptions.ColumnNotFoundError``.
    """
    exprs = [pl.col(col).cast(pl.Float64).fill_nan(None).mean() for col in columns]
    return list(df.select(exprs).row(0))


def any_below(
    means: Iterable[float | None], threshold: float, columns: Iterable[str]
) -> bool:
    """Return True if any mean is strictly below ``threshold``.

    A column without valid values has no mean and counts as below.
    """
    below = False
    for col, mean in zip(columns, means):
        if mean is None:
            logger.warning(f"Column '{col}' has no valid values in this chunk")
            below = True
        elif mean < threshold:
            below = True
    return below
