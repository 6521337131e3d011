"""
Burst windowing and per-window quality checking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import polars as pl

from ..checks.dispatcher import Tests, resolve_test_names, run_checks
from ..config import WindowConfig
from ..constants import WINDOW_COLUMN
from ..exceptions import InvalidArgumentError
from ..util import ChunkLike, ensure_polars_dataframe

__all__ = ["check_windows", "iter_windows", "window_adv"]

logger = logging.getLogger(__name__)


def window_adv(
    data: ChunkLike,
    freq: float = 32.0,
    window_mins: float = 10.0,
    drop_partial: bool = False,
) -> pl.DataFrame:
    """
    Assign each sample of a continuous ADV record to a fixed-length burst.

    Parameters
    ----------
    data : pl.DataFrame, pa.Table or mapping
        Continuous record, one row per sample, in time order.
    freq : float, default 32.0
        Sampling frequency in Hz.
    window_mins : float, default 10.0
        Burst length in minutes.
    drop_partial : bool, default False
        Drop a trailing burst shorter than ``window_mins``.

    Returns
    -------
    pl.DataFrame
        Input data with an integer ``window.idx`` column starting at 1.

    Examples
    --------
    >>> windowed = window_adv(data, freq=32, window_mins=10)
    >>> chunk = windowed.filter(pl.col("window.idx") == 7)
    >>> check_adv(chunk, tests="all")
    """
    config = WindowConfig(freq=freq, window_mins=window_mins, drop_partial=drop_partial)
    size = config.samples_per_window
    df = ensure_polars_dataframe(data)

    df = df.with_columns(
        (pl.int_range(0, pl.len(), dtype=pl.Int64) // size + 1).alias(WINDOW_COLUMN)
    )

    if config.drop_partial and df.height % size:
        full_windows = df.height // size
        logger.debug(f"Dropping {df.height % size} samples of a partial window")
        df = df.filter(pl.col(WINDOW_COLUMN) <= full_windows)

    return df


def iter_windows(
    data: ChunkLike, window_col: str = WINDOW_COLUMN
) -> Iterator[tuple[Any, pl.DataFrame]]:
    """Yield ``(window id, chunk)`` pairs in order of first appearance.

    Raises:
        InvalidArgumentError: If ``window_col`` is not a column of ``data``
    """
    df = ensure_polars_dataframe(data)
    if window_col not in df.columns:
        raise InvalidArgumentError(
            f"Data must contain '{window_col}' column; use window_adv() first"
        )
    if df.height == 0:
        return

    for chunk in df.partition_by(window_col, maintain_order=True):
        yield chunk.get_column(window_col)[0], chunk


def check_windows(
    data: ChunkLike,
    tests: Tests = "all",
    window_col: str = WINDOW_COLUMN,
    **params: Any,
) -> pl.DataFrame:
    """
    Run quality checks on every burst of a windowed record.

    Parameters
    ----------
    data : pl.DataFrame, pa.Table or mapping
        Windowed record with a ``window_col`` column.
    tests : str or sequence of str, default "all"
        Checks to run, as for :func:`gdopp.check_adv`.
    window_col : str, default "window.idx"
        Column identifying the burst of each sample.
    **params
        Check parameters forwarded to every burst.

    Returns
    -------
    pl.DataFrame
        One row per burst: the window id, one boolean column per check
        (True = failed) and the aggregate ``failed`` column.
    """
    names = resolve_test_names(tests)

    rows = []
    for idx, chunk in iter_windows(data, window_col):
        report = run_checks(chunk, names, **params)
        row: dict[str, Any] = {window_col: idx}
        row.update(report.as_dict())
        row["failed"] = report.failed
        rows.append(row)

    if not rows:
        schema = {window_col: pl.Int64}
        schema.update({name: pl.Boolean for name in names})
        schema["failed"] = pl.Boolean
        return pl.DataFrame(schema=schema)

    result = pl.DataFrame(rows)
    logger.info(
        f"Checked {result.height} windows, {result.get_column('failed').sum()} failed"
    )
    return result
