"""Utility functions for working with ADV chunks."""

from .frames import ChunkLike, any_below, column_means, ensure_polars_dataframe

__all__ = [
    "ChunkLike",
    "any_below",
    "column_means",
    "ensure_polars_dataframe",
]
