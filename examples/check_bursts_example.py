#!/usr/bin/env python3
"""
Example: Quality checking a windowed ADV record

Builds a synthetic 32 Hz record, slices it into 10 minute bursts and runs
the quality checks on one burst and on every burst.
"""

import logging

import numpy as np
import polars as pl

from gdopp import check_adv, check_windows, get_adv_checks, window_adv


def synthetic_record(n_points: int, seed: int = 0) -> pl.DataFrame:
    """Continuous ADV record whose signal strength fades halfway through."""
    rng = np.random.default_rng(seed)
    fade = np.where(np.arange(n_points) < n_points // 2, 30.0, 10.0)
    return pl.DataFrame(
        {
            "signal.rat.X": fade + rng.normal(0, 2, n_points),
            "signal.rat.Y": fade + rng.normal(0, 2, n_points),
            "signal.rat.Z": fade + rng.normal(0, 2, n_points),
            "correlation.X": rng.uniform(88, 99, n_points),
            "correlation.Y": rng.uniform(90, 99, n_points),
            "correlation.Z": rng.uniform(90, 99, n_points),
            "velocity.X": 0.2 + rng.normal(0, 0.02, n_points),
            "velocity.Y": 0.05 + rng.normal(0, 0.02, n_points),
            "velocity.Z": rng.normal(0, 0.02, n_points),
        }
    )


def main():
    logging.basicConfig(level=logging.INFO)

    print("Available checks:")
    for name in get_adv_checks():
        print(f"  - {name}")
    print()

    windowed = window_adv(synthetic_record(32 * 60 * 40), freq=32, window_mins=10)

    print("=== Burst 1 ===")
    chunk = windowed.filter(pl.col("window.idx") == 1)
    check_adv(chunk, tests="all", verbose=True)
    print()

    print("=== Burst 4, stricter correlation ===")
    chunk = windowed.filter(pl.col("window.idx") == 4)
    check_adv(
        chunk,
        tests=["beam.correlation_check_adv"],
        verbose=True,
        correlation_threshold=95,
    )
    print()

    print("=== All bursts ===")
    print(check_windows(windowed, tests="all", signal_threshold=15))


if __name__ == "__main__":
    main()
