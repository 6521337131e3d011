"""Property-based tests using Hypothesis.

These tests verify properties that should hold for all inputs,
not just specific test cases.
"""

from __future__ import annotations

import polars as pl
import pytest
from hypothesis import given, settings, strategies as st

from gdopp import check_adv, get_adv_checks
from gdopp.checks import (
    beam_correlation_check,
    frozen_turbulence_check,
    get_dots,
    signal_noise_check,
)
from gdopp.exceptions import InvalidArgumentError

percent = st.floats(min_value=0, max_value=100, allow_nan=False, allow_infinity=False)
velocity = st.floats(min_value=-5, max_value=5, allow_nan=False, allow_infinity=False)


@st.composite
def chunks(draw) -> pl.DataFrame:
    """Random ADV bursts with every column the checks read."""
    n = draw(st.integers(min_value=2, max_value=40))
    columns = {}
    for name in (
        "signal.rat.X",
        "signal.rat.Y",
        "signal.rat.Z",
        "correlation.X",
        "correlation.Y",
        "correlation.Z",
    ):
        columns[name] = draw(st.lists(percent, min_size=n, max_size=n))
    for name in ("velocity.X", "velocity.Y", "velocity.Z"):
        columns[name] = draw(st.lists(velocity, min_size=n, max_size=n))
    return pl.DataFrame(columns)


class TestAggregationProperties:
    """The aggregate verdict is the OR of the individual verdicts."""

    @given(chunks(), percent, percent)
    @settings(max_examples=50, deadline=None)
    def test_all_equals_or_of_checks(self, chunk, signal_threshold, correlation_threshold):
        individual = [
            signal_noise_check(chunk, signal_threshold=signal_threshold),
            beam_correlation_check(chunk, correlation_threshold=correlation_threshold),
            frozen_turbulence_check(chunk),
        ]
        assert check_adv(
            chunk,
            tests="all",
            signal_threshold=signal_threshold,
            correlation_threshold=correlation_threshold,
        ) == any(individual)

    @given(chunks(), st.lists(st.sampled_from(get_adv_checks()), min_size=1, max_size=5))
    @settings(max_examples=50, deadline=None)
    def test_subset_equals_or_of_subset(self, chunk, tests):
        expected = any(check_adv(chunk, tests=[name]) for name in tests)
        assert check_adv(chunk, tests=tests) == expected


class TestThresholdProperties:
    """Threshold checks are monotone and range-checked."""

    @given(chunks(), percent, percent)
    @settings(max_examples=50, deadline=None)
    def test_signal_check_monotone(self, chunk, low, high):
        low, high = sorted((low, high))
        if signal_noise_check(chunk, signal_threshold=low):
            assert signal_noise_check(chunk, signal_threshold=high)

    @given(
        st.one_of(
            st.floats(max_value=-1e-9, allow_nan=False, allow_infinity=False),
            st.floats(min_value=100 + 1e-9, allow_nan=False, allow_infinity=False),
        )
    )
    @settings(max_examples=50, deadline=None)
    def test_out_of_range_rejected(self, threshold):
        chunk = pl.DataFrame(
            {
                "correlation.X": [95.0],
                "correlation.Y": [95.0],
                "correlation.Z": [95.0],
            }
        )
        with pytest.raises(InvalidArgumentError):
            beam_correlation_check(chunk, correlation_threshold=threshold)


class TestFormattingProperties:
    """Diagnostic padding lines every name up to the same width."""

    @given(st.lists(st.text(min_size=1, max_size=40), min_size=1, max_size=10))
    def test_padded_width_is_constant(self, names):
        dots = get_dots(names)
        widths = {len(name) + len(pad) for name, pad in zip(names, dots)}
        assert widths == {max(len(name) for name in names) + 3}
        assert all(pad and set(pad) == {"."} for pad in dots)
