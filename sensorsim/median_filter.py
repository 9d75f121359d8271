"""Median filter over a window of samples."""

from __future__ import annotations

from collections.abc import Sequence


def apply_median_filter(values: Sequence[float], window_size: int | None = None) -> float:
    """Return the median of the first ``window_size`` values.

    The input is left untouched. An empty window yields 0.0; for an even
    window the two middle values are averaged. ``window_size`` defaults to
    the whole sequence.
    """
    if window_size is None:
        window_size = len(values)
    if window_size < 0:
        raise ValueError(f"window_size must not be negative, got {window_size}")
    if window_size > len(values):
        raise ValueError(
            f"window_size {window_size} exceeds the {len(values)} values given"
        )
    if window_size == 0:
        return 0.0

    window = sorted(values[:window_size])
    middle = window_size // 2
    if window_size % 2 == 0:
        return (window[middle - 1] + window[middle]) / 2.0
    return float(window[middle])