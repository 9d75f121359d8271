"""Summary statistics for a series of measurements."""

from __future__ import annotations

import math
import statistics
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class StatsResult:
    """Minimum, maximum, median and population standard deviation."""

    min: float
    max: float
    median: float
    std_dev: float


def calculate_statistics(data: Sequence[float]) -> StatsResult:
    """Compute summary statistics; raises ValueError for empty data."""
    if not data:
        raise ValueError("cannot compute statistics of an empty series")

    mean = math.fsum(data) / len(data)
    variance = math.fsum((value - mean) ** 2 for value in data) / len(data)
    return StatsResult(
        min=float(min(data)),
        max=float(max(data)),
        median=float(statistics.median(data)),
        std_dev=math.sqrt(variance),
    )