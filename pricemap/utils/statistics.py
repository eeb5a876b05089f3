"""Statistics utilities for price normalization."""
import math
from bisect import bisect_left
from typing import Sequence

from pricemap.models.price import Statistics

# Abramowitz-Stegun 7.1.26 coefficients
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911


def calculate_statistics(values: Sequence[float]) -> Statistics:
    """
    Compute descriptive statistics of a batch.

    Mean and variance are population statistics (divide by n). Quartiles are
    read directly from the sorted batch without interpolation.

    Args:
        values: Non-empty sequence of numbers

    Returns:
        Statistics for the batch

    Raises:
        ValueError: If values is empty
    """
    n = len(values)
    if n == 0:
        raise ValueError("Cannot compute statistics of an empty batch")

    ordered = sorted(values)
    if ordered[0] == ordered[-1]:
        # Identical values: avoid rounding noise in the mean
        mean = ordered[0]
        variance = 0.0
    else:
        mean = sum(values) / n
        variance = sum((v - mean) ** 2 for v in values) / n

    if n % 2 == 0:
        median = (ordered[n // 2 - 1] + ordered[n // 2]) / 2
    else:
        median = ordered[n // 2]

    q1 = ordered[math.floor(n * 0.25)]
    q3 = ordered[math.floor(n * 0.75)]

    return Statistics(
        mean=mean,
        std_dev=math.sqrt(variance),
        min=ordered[0],
        max=ordered[-1],
        median=median,
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
        n=n,
    )


def z_score(value: float, stats: Statistics) -> float:
    """Standardized deviation from the batch mean, 0 for a zero-spread batch."""
    if stats.std_dev > 0:
        return (value - stats.mean) / stats.std_dev
    return 0.0


def normal_cdf(z: float) -> float:
    """
    Standard normal CDF via the Abramowitz-Stegun rational approximation.

    Absolute error is below 1.5e-7.
    """
    sign = -1.0 if z < 0 else 1.0
    u = abs(z) / math.sqrt(2)
    t = 1.0 / (1.0 + _P * u)
    y = 1.0 - (((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1) * t * math.exp(-u * u)
    return 0.5 * (1.0 + sign * y)


def smoothstep(t: float) -> float:
    """Cubic ease 3t^2 - 2t^3."""
    return t * t * (3 - 2 * t)


def calculate_percentile(value: float, values: Sequence[float]) -> float:
    """
    Percentile of a value within its batch.

    Args:
        value: Value to locate
        values: The batch the value belongs to

    Returns:
        Share of sorted values preceding the first value >= ``value``,
        scaled to 0-100. A singleton batch yields 100.
    """
    ordered = sorted(values)
    if len(ordered) < 2:
        return 100.0

    index = bisect_left(ordered, value)
    if index >= len(ordered):
        return 100.0
    return index / (len(ordered) - 1) * 100
