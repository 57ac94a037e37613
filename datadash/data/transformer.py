"""Series transformation: resampling, scoping and percent-change normalization."""
from typing import List, Sequence

from datadash.constants import (
    DEFAULT_INTERVAL,
    INTERVAL_DAYS,
    INTERVAL_TAIL,
    PERIOD_LABELS,
    SERIES_POINTS,
)
from datadash.utils import round_half_up, round_to


def sample_series(values: Sequence[float], points: int = SERIES_POINTS) -> List[float]:
    """
    Reduce a series to a fixed number of points by nearest-index resampling.

    Output index i takes the input element at round((len - 1) * i / (points - 1)),
    so the first and last samples are always kept. A single requested point
    selects the first element.

    Args:
        values: Raw series (any length)
        points: Number of output points

    Returns:
        List of length `points`; all zeros when `values` is empty
    """
    if not values:
        return [0.0] * points

    max_index = len(values) - 1
    span = max(points - 1, 1)
    return [values[round_half_up(max_index * i / span)] for i in range(points)]


def series_to_pct_change(series: Sequence[float]) -> List[float]:
    """
    Convert a series to percent change from its first value, rounded to 2 decimals.

    An empty series, or one starting at exactly zero, yields zeros (length of
    the input, or 7 when empty) instead of NaN/inf values.
    """
    if not series or series[0] == 0:
        return [0.0] * (len(series) or SERIES_POINTS)

    first = series[0]
    return [round_to((value - first) / first * 100, 2) for value in series]


def interval_days(interval: str) -> int:
    """Lookback window in days for the market_chart endpoint."""
    return INTERVAL_DAYS.get(interval, INTERVAL_DAYS[DEFAULT_INTERVAL])


def scope_series(values: Sequence[float], interval: str) -> List[float]:
    """Trim an hourly series to the tail that the interval covers."""
    tail = INTERVAL_TAIL.get(interval)
    if tail is None:
        return list(values)
    return list(values[-tail:])


def period_labels(interval: str) -> List[str]:
    return list(PERIOD_LABELS.get(interval, PERIOD_LABELS[DEFAULT_INTERVAL]))
