"""
SPACEWATCH — Trailing-window aggregation.
Means over the last N samples of a series, and the matching "previous" window for trend deltas.
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from utils.helpers import field_value, sample_time, samples_before


def average(series: Sequence, key: str, count: int) -> float:
    """
    Mean of `key` over the last `count` samples.
    Empty series → 0.0. A count longer than the series averages whatever exists.
    """
    if not series or count <= 0:
        return 0.0
    window = series[-count:]
    values = np.array([field_value(s, key) for s in window], dtype=float)
    return float(values.mean())


def previous_average(series: Sequence, key: str, count: int) -> float:
    """
    Mean of the `count` samples that precede the current window.
    Falls back to the current window's mean when there is no earlier history,
    so a cold start never reads as a trend.
    """
    current = average(series, key, count)
    if count <= 0:
        return current
    history = series[:-count]
    if not history:
        return current
    return average(history, key, count)


def window_pair(
    series: Sequence,
    key: str,
    count: int,
    prior: Sequence | None = None,
) -> tuple[float, float]:
    """
    (current, previous) window means.

    Without `prior` the previous window is carved out of `series`. With `prior`
    (the series from the previous cycle's snapshot) the history is widened with
    the prior samples older than the current window that `series` no longer
    holds, and the previous window is the last `count` samples of that history.
    No history at all → the current mean.
    """
    current = average(series, key, count)
    if prior is None:
        return current, previous_average(series, key, count)
    if not series or count <= 0:
        return current, current

    history = list(series[:-count])
    held = {sample_time(s) for s in history}
    window_start = sample_time(series[-count:][0])
    dropped = [s for s in samples_before(prior, window_start) if sample_time(s) not in held]
    dropped.sort(key=sample_time)

    history = dropped + history
    if not history:
        return current, current
    return current, average(history, key, count)
