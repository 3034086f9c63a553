"""
SPACEWATCH — Utility helpers.
Numeric coercion and field access shared by the telemetry records and analysis steps.
"""
from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any


def safe_float(value: Any, default: float = 0.0) -> float:
    """Coerce to float; None, NaN, inf and junk strings become `default`."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def field_value(sample: Any, key: str, default: float = 0.0) -> float:
    """Read a numeric field from a record or a plain dict."""
    if isinstance(sample, Mapping):
        raw = sample.get(key)
    else:
        raw = getattr(sample, key, None)
    return safe_float(raw, default)


def last_value(series: Sequence, key: str, default: float = 0.0) -> float:
    """Numeric field of the most recent sample, or `default` on an empty series."""
    if not series:
        return default
    return field_value(series[-1], key, default)


def sample_time(sample: Any) -> Any:
    """Timestamp of a record or plain dict; None when it has none."""
    if isinstance(sample, Mapping):
        return sample.get("time")
    return getattr(sample, "time", None)


def samples_before(series: Sequence, cutoff: Any) -> list:
    """Samples strictly older than `cutoff`. Untimed samples never qualify."""
    if cutoff is None:
        return []
    return [s for s in series if sample_time(s) is not None and sample_time(s) < cutoff]


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
