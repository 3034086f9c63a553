"""
SPACEWATCH — Trend classification.
Labels the change between the current and previous value as rising, falling or stable.
Kp and solar wind use separate dead-bands.
"""
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from config.settings import (
    KP_ACTIVE,
    KP_STORM,
    KP_TREND_DEAD_BAND,
    WIND_TREND_DEAD_BAND,
)
from utils.helpers import field_value, last_value, sample_time, samples_before


class Trend(str, Enum):
    RISING = "RISING"
    FALLING = "FALLING"
    STABLE = "STABLE"


def classify_trend(current: float, previous: float, dead_band: float = 0.0) -> Trend:
    """RISING/FALLING only when the delta lies strictly outside ±dead_band."""
    delta = current - previous
    if delta > dead_band:
        return Trend.RISING
    if delta < -dead_band:
        return Trend.FALLING
    return Trend.STABLE


def previous_kp(kp: Sequence, prior: Sequence | None = None) -> float:
    """
    The Kp reading before the latest one. With `prior` (the previous cycle's Kp
    series) it is the newest sample of current ∪ prior timed strictly before
    the latest reading; otherwise the second-to-last sample. No history → the
    latest Kp.
    """
    latest = last_value(kp, "kp")
    if prior and kp:
        earlier = samples_before([*kp[:-1], *prior], sample_time(kp[-1]))
        if earlier:
            return field_value(max(earlier, key=sample_time), "kp", latest)
    if len(kp) < 2:
        return latest
    return field_value(kp[-2], "kp", latest)


def kp_trend(last_kp: float, prev_kp: float) -> Trend:
    return classify_trend(last_kp, prev_kp, KP_TREND_DEAD_BAND)


def wind_trend(avg_speed: float, prev_avg_speed: float) -> Trend:
    return classify_trend(avg_speed, prev_avg_speed, WIND_TREND_DEAD_BAND)


def kp_state(kp: float) -> str:
    """Geomagnetic badge: STORM (G1+), ACTIVE (Kp 4) or QUIET."""
    if kp >= KP_STORM:
        return "STORM"
    if kp >= KP_ACTIVE:
        return "ACTIVE"
    return "QUIET"
