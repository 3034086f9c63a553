"""
SPACEWATCH — Kp forecast comparison.
Reads the next 3-hour bucket of the NOAA Kp forecast against the current Kp.
"""
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from config.settings import KP_ACTIVE
from utils.helpers import field_value


class ForecastOutlook(str, Enum):
    RISING = "RISING"
    DECLINING = "DECLINING"
    UNCHANGED = "UNCHANGED"


def next_forecast_kp(forecast: Sequence, last_kp: float) -> float:
    """forecast[1] is the next bucket (index 0 is the current one)."""
    if len(forecast) > 1:
        return field_value(forecast[1], "kp", last_kp)
    return last_kp


def compare_forecast(forecast: Sequence, last_kp: float) -> ForecastOutlook:
    """
    RISING when the next bucket is above the current Kp. DECLINING only counts
    while the field is at least active (Kp >= 4); a drop from quiet levels is UNCHANGED.
    """
    next_kp = next_forecast_kp(forecast, last_kp)
    if next_kp > last_kp:
        return ForecastOutlook.RISING
    if next_kp < last_kp and last_kp >= KP_ACTIVE:
        return ForecastOutlook.DECLINING
    return ForecastOutlook.UNCHANGED
