"""
SPACEWATCH — Solar wind source attribution and propagation.

Separates the two usual drivers of fast wind:
  - CME: fast wind together with a >=10 MeV proton event
  - Coronal hole high-speed stream: fast wind, quiet proton background
Wind uses the smoothed trailing average; protons use the latest sample (they spike).
"""
from __future__ import annotations

from enum import Enum

from config.settings import HIGH_WIND_SPEED, L1_DISTANCE_KM, PROTON_STORM_FLUX
from utils.helpers import safe_float


class SourceAttribution(str, Enum):
    CME = "CME"
    CORONAL_HOLE = "CORONAL_HOLE"
    NONE = "NONE"


def is_high_wind(avg_wind_speed: float) -> bool:
    return avg_wind_speed > HIGH_WIND_SPEED


def is_proton_storm(proton_flux: float) -> bool:
    return proton_flux >= PROTON_STORM_FLUX


def attribute_source(avg_wind_speed: float, current_proton_flux: float) -> SourceAttribution:
    """Dominant driver of the current wind regime."""
    if not is_high_wind(avg_wind_speed):
        return SourceAttribution.NONE
    if is_proton_storm(current_proton_flux):
        return SourceAttribution.CME
    return SourceAttribution.CORONAL_HOLE


def l1_travel_time(speed_km_s: float) -> tuple[int, int]:
    """(hours, minutes) for plasma at `speed_km_s` to cover L1 → Earth."""
    speed = safe_float(speed_km_s)
    if speed <= 0:
        return 0, 0
    total_minutes = int(L1_DISTANCE_KM / speed // 60)
    return total_minutes // 60, total_minutes % 60
