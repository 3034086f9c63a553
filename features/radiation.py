"""
SPACEWATCH — Radiation environment.
Which radiation story the report tells (X-ray flare, proton event, background)
and the NOAA S-scale for the current proton flux.
"""
from __future__ import annotations

from enum import Enum

from config.settings import PROTON_S_SCALE, PROTON_STORM_FLUX
from data.telemetry import parse_flare_class


class RadiationLevel(str, Enum):
    XRAY_FLARE = "XRAY_FLARE"
    PROTON_EVENT = "PROTON_EVENT"
    BACKGROUND = "BACKGROUND"


def classify_radiation(avg_flare_class: str, avg_proton_flux: float) -> RadiationLevel:
    """X-class flux outranks a proton event; both outrank background."""
    letter, _ = parse_flare_class(avg_flare_class)
    if letter == "X":
        return RadiationLevel.XRAY_FLARE
    if avg_proton_flux >= PROTON_STORM_FLUX:
        return RadiationLevel.PROTON_EVENT
    return RadiationLevel.BACKGROUND


def proton_scale(flux: float) -> dict:
    """NOAA solar radiation storm level for a >=10 MeV flux in pfu."""
    for threshold, level, description in PROTON_S_SCALE:
        if flux >= threshold:
            return {"level": level, "description": description, "storm": True}
    return {"level": "S0", "description": "Background", "storm": False}
