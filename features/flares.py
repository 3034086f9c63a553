"""
SPACEWATCH — GOES X-ray flare peak detection.
Finds local maxima in the flux series above the noise floor and tags C-class-or-above peaks
as significant. Edge samples are never candidates.
"""
from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from config.settings import (
    ACTIVE_REGIONS_MAX,
    ACTIVE_REGIONS_MIN,
    FLARE_NOISE_FLOOR,
)
from data.telemetry import DetectedFlare, FlareSample, parse_flare_class
from utils.helpers import clamp, safe_float
from utils.logger import get_logger

log = get_logger("features.flares")


def detect_flare_peaks(flares: Sequence[FlareSample]) -> list[DetectedFlare]:
    """
    Strict local maxima of flux over interior samples, most recent first.
    Series shorter than three samples cannot contain a peak.
    """
    if len(flares) < 3:
        return []

    flux = np.array([safe_float(f.flux) for f in flares], dtype=float)
    mid = flux[1:-1]
    is_peak = (mid > flux[:-2]) & (mid > flux[2:]) & (mid > FLARE_NOISE_FLOOR)

    # +1: mask index 0 is series index 1
    peaks = [DetectedFlare.from_sample(flares[i + 1]) for i in np.flatnonzero(is_peak)]
    peaks.sort(key=lambda p: p.time, reverse=True)

    log.debug(f"Detected {len(peaks)} flare peaks in {len(flares)} samples")
    return peaks


def significant_flares(peaks: Sequence[DetectedFlare]) -> list[DetectedFlare]:
    """Peaks at or above C1.0, order preserved."""
    return [p for p in peaks if p.is_significant]


def flare_intensity(flare_class: str) -> str:
    """Badge for the current X-ray level: X → HIGH, M → MODERATE, else LOW."""
    letter, _ = parse_flare_class(flare_class)
    if letter == "X":
        return "HIGH"
    if letter == "M":
        return "MODERATE"
    return "LOW"


def active_region_count(flux: float) -> int:
    """Rough count of flaring regions implied by the current flux, 2..8."""
    flux = safe_float(flux) or FLARE_NOISE_FLOOR
    if flux <= 0:
        flux = FLARE_NOISE_FLOOR
    estimate = math.floor((math.log10(flux) + 8) * 2)
    return int(clamp(estimate, ACTIVE_REGIONS_MIN, ACTIVE_REGIONS_MAX))
