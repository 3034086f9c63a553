"""
SPACEWATCH — Situation report generator.
Produces the four-section plain-English report: Status, Dynamics, Forecast, Physics.

Stylistic variety comes from a single primitive, the phrase picker: a callable that
chooses one of several equivalent phrasings. Production uses random_picker();
tests pass fixed_picker() for reproducible text.
"""
from __future__ import annotations

import math
import random
from collections.abc import Callable, Sequence

from config.settings import (
    DYNAMICS_HIGH_WIND,
    KP_ACTIVE,
    KP_STORM,
    KP_STORM_STRONG,
    KP_UNSETTLED,
    PHRASE_SEED,
)
from features.radiation import RadiationLevel
from features.solar_wind import SourceAttribution
from features.trend import Trend
from forecasting.outlook import ForecastOutlook
from utils.logger import get_logger

log = get_logger("forecasting.explainer")

PhrasePicker = Callable[[Sequence[str]], str]

SECTION_SEPARATOR = "\n\n"


# ── Phrase pickers ────────────────────────────────────────────

def random_picker(seed: int | str | None = None) -> PhrasePicker:
    """Uniform choice; a seed makes the sequence of picks reproducible."""
    if seed is None and PHRASE_SEED:
        seed = PHRASE_SEED
    rng = random.Random(seed)

    def pick(options: Sequence[str]) -> str:
        return options[rng.randrange(len(options))]

    return pick


def fixed_picker(index: int = 0) -> PhrasePicker:
    """Always the same variant (wrapped to the number of options)."""

    def pick(options: Sequence[str]) -> str:
        return options[index % len(options)]

    return pick


# ── Phrase tables ─────────────────────────────────────────────

# (min Kp, headline, equivalent phrasings, closing remark)
STATUS_TIERS = [
    (
        KP_STORM_STRONG,
        "Strong geomagnetic storm (G3).",
        ["The stability threshold is far exceeded.", "The geomagnetic field is under heavy load."],
        "Bright aurora is possible at mid latitudes.",
    ),
    (
        KP_STORM,
        "Moderate geomagnetic storm (G1-G2).",
        ["The geomagnetic stability threshold is exceeded.", "The magnetosphere is in an active phase of resistance."],
        "This is the planetary shield working as intended.",
    ),
    (
        KP_ACTIVE,
        "Active magnetosphere (K-index 4).",
        ["Activity is approaching the storm threshold.", "Elevated field fluctuations are being recorded."],
        "The critical threshold (G1) has not been crossed so far.",
    ),
    (
        KP_UNSETTLED,
        "Unsettled geomagnetic field.",
        ["Minor disturbances are observed.", "Within normal range, with slight instability."],
        "Conditions are favorable.",
    ),
]

QUIET_STATUS = [
    "Geomagnetic calm.",
    "Quiet geomagnetic conditions.",
    "The magnetosphere is at rest.",
]

KP_TREND_PHRASES = {
    Trend.RISING: "Disturbances are trending upward.",
    Trend.FALLING: "Activity is subsiding.",
    Trend.STABLE: "The situation is stable.",
}

WIND_TREND_PHRASES = {
    Trend.RISING: "Flow speed is rising sharply (shock arrival).",
    Trend.FALLING: "Wind speed is decreasing.",
    Trend.STABLE: "Flow speed is steady.",
}

SOURCE_NOTES = {
    SourceAttribution.CORONAL_HOLE: (
        "Wind is elevated while the radiation background stays nominal, the signature "
        "of a high-speed stream from a coronal hole (CH HSS)."
    ),
    SourceAttribution.CME: (
        "High wind speed is accompanied by a rising proton background, likely the "
        "impact of a coronal mass ejection (CME)."
    ),
    SourceAttribution.NONE: (
        "Wind speed sits at the high-speed threshold without a clear source signature."
    ),
}

FORECAST_RISING = ["increasing geomagnetic activity", "a rise in the Kp index"]
FORECAST_DECLINING = [
    "Stabilization of conditions",
    "A gradual decline in activity",
    "Fading disturbances",
]


def _round_half_up(value: float) -> int:
    """0.5 rounds up, unlike round()."""
    return int(math.floor(value + 0.5))


# ── Sections ──────────────────────────────────────────────────

def status_section(last_kp: float, trend: Trend, pick: PhrasePicker) -> str:
    trend_text = KP_TREND_PHRASES[trend]
    for min_kp, headline, phrasings, closing in STATUS_TIERS:
        if last_kp >= min_kp:
            return f"STATUS: {headline} {pick(phrasings)} {trend_text} {closing}"
    return (
        f"STATUS: {pick(QUIET_STATUS)} The field is stable, no disturbances registered. "
        "Ideal conditions."
    )


def dynamics_section(
    last_kp: float,
    avg_wind_speed: float,
    wind_density: float,
    trend: Trend,
    source: SourceAttribution,
) -> str:
    trend_text = WIND_TREND_PHRASES[trend]
    speed = _round_half_up(avg_wind_speed)

    if avg_wind_speed < DYNAMICS_HIGH_WIND:
        return (
            f"DYNAMICS: Solar wind parameters (speed {speed} km/s, density {wind_density:.1f} p/cm³) "
            f"are close to background levels. {trend_text}"
        )

    note = SOURCE_NOTES[source]
    if last_kp < KP_ACTIVE:
        # Bz is not measured here; northward orientation is inferred from the quiet Kp.
        return (
            f"DYNAMICS: {note} {trend_text} Despite the high speed ({speed} km/s), the current "
            "magnetic field configuration (Bz North) is assumed to be blocking energy transfer."
        )
    return (
        f"DYNAMICS: {note} {trend_text} The plasma flow ({speed} km/s) is pressing on the "
        "magnetosphere and sustaining activity."
    )


def forecast_section(outlook: ForecastOutlook, pick: PhrasePicker) -> str:
    if outlook is ForecastOutlook.RISING:
        return f"FORECAST: The NOAA model predicts {pick(FORECAST_RISING)} over the next 3-6 hours."
    if outlook is ForecastOutlook.DECLINING:
        return f"FORECAST: {pick(FORECAST_DECLINING)} expected over the coming hours."
    return "FORECAST: Models show no significant change ahead. The current trend is expected to hold."


def physics_section(radiation: RadiationLevel, proton_flux: float) -> str:
    if radiation is RadiationLevel.XRAY_FLARE:
        return (
            "PHYSICS: Alert! A powerful X-ray burst (class X) has been registered. Short-lived HF "
            "radio blackouts are possible on the dayside of Earth. There is no radiation threat "
            "at the surface."
        )
    if radiation is RadiationLevel.PROTON_EVENT:
        return (
            f"PHYSICS: A proton event (S-scale) is in progress. High-energy particle flux is "
            f"elevated ({_round_half_up(proton_flux)} pfu). Impact is limited to spacecraft and polar routes."
        )
    return (
        "PHYSICS: Solar X-ray and proton emission are at minimal levels (background). "
        "The radiation environment is nominal."
    )


def compose_sections(
    *,
    last_kp: float,
    kp_trend: Trend,
    avg_wind_speed: float,
    wind_density: float,
    wind_trend: Trend,
    source: SourceAttribution,
    outlook: ForecastOutlook,
    radiation: RadiationLevel,
    proton_flux: float,
    picker: PhrasePicker | None = None,
) -> list[str]:
    """The four report sections, in fixed order."""
    pick = picker or random_picker()
    return [
        status_section(last_kp, kp_trend, pick),
        dynamics_section(last_kp, avg_wind_speed, wind_density, wind_trend, source),
        forecast_section(outlook, pick),
        physics_section(radiation, proton_flux),
    ]


def synthesize_report(**inputs) -> str:
    """All sections joined by a blank line."""
    sections = compose_sections(**inputs)
    log.debug(f"Report composed: {len(sections)} sections")
    return SECTION_SEPARATOR.join(sections)
