"""
SPACEWATCH — Composite Danger Index.
Adds independent points for geomagnetic activity (Kp), solar wind speed and X-ray flare
class, then buckets the 0-10 total into BACKGROUND / MODERATE / HIGH.

Contributions are additive and independent; the score is monotonic in each input.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from config.settings import (
    COLORS,
    DANGER_LABEL_TABLE,
    FLARE_M_POINTS,
    FLARE_M_STRONG_MANTISSA,
    FLARE_M_STRONG_POINTS,
    FLARE_X_POINTS,
    KP_SCORE_TABLE,
    WIND_SCORE_TABLE,
)
from data.telemetry import parse_flare_class
from utils.logger import get_logger

log = get_logger("risk.danger")


class DangerLevel(str, Enum):
    BACKGROUND = "BACKGROUND"
    MODERATE = "MODERATE"
    HIGH = "HIGH"

    @property
    def color(self) -> str:
        return COLORS[self.value]


@dataclass(frozen=True)
class DangerIndex:
    score: int
    label: DangerLevel

    def to_dict(self) -> dict:
        return {"score": self.score, "label": self.label.value, "color": self.label.color}


def _points(value: float, table: list[tuple[float, int]]) -> int:
    """First row whose threshold the value reaches; tables run high → low."""
    for threshold, points in table:
        if value >= threshold:
            return points
    return 0


def _score_kp(last_kp: float) -> int:
    return _points(last_kp, KP_SCORE_TABLE)


def _score_wind(avg_wind_speed: float) -> int:
    return _points(avg_wind_speed, WIND_SCORE_TABLE)


def _score_flare(avg_flare_class: str) -> int:
    letter, mantissa = parse_flare_class(avg_flare_class)
    if letter == "X":
        return FLARE_X_POINTS
    if letter == "M":
        return FLARE_M_STRONG_POINTS if mantissa >= FLARE_M_STRONG_MANTISSA else FLARE_M_POINTS
    return 0


def score_components(last_kp: float, avg_wind_speed: float, avg_flare_class: str) -> dict[str, int]:
    """Per-signal points, for auditing the composite."""
    return {
        "Kp": _score_kp(last_kp),
        "Wind": _score_wind(avg_wind_speed),
        "Flare": _score_flare(avg_flare_class),
    }


def danger_label(score: int) -> DangerLevel:
    for cutoff, label in DANGER_LABEL_TABLE:
        if score >= cutoff:
            return DangerLevel(label)
    return DangerLevel.BACKGROUND


def score_danger(last_kp: float, avg_wind_speed: float, avg_flare_class: str) -> DangerIndex:
    """
    Danger index from the latest Kp, the 6-sample mean wind speed and the class of
    the 12-sample mean X-ray flux.
    """
    components = score_components(last_kp, avg_wind_speed, avg_flare_class)
    score = sum(components.values())
    index = DangerIndex(score=score, label=danger_label(score))
    log.debug(f"Danger {index.score} ({index.label.value}) from {components}")
    return index
