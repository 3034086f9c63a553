"""
SPACEWATCH — Telemetry records and snapshot intake.
Typed, immutable samples for the five NOAA SWPC series plus the GOES flare-class mapping.
The fetch layer hands over plain dicts; snapshot_from_payload turns them into records.
"""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field

import pandas as pd

from config.settings import (
    BACKGROUND_FLARE_CLASS,
    FLARE_CLASS_DECADES,
    FLARE_SIGNIFICANT_FLUX,
)
from utils.helpers import safe_float
from utils.logger import get_logger

log = get_logger("data.telemetry")

_FLARE_CLASS_RE = re.compile(r"^\s*([ABCMX])\s*(\d+(?:\.\d+)?)", re.IGNORECASE)


# ── Flare classification ──────────────────────────────────────

def classify_flare(flux: float) -> str:
    """GOES class label for an X-ray flux in W/m², e.g. 6.2e-5 -> 'M6.2'."""
    flux = safe_float(flux)
    if flux <= 0:
        return BACKGROUND_FLARE_CLASS

    letter, base = FLARE_CLASS_DECADES[0]
    for cls_letter, lower in FLARE_CLASS_DECADES:
        if flux >= lower:
            letter, base = cls_letter, lower
    return f"{letter}{flux / base:.1f}"


def parse_flare_class(label: str | None) -> tuple[str, float]:
    """Split 'M6.2' into ('M', 6.2). Anything unreadable is background ('A', 0.0)."""
    match = _FLARE_CLASS_RE.match(label or "")
    if not match:
        return "A", 0.0
    return match.group(1).upper(), float(match.group(2))


# ── Records ───────────────────────────────────────────────────

@dataclass(frozen=True)
class KpSample:
    time: pd.Timestamp
    kp: float


@dataclass(frozen=True)
class WindSample:
    time: pd.Timestamp
    speed: float      # km/s
    density: float    # p/cm³


@dataclass(frozen=True)
class FlareSample:
    time: pd.Timestamp
    flux: float       # W/m²
    flare_class: str = ""

    def __post_init__(self):
        if not self.flare_class:
            object.__setattr__(self, "flare_class", classify_flare(self.flux))


@dataclass(frozen=True)
class DetectedFlare(FlareSample):
    """A flare-flux local maximum. Significance is always read off the flux."""

    @property
    def is_significant(self) -> bool:
        return self.flux >= FLARE_SIGNIFICANT_FLUX

    @classmethod
    def from_sample(cls, sample: FlareSample) -> "DetectedFlare":
        return cls(time=sample.time, flux=sample.flux, flare_class=sample.flare_class)

    def to_dict(self) -> dict:
        out = asdict(self)
        out["time"] = self.time.isoformat() if self.time is not None else None
        out["is_significant"] = self.is_significant
        return out


@dataclass(frozen=True)
class ProtonSample:
    time: pd.Timestamp
    flux: float       # pfu, >=10 MeV


@dataclass(frozen=True)
class ForecastSample:
    time: pd.Timestamp
    kp: float


@dataclass(frozen=True)
class TelemetrySnapshot:
    """One polling cycle's worth of data. Every series is ordered oldest → newest."""

    kp: tuple = field(default_factory=tuple)
    wind: tuple = field(default_factory=tuple)
    flares: tuple = field(default_factory=tuple)
    protons: tuple = field(default_factory=tuple)
    forecast: tuple = field(default_factory=tuple)
    is_demo: bool = False

    def __post_init__(self):
        for name in ("kp", "wind", "flares", "protons", "forecast"):
            object.__setattr__(self, name, tuple(getattr(self, name) or ()))


# ── Payload intake ────────────────────────────────────────────

_SERIES_SPECS = {
    # name: (required numeric columns, optional numeric columns with fill)
    "kp": (["kp"], {}),
    "wind": (["speed"], {"density": 0.0}),
    "flares": (["flux"], {}),
    "protons": (["flux"], {}),
    "forecast": (["kp"], {}),
}


def _clean_frame(name: str, rows) -> pd.DataFrame:
    """Coerce raw rows to a typed, time-sorted DataFrame, dropping unusable rows."""
    required, optional = _SERIES_SPECS[name]
    columns = ["time", *required, *optional]

    records = [r for r in (rows or []) if isinstance(r, dict)]
    skipped = len(rows or []) - len(records)
    if not records:
        if skipped:
            log.warning(f"{name}: dropped {skipped} non-record rows")
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame.from_records(records)
    for col in columns:
        if col not in df.columns:
            df[col] = None

    df["time"] = pd.to_datetime(df["time"], utc=True, format="ISO8601", errors="coerce")
    for col in [*required, *optional]:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    for col, fill in optional.items():
        df[col] = df[col].fillna(fill)

    bad = df[["time", *required]].isna().any(axis=1)
    skipped += int(bad.sum())
    if skipped:
        log.warning(f"{name}: dropped {skipped} malformed rows")

    return df.loc[~bad].sort_values("time", kind="stable").reset_index(drop=True)


def snapshot_from_payload(payload: dict | None) -> TelemetrySnapshot:
    """
    Build a TelemetrySnapshot from the fetch layer's plain-dict payload:
      {"kp": [{"time", "kp"}], "wind": [{"time", "speed", "density"}],
       "flares": [{"time", "flux", "class"?}], "protons": [{"time", "flux"}],
       "forecast": [{"time", "kp"}], "isDemo": bool}
    Never raises; bad rows are dropped and logged.
    """
    payload = payload if isinstance(payload, dict) else {}

    def series(name):
        rows = payload.get(name)
        return _clean_frame(name, rows if isinstance(rows, (list, tuple)) else [])

    kp_df = series("kp")
    wind_df = series("wind")
    flare_df = series("flares")
    proton_df = series("protons")
    forecast_df = series("forecast")

    if "class" in flare_df.columns:
        labels = flare_df["class"].where(flare_df["class"].notna(), "").astype(str)
    else:
        labels = pd.Series([""] * len(flare_df), dtype=str)

    is_demo = bool(payload.get("isDemo", payload.get("is_demo", False)))
    if is_demo:
        log.info("Snapshot flagged as demo data")

    return TelemetrySnapshot(
        kp=[KpSample(r.time, float(r.kp)) for r in kp_df.itertuples(index=False)],
        wind=[
            WindSample(r.time, float(r.speed), float(r.density))
            for r in wind_df.itertuples(index=False)
        ],
        flares=[
            FlareSample(t, float(f), lbl)
            for t, f, lbl in zip(flare_df["time"], flare_df["flux"], labels)
        ],
        protons=[ProtonSample(r.time, float(r.flux)) for r in proton_df.itertuples(index=False)],
        forecast=[ForecastSample(r.time, float(r.kp)) for r in forecast_df.itertuples(index=False)],
        is_demo=is_demo,
    )
