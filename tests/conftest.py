import sys
from pathlib import Path

import pandas as pd
import pytest


BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from data.telemetry import (  # noqa: E402
    FlareSample,
    ForecastSample,
    KpSample,
    ProtonSample,
    TelemetrySnapshot,
    WindSample,
)
from forecasting.explainer import fixed_picker  # noqa: E402


START = pd.Timestamp("2024-05-10T00:00:00Z")


def stamp(i, minutes=1):
    return START + pd.Timedelta(minutes=i * minutes)


def kp_series(values, start=0):
    return [KpSample(stamp(start + i, 180), float(v)) for i, v in enumerate(values)]


def wind_series(speeds, density=5.0, start=0):
    return [WindSample(stamp(start + i), float(s), density) for i, s in enumerate(speeds)]


def flare_series(fluxes):
    return [FlareSample(stamp(i), float(f)) for i, f in enumerate(fluxes)]


def proton_series(fluxes):
    return [ProtonSample(stamp(i, 5), float(f)) for i, f in enumerate(fluxes)]


def forecast_series(values):
    return [ForecastSample(stamp(i, 180), float(v)) for i, v in enumerate(values)]


@pytest.fixture
def picker():
    return fixed_picker(0)


@pytest.fixture
def storm_snapshot():
    """Kp 3 → 5, wind 550 → 650 km/s, M6.2-level flux, quiet protons."""
    return TelemetrySnapshot(
        kp=kp_series([3, 3, 5]),
        wind=wind_series([550] * 6 + [650] * 6, density=7.25),
        flares=flare_series([6.2e-5] * 12),
        protons=proton_series([3] * 6),
        forecast=forecast_series([5, 6, 4]),
    )


@pytest.fixture
def quiet_snapshot():
    return TelemetrySnapshot(
        kp=kp_series([1, 1.3, 1]),
        wind=wind_series([350] * 12, density=3.0),
        flares=flare_series([2e-8, 5e-8, 3e-8, 4e-8]),
        protons=proton_series([0.3] * 6),
        forecast=forecast_series([1, 1]),
    )
