import pytest

from conftest import forecast_series, kp_series
from features.aurora import aurora_outlook
from features.radiation import RadiationLevel, classify_radiation, proton_scale
from features.solar_wind import SourceAttribution, attribute_source, l1_travel_time
from features.trend import (
    Trend,
    classify_trend,
    kp_state,
    kp_trend,
    previous_kp,
    wind_trend,
)
from forecasting.outlook import ForecastOutlook, compare_forecast, next_forecast_kp


# ── Trend ─────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "current, previous, expected",
    [(5, 3, Trend.RISING), (3, 5, Trend.FALLING), (4, 4, Trend.STABLE), (4.33, 4.0, Trend.RISING)],
)
def test_kp_trend_has_no_dead_band(current, previous, expected):
    assert kp_trend(current, previous) is expected


@pytest.mark.parametrize(
    "current, previous, expected",
    [
        (650, 600, Trend.STABLE),
        (650, 700, Trend.STABLE),
        (650, 599, Trend.RISING),
        (650, 701, Trend.FALLING),
        (500, 500, Trend.STABLE),
    ],
)
def test_wind_trend_dead_band_is_50(current, previous, expected):
    assert wind_trend(current, previous) is expected


def test_classify_trend_generic_dead_band():
    assert classify_trend(10, 7, dead_band=3) is Trend.STABLE
    assert classify_trend(10, 6.9, dead_band=3) is Trend.RISING
    assert classify_trend(6.9, 10, dead_band=3) is Trend.FALLING


def test_previous_kp_sources():
    assert previous_kp(kp_series([2, 3, 5])) == 3.0
    assert previous_kp(kp_series([5])) == 5.0
    assert previous_kp([]) == 0.0
    assert previous_kp(kp_series([5], start=2), prior=kp_series([1, 2])) == 2.0


def test_previous_kp_skips_prior_readings_not_older_than_latest():
    kp = kp_series([3, 3, 5])
    # previous cycle saw the same 3-hour readings
    assert previous_kp(kp, prior=kp) == 3.0
    assert previous_kp(kp_series([4, 6]), prior=kp_series([1, 2, 3])) == 4.0
    assert previous_kp(kp_series([5]), prior=kp_series([1])) == 5.0


def test_kp_state():
    assert kp_state(3.67) == "QUIET"
    assert kp_state(4) == "ACTIVE"
    assert kp_state(5) == "STORM"


# ── Source attribution ────────────────────────────────────────

@pytest.mark.parametrize(
    "wind, proton, expected",
    [
        (600, 2, SourceAttribution.CORONAL_HOLE),
        (600, 50, SourceAttribution.CME),
        (300, 50, SourceAttribution.NONE),
        (500, 50, SourceAttribution.NONE),
        (501, 10, SourceAttribution.CME),
        (501, 9.99, SourceAttribution.CORONAL_HOLE),
    ],
)
def test_attribute_source(wind, proton, expected):
    assert attribute_source(wind, proton) is expected


def test_l1_travel_time():
    assert l1_travel_time(500) == (0, 50)
    assert l1_travel_time(250) == (1, 40)
    assert l1_travel_time(0) == (0, 0)
    assert l1_travel_time(-10) == (0, 0)


# ── Radiation ─────────────────────────────────────────────────

def test_classify_radiation_priority():
    assert classify_radiation("X1.0", 500) is RadiationLevel.XRAY_FLARE
    assert classify_radiation("M9.9", 10) is RadiationLevel.PROTON_EVENT
    assert classify_radiation("M9.9", 9.9) is RadiationLevel.BACKGROUND
    assert classify_radiation("A0.0", 0) is RadiationLevel.BACKGROUND


@pytest.mark.parametrize(
    "flux, level",
    [(0, "S0"), (9.9, "S0"), (10, "S1"), (150, "S2"), (1_000, "S3"), (20_000, "S4"), (100_000, "S5")],
)
def test_proton_scale(flux, level):
    scale = proton_scale(flux)
    assert scale["level"] == level
    assert scale["storm"] is (level != "S0")


# ── Forecast comparison ───────────────────────────────────────

def test_next_forecast_kp_falls_back_to_current():
    assert next_forecast_kp([], 4.0) == 4.0
    assert next_forecast_kp(forecast_series([6]), 4.0) == 4.0
    assert next_forecast_kp(forecast_series([6, 2]), 4.0) == 2.0


def test_compare_forecast():
    assert compare_forecast(forecast_series([3, 5]), 4) is ForecastOutlook.RISING
    assert compare_forecast(forecast_series([5, 3]), 4) is ForecastOutlook.DECLINING
    assert compare_forecast(forecast_series([3, 2]), 3) is ForecastOutlook.UNCHANGED
    assert compare_forecast(forecast_series([4, 4]), 4) is ForecastOutlook.UNCHANGED
    assert compare_forecast(forecast_series([9]), 7) is ForecastOutlook.UNCHANGED


# ── Aurora ────────────────────────────────────────────────────

def test_aurora_outlook_tiers():
    assert "polar" in aurora_outlook(2)["outlook"]
    assert "Tromsø" in aurora_outlook(3)["locations"]
    assert "Helsinki" in aurora_outlook(6)["locations"]
    assert "Berlin" in aurora_outlook(8)["locations"]
