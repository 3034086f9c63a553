"""
SPACEWATCH — Master analysis engine.
Orchestrates: snapshot → window means → flare peaks → trends → source attribution
→ danger index → forecast comparison → situation report.

The engine keeps no state between calls. The caller owns the previous cycle's
snapshot and passes it in when it wants trends measured against it.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from config.settings import FLARE_WINDOW, PROTON_WINDOW, WIND_WINDOW
from data.telemetry import DetectedFlare, TelemetrySnapshot, classify_flare
from features.aurora import aurora_outlook
from features.flares import (
    active_region_count,
    detect_flare_peaks,
    flare_intensity,
    significant_flares,
)
from features.radiation import RadiationLevel, classify_radiation, proton_scale
from features.solar_wind import SourceAttribution, attribute_source, l1_travel_time
from features.trend import Trend, kp_state, kp_trend, previous_kp, wind_trend
from features.windows import average, window_pair
from forecasting.explainer import SECTION_SEPARATOR, PhrasePicker, compose_sections, random_picker
from forecasting.outlook import ForecastOutlook, compare_forecast, next_forecast_kp
from risk.danger import DangerIndex, score_components, score_danger
from utils.helpers import last_value
from utils.logger import get_logger

log = get_logger("forecasting.engine")


@dataclass(frozen=True)
class SituationAnalysis:
    """Everything the presentation layer renders for one cycle."""

    danger: DangerIndex
    flares: list[DetectedFlare]
    significant_flares: list[DetectedFlare]
    sections: list[str]
    kp_trend: Trend
    wind_trend: Trend
    source: SourceAttribution
    forecast_outlook: ForecastOutlook
    radiation: RadiationLevel
    metrics: dict = field(default_factory=dict)
    readouts: dict = field(default_factory=dict)
    is_demo: bool = False

    @property
    def report(self) -> str:
        return SECTION_SEPARATOR.join(self.sections)

    @property
    def is_coronal_hole_source(self) -> bool:
        return self.source is SourceAttribution.CORONAL_HOLE

    @property
    def is_cme_source(self) -> bool:
        return self.source is SourceAttribution.CME

    def to_dict(self) -> dict:
        return {
            "danger": self.danger.to_dict(),
            "flares": [f.to_dict() for f in self.flares],
            "significant_flares": [f.to_dict() for f in self.significant_flares],
            "report": self.report,
            "sections": list(self.sections),
            "kp_trend": self.kp_trend.value,
            "wind_trend": self.wind_trend.value,
            "source": self.source.value,
            "forecast_outlook": self.forecast_outlook.value,
            "radiation": self.radiation.value,
            "metrics": dict(self.metrics),
            "readouts": dict(self.readouts),
            "is_demo": self.is_demo,
        }


class AnalysisEngine:
    """
    Runs the full space-weather analysis over one snapshot.
    Safe to call repeatedly; each call is independent of the last.
    """

    def __init__(self, picker: PhrasePicker | None = None):
        self.picker = picker or random_picker()

    def analyze(
        self,
        snapshot: TelemetrySnapshot,
        prior: TelemetrySnapshot | None = None,
    ) -> SituationAnalysis:
        """
        Full analysis of `snapshot`. `prior` is the previous cycle's snapshot. Its
        samples only count when they are older than the current window, so an
        overlapping prior gives the same trends as the history inside `snapshot`.
        """
        if snapshot.is_demo:
            log.warning("Analyzing demo telemetry (upstream fetch degraded)")

        # 1. Window means
        last_kp = last_value(snapshot.kp, "kp")
        prev_kp = previous_kp(snapshot.kp, prior.kp if prior is not None else None)

        avg_wind, prev_wind = window_pair(
            snapshot.wind, "speed", WIND_WINDOW,
            prior=prior.wind if prior is not None else None,
        )
        avg_flux = average(snapshot.flares, "flux", FLARE_WINDOW)
        avg_proton = average(snapshot.protons, "flux", PROTON_WINDOW)
        avg_flare_class = classify_flare(avg_flux)

        current_proton = last_value(snapshot.protons, "flux")
        current_density = last_value(snapshot.wind, "density")

        # 2. Flare peaks
        peaks = detect_flare_peaks(snapshot.flares)

        # 3. Classifications
        k_trend = kp_trend(last_kp, prev_kp)
        w_trend = wind_trend(avg_wind, prev_wind)
        source = attribute_source(avg_wind, current_proton)
        outlook = compare_forecast(snapshot.forecast, last_kp)
        radiation = classify_radiation(avg_flare_class, avg_proton)

        # 4. Danger index
        danger = score_danger(last_kp, avg_wind, avg_flare_class)

        # 5. Report
        sections = compose_sections(
            last_kp=last_kp,
            kp_trend=k_trend,
            avg_wind_speed=avg_wind,
            wind_density=current_density,
            wind_trend=w_trend,
            source=source,
            outlook=outlook,
            radiation=radiation,
            proton_flux=current_proton,
            picker=self.picker,
        )

        log.info(
            f"Danger {danger.score} {danger.label.value} | Kp {last_kp:.1f} {k_trend.value} | "
            f"wind {avg_wind:.0f} km/s {w_trend.value} | source {source.value} | "
            f"{len(peaks)} flare peaks"
        )

        return SituationAnalysis(
            danger=danger,
            flares=peaks,
            significant_flares=significant_flares(peaks),
            sections=sections,
            kp_trend=k_trend,
            wind_trend=w_trend,
            source=source,
            forecast_outlook=outlook,
            radiation=radiation,
            metrics={
                "last_kp": last_kp,
                "prev_kp": prev_kp,
                "next_forecast_kp": next_forecast_kp(snapshot.forecast, last_kp),
                "avg_wind_speed": avg_wind,
                "prev_wind_speed": prev_wind,
                "avg_flare_flux": avg_flux,
                "avg_flare_class": avg_flare_class,
                "avg_proton_flux": avg_proton,
                "score_components": score_components(last_kp, avg_wind, avg_flare_class),
            },
            readouts=current_readouts(snapshot),
            is_demo=snapshot.is_demo,
        )


def current_readouts(snapshot: TelemetrySnapshot) -> dict:
    """Latest-sample badges: Kp state, wind arrival time, flare intensity, S-scale, aurora."""
    kp = last_value(snapshot.kp, "kp")
    wind_speed = last_value(snapshot.wind, "speed")
    flare_flux = last_value(snapshot.flares, "flux")
    flare_class = snapshot.flares[-1].flare_class if snapshot.flares else classify_flare(0.0)
    proton_flux = last_value(snapshot.protons, "flux")
    hours, minutes = l1_travel_time(wind_speed)

    return {
        "kp": kp,
        "kp_state": kp_state(kp),
        "wind_speed": wind_speed,
        "wind_density": last_value(snapshot.wind, "density"),
        "travel_time": {"hours": hours, "minutes": minutes},
        "flare_class": flare_class,
        "flare_flux": flare_flux,
        "flare_intensity": flare_intensity(flare_class),
        "active_regions": active_region_count(flare_flux),
        "proton_flux": proton_flux,
        "proton_scale": proton_scale(proton_flux),
        "aurora": aurora_outlook(kp),
    }
