"""
SPACEWATCH — Global configuration and settings.
Window sizes, physical thresholds, scoring tables. Overrides from environment variables.
"""

import os
from pathlib import Path

# ── Project Paths ──────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOG_DIR = Path(os.environ.get("SPACEWATCH_LOG_DIR", PROJECT_ROOT / "logs"))

# ── Logging ────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("SPACEWATCH_LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.environ.get("SPACEWATCH_LOG_TO_FILE", "0") == "1"

# Seed for the production phrase picker (empty = true randomness)
PHRASE_SEED = os.environ.get("SPACEWATCH_PHRASE_SEED", "")

# ── Trailing Windows (samples) ─────────────────────────────────
WIND_WINDOW = 6       # solar wind speed, smoothed
FLARE_WINDOW = 12     # GOES X-ray flux
PROTON_WINDOW = 6     # >=10 MeV proton flux

# ── Flare Detection ────────────────────────────────────────────
FLARE_NOISE_FLOOR = 1e-8         # W/m², peaks must exceed this
FLARE_SIGNIFICANT_FLUX = 1e-6    # W/m², C1.0 and above

# Decade lower bounds (W/m²) for GOES classes, ascending
FLARE_CLASS_DECADES = [
    ("A", 1e-8),
    ("B", 1e-7),
    ("C", 1e-6),
    ("M", 1e-5),
    ("X", 1e-4),
]
BACKGROUND_FLARE_CLASS = "A0.0"

# ── Trend Dead-bands ───────────────────────────────────────────
KP_TREND_DEAD_BAND = 0.0
WIND_TREND_DEAD_BAND = 50.0  # km/s

# ── Source Attribution ─────────────────────────────────────────
HIGH_WIND_SPEED = 500.0      # km/s, strictly above
PROTON_STORM_FLUX = 10.0     # pfu, inclusive

# ── Danger Score Tables (threshold, points), first match wins ──
KP_SCORE_TABLE = [
    (7, 4),
    (5, 3),
    (4, 2),
    (3, 1),
]
WIND_SCORE_TABLE = [
    (700, 3),
    (500, 2),
    (400, 1),
]
FLARE_X_POINTS = 3
FLARE_M_STRONG_POINTS = 2    # M5.0 and above
FLARE_M_POINTS = 1
FLARE_M_STRONG_MANTISSA = 5.0

# Score → label cutoffs, descending
DANGER_LABEL_TABLE = [
    (5, "HIGH"),
    (3, "MODERATE"),
]

# ── Narrative Thresholds ───────────────────────────────────────
KP_STORM_STRONG = 7
KP_STORM = 5
KP_ACTIVE = 4
KP_UNSETTLED = 3
DYNAMICS_HIGH_WIND = 500.0   # km/s, inclusive

# ── Proton S-scale (threshold pfu, level, description) ─────────
PROTON_S_SCALE = [
    (100_000, "S5", "Extreme"),
    (10_000, "S4", "Severe"),
    (1_000, "S3", "Strong"),
    (100, "S2", "Moderate"),
    (10, "S1", "Minor"),
]

# ── Solar Wind Propagation ─────────────────────────────────────
L1_DISTANCE_KM = 1_500_000

# ── Active Region Estimate ─────────────────────────────────────
ACTIVE_REGIONS_MIN = 2
ACTIVE_REGIONS_MAX = 8

# Color palette for consistent theming
COLORS = {
    "BACKGROUND": "#00e676",
    "MODERATE": "#ffca28",
    "HIGH": "#ff1744",
}
