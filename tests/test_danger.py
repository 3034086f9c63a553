import itertools

import pytest

from risk.danger import DangerLevel, danger_label, score_components, score_danger


@pytest.mark.parametrize(
    "kp, points",
    [(0, 0), (2.67, 0), (3, 1), (4, 2), (4.67, 2), (5, 3), (6.9, 3), (7, 4), (9, 4)],
)
def test_kp_points(kp, points):
    assert score_components(kp, 0, "A0.0")["Kp"] == points


@pytest.mark.parametrize(
    "speed, points",
    [(0, 0), (399.9, 0), (400, 1), (499, 1), (500, 2), (699, 2), (700, 3), (950, 3)],
)
def test_wind_points(speed, points):
    assert score_components(0, speed, "A0.0")["Wind"] == points


@pytest.mark.parametrize(
    "flare_class, points",
    [("A0.0", 0), ("B5.0", 0), ("C9.9", 0), ("M1.0", 1), ("M4.9", 1), ("M5.0", 2), ("M9.9", 2), ("X1.2", 3)],
)
def test_flare_points(flare_class, points):
    assert score_components(0, 0, flare_class)["Flare"] == points


@pytest.mark.parametrize(
    "score, label",
    [(0, DangerLevel.BACKGROUND), (2, DangerLevel.BACKGROUND), (3, DangerLevel.MODERATE),
     (4, DangerLevel.MODERATE), (5, DangerLevel.HIGH), (10, DangerLevel.HIGH)],
)
def test_label_cutoffs_are_inclusive(score, label):
    assert danger_label(score) is label


def test_score_is_additive():
    index = score_danger(5, 650, "M6.2")
    assert index.score == 3 + 2 + 2
    assert index.label is DangerLevel.HIGH


def test_max_score_is_ten():
    assert score_danger(9, 900, "X9.9").score == 10


KPS = [0, 3, 4, 5, 7, 9]
WINDS = [300, 400, 500, 700]
FLARES = ["B1.0", "M1.0", "M5.0", "X1.0"]


@pytest.mark.parametrize("wind, flare", list(itertools.product(WINDS, FLARES)))
def test_monotonic_in_kp(wind, flare):
    scores = [score_danger(kp, wind, flare).score for kp in KPS]
    assert scores == sorted(scores)


@pytest.mark.parametrize("kp, flare", list(itertools.product(KPS, FLARES)))
def test_monotonic_in_wind(kp, flare):
    scores = [score_danger(kp, w, flare).score for w in WINDS]
    assert scores == sorted(scores)


@pytest.mark.parametrize("kp, wind", list(itertools.product(KPS, WINDS)))
def test_monotonic_in_flare(kp, wind):
    scores = [score_danger(kp, wind, f).score for f in FLARES]
    assert scores == sorted(scores)


def test_to_dict_carries_color():
    assert score_danger(0, 0, "A0.0").to_dict() == {"score": 0, "label": "BACKGROUND", "color": "#00e676"}
    assert score_danger(9, 900, "X1.0").to_dict()["color"] == "#ff1744"
