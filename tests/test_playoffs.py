import math

import pytest

from simprep.ratings import apply_playoff_adjustment, playoff_intensity


def _low_segment(x: float) -> float:
    return 1 + (0.0001066667 * x**3 - 0.0158 * x**2 + 0.7803333333 * x - 12.83)


def _high_segment(x: float) -> float:
    return 1 + (0.0000266667 * x**3 - 0.0056 * x**2 + 0.3933333333 * x - 9.05)


def test_flat_bonus_below_45():
    assert playoff_intensity(0) == pytest.approx(1.01)
    assert playoff_intensity(44.999) == pytest.approx(1.01)


def test_flat_cap_above_75():
    assert playoff_intensity(75.001) == pytest.approx(1.2)
    assert playoff_intensity(140) == pytest.approx(1.2)


def test_boundary_45_uses_low_cubic():
    assert playoff_intensity(45) == pytest.approx(_low_segment(45), rel=1e-12)
    assert playoff_intensity(45) == pytest.approx(1.0100030, abs=1e-6)


def test_boundary_60_uses_high_cubic():
    assert playoff_intensity(59.999) == pytest.approx(_low_segment(59.999), rel=1e-12)
    assert playoff_intensity(60) == pytest.approx(_high_segment(60), rel=1e-12)
    assert playoff_intensity(60) == pytest.approx(1.1500072, abs=1e-6)


def test_boundary_75_uses_high_cubic():
    assert playoff_intensity(75) == pytest.approx(_high_segment(75), rel=1e-12)
    assert playoff_intensity(75) == pytest.approx(1.2000141, abs=1e-6)


def test_out_of_domain_inputs_do_not_raise():
    assert playoff_intensity(-20) == pytest.approx(1.01)
    assert playoff_intensity(math.nan) == 1.0


def test_apply_playoff_adjustment_by_rating_kind():
    values = {
        "pace": 0.5,
        "turnovers": 0.5,
        "fouling": 0.4,
        "drawing_fouls": 0.6,
        "endurance": 0.5,
        "usage": 0.5,
    }

    apply_playoff_adjustment(values, 80)

    assert values["pace"] == pytest.approx(0.6)
    assert values["turnovers"] == pytest.approx(0.5 / 1.2)
    assert values["fouling"] == pytest.approx(0.4 / 1.2)
    assert values["drawing_fouls"] == pytest.approx(0.51)
    assert values["endurance"] == pytest.approx(0.55)
    assert values["usage"] == pytest.approx(0.55)


def test_drawing_fouls_dampening_ignores_ovr():
    low = {"drawing_fouls": 1.0}
    high = {"drawing_fouls": 1.0}

    apply_playoff_adjustment(low, 30)
    apply_playoff_adjustment(high, 90)

    assert low["drawing_fouls"] == high["drawing_fouls"] == pytest.approx(0.85)
