"""
Tests for the Newton-Raphson wet-bulb solver.
"""

import pytest
import psychrolib

from psychcalc.config import DEFAULT_PRESSURE_SI
from psychcalc.engine.errors import ConvergenceError
from psychcalc.engine.properties import rel_hum
from psychcalc.engine.wet_bulb import wet_bulb

P = DEFAULT_PRESSURE_SI


# ---------------------------------------------------------------------------
# Converged results
# ---------------------------------------------------------------------------

class TestWetBulb:
    def test_20c_50pct(self):
        # Expected ~13.7-13.8 °C
        assert 13.5 <= wet_bulb(20.0, 0.5, P) <= 14.0

    def test_recovers_reference_wet_bulb(self):
        RH = rel_hum(24.0, 17.0, P)
        assert wet_bulb(24.0, RH, P) == pytest.approx(17.0, abs=0.01)

    def test_saturated_equals_dry_bulb(self):
        assert wet_bulb(25.0, 1.0, P) == pytest.approx(25.0, abs=1e-9)

    def test_saturated_below_freezing(self):
        assert wet_bulb(-8.0, 1.0, P) == pytest.approx(-8.0, abs=1e-9)

    def test_below_dry_bulb_when_unsaturated(self):
        assert wet_bulb(35.0, 0.3, P) < 35.0

    @pytest.mark.parametrize("Tdb,RH", [(-15.0, 0.6), (0.0, 0.4), (24.0, 0.5), (40.0, 0.2), (60.0, 0.8)])
    def test_round_trip_rel_hum(self, Tdb, RH):
        Twb = wet_bulb(Tdb, RH, P)
        assert rel_hum(Tdb, Twb, P) == pytest.approx(RH, rel=1e-4)

    def test_high_altitude(self):
        P_denver = 83.4
        Twb = wet_bulb(30.0, 0.25, P_denver)
        assert rel_hum(30.0, Twb, P_denver) == pytest.approx(0.25, rel=1e-4)

    def test_matches_psychrolib(self):
        psychrolib.SetUnitSystem(psychrolib.SI)
        expected = psychrolib.GetTWetBulbFromRelHum(30.0, 0.4, P * 1000.0)
        assert wet_bulb(30.0, 0.4, P) == pytest.approx(expected, abs=0.1)


# ---------------------------------------------------------------------------
# Failure modes
# ---------------------------------------------------------------------------

class TestWetBulbConvergence:
    def test_zero_target_raises(self):
        with pytest.raises(ConvergenceError):
            wet_bulb(20.0, 0.0, P)

    def test_near_zero_target_raises(self):
        with pytest.raises(ConvergenceError):
            wet_bulb(20.0, 1e-12, P)

    def test_iteration_cap(self):
        with pytest.raises(ConvergenceError) as exc_info:
            wet_bulb(30.0, 0.5, P, max_iter=1)
        assert exc_info.value.iterations == 1

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            wet_bulb(20.0, 0.0, P)
