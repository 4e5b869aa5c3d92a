"""
Tests for the closed-form moist-air property functions.

All values in SI: kPa, °C, kg/kg, kJ/kg.
"""

import pytest
import psychrolib

from psychcalc.config import DEFAULT_PRESSURE_SI
from psychcalc.engine.errors import DomainInvalidError
from psychcalc.engine.properties import (
    part_press,
    hum_rat,
    hum_rat2,
    hum_rat_from_dew_point,
    hum_rat_from_enthalpy,
    rel_hum,
    rel_hum2,
    enthalpy_air_h2o,
    dew_point,
    dry_air_density,
    std_press,
    std_temp,
)
from psychcalc.engine.saturation import sat_press

P = DEFAULT_PRESSURE_SI


def approx(value: float, rel_tol: float = 0.01, abs_tol: float = 1e-6):
    return pytest.approx(value, rel=rel_tol, abs=abs_tol)


# ---------------------------------------------------------------------------
# Humidity ratio
# ---------------------------------------------------------------------------

class TestHumRatFromRH:
    def test_20c_50pct(self):
        assert hum_rat2(20.0, 0.5, P) == approx(0.007262, rel_tol=0.002)

    def test_dry_air(self):
        assert hum_rat2(20.0, 0.0, P) == 0.0

    def test_strictly_increasing_in_rh(self):
        values = [hum_rat2(25.0, rh / 10.0, P) for rh in range(0, 11)]
        assert all(b > a for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("Tdb,RH", [(-20.0, 0.7), (0.0, 0.3), (24.0, 0.5), (45.0, 0.9)])
    def test_round_trip_through_rel_hum2(self, Tdb, RH):
        W = hum_rat2(Tdb, RH, P)
        assert rel_hum2(Tdb, W, P) == pytest.approx(RH, abs=1e-4)


class TestHumRatFromWetBulb:
    def test_reference_scenario(self):
        """24 °C db / 17 °C wb at sea level."""
        assert hum_rat(24.0, 17.0, P) == approx(0.00922, abs_tol=0.0003)

    def test_saturated_equals_sat_hum_rat(self):
        assert hum_rat(20.0, 20.0, P) == approx(hum_rat2(20.0, 1.0, P), rel_tol=1e-9)

    def test_saturated_below_freezing(self):
        assert hum_rat(-10.0, -10.0, P) == approx(hum_rat2(-10.0, 1.0, P), rel_tol=1e-9)

    def test_zero_dry_bulb_uses_liquid_branch(self):
        Twb = -2.0
        Pws = sat_press(Twb)
        Ws = 0.62198 * Pws / (P - Pws)
        expected = ((2501 - 2.326 * Twb) * Ws - 1.006 * (0.0 - Twb)) / (2501 - 4.186 * Twb)
        assert hum_rat(0.0, Twb, P) == pytest.approx(expected, rel=1e-12)

    def test_negative_dry_bulb_uses_ice_branch(self):
        Tdb, Twb = -5.0, -6.0
        Pws = sat_press(Twb)
        Ws = 0.62198 * Pws / (P - Pws)
        expected = ((2830 - 0.24 * Twb) * Ws - 1.006 * (Tdb - Twb)) / (2830 + 1.86 * Tdb - 2.1 * Twb)
        assert hum_rat(Tdb, Twb, P) == pytest.approx(expected, rel=1e-12)


class TestHumRatOtherInputs:
    def test_from_dew_point_matches_saturation_at_dew_point(self):
        assert hum_rat_from_dew_point(15.0, P) == approx(hum_rat2(15.0, 1.0, P), rel_tol=0.001)

    def test_from_enthalpy_inverts_enthalpy(self):
        h = enthalpy_air_h2o(30.0, 0.012)
        assert hum_rat_from_enthalpy(30.0, h) == pytest.approx(0.012, rel=1e-12)


# ---------------------------------------------------------------------------
# Relative humidity
# ---------------------------------------------------------------------------

class TestRelHum:
    def test_reference_scenario(self):
        assert rel_hum(24.0, 17.0, P) == approx(0.50, abs_tol=0.01)

    def test_saturated(self):
        assert rel_hum(20.0, 20.0, P) == approx(1.0, rel_tol=1e-9)

    def test_rel_hum2_uses_partial_pressure(self):
        W = 0.01
        assert rel_hum2(25.0, W, P) == pytest.approx(part_press(P, W) / sat_press(25.0))


# ---------------------------------------------------------------------------
# Enthalpy, dew point, density
# ---------------------------------------------------------------------------

class TestEnthalpy:
    def test_dry_air_at_zero(self):
        assert enthalpy_air_h2o(0.0, 0.0) == 0.0

    def test_20c_50pct(self):
        W = hum_rat2(20.0, 0.5, P)
        assert enthalpy_air_h2o(20.0, W) == approx(38.55, rel_tol=0.002)


class TestDewPoint:
    def test_above_freezing_fit(self):
        W = hum_rat2(20.0, 0.5, P)
        assert dew_point(P, W) == approx(9.3, abs_tol=0.1)

    def test_below_freezing_fit(self):
        # First fit goes negative here so the second fit is returned
        W = hum_rat2(-10.0, 1.0, P)
        assert dew_point(P, W) == approx(-10.0, abs_tol=0.2)

    def test_saturated_dew_point_equals_dry_bulb(self):
        W = hum_rat2(30.0, 1.0, P)
        assert dew_point(P, W) == approx(30.0, abs_tol=0.2)

    def test_zero_humidity_ratio_raises(self):
        with pytest.raises(DomainInvalidError):
            dew_point(P, 0.0)


class TestDensity:
    def test_dry_air_20c(self):
        assert dry_air_density(P, 20.0, 0.0) == approx(1.2041, rel_tol=0.001)

    def test_moisture_lowers_dry_air_density(self):
        assert dry_air_density(P, 20.0, 0.01) < dry_air_density(P, 20.0, 0.0)


# ---------------------------------------------------------------------------
# Standard atmosphere
# ---------------------------------------------------------------------------

class TestStandardAtmosphere:
    def test_sea_level(self):
        assert std_press(0.0) == pytest.approx(101.325)
        assert std_temp(0.0) == pytest.approx(15.0)

    def test_1000m(self):
        assert std_press(1000.0) == approx(89.875, rel_tol=0.001)
        assert std_temp(1000.0) == pytest.approx(8.5)

    def test_below_sea_level(self):
        assert std_press(-500.0) > 101.325


# ---------------------------------------------------------------------------
# Cross-check with psychrolib
# ---------------------------------------------------------------------------

class TestPsychrolibCrossCheck:
    def setup_method(self):
        psychrolib.SetUnitSystem(psychrolib.SI)
        self.P_pa = P * 1000.0

    def test_hum_ratio_from_rh(self):
        expected = psychrolib.GetHumRatioFromRelHum(25.0, 0.6, self.P_pa)
        assert hum_rat2(25.0, 0.6, P) == approx(expected, rel_tol=0.01)

    def test_hum_ratio_from_wet_bulb(self):
        expected = psychrolib.GetHumRatioFromTWetBulb(30.0, 22.0, self.P_pa)
        assert hum_rat(30.0, 22.0, P) == approx(expected, rel_tol=0.01)

    def test_dew_point(self):
        W = 0.01
        expected = psychrolib.GetTDewPointFromHumRatio(25.0, W, self.P_pa)
        assert dew_point(P, W) == approx(expected, abs_tol=0.2)

    def test_enthalpy(self):
        expected = psychrolib.GetMoistAirEnthalpy(25.0, 0.01) / 1000.0
        assert enthalpy_air_h2o(25.0, 0.01) == approx(expected, rel_tol=0.005)

    def test_specific_volume(self):
        expected = psychrolib.GetMoistAirVolume(25.0, 0.01, self.P_pa)
        assert 1.0 / dry_air_density(P, 25.0, 0.01) == approx(expected, rel_tol=0.002)

    def test_standard_pressure(self):
        expected = psychrolib.GetStandardAtmPressure(2000.0) / 1000.0
        assert std_press(2000.0) == pytest.approx(expected, rel=1e-9)
