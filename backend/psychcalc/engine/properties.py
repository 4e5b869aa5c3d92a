"""
Closed-form moist-air property functions.

All functions work in SI units: pressure in kPa, temperatures in °C,
humidity ratio in kg water / kg dry air, enthalpy in kJ/kg dry air.
Equation numbers refer to ASHRAE Fundamentals handbook (2005), chapter 6.
"""

import math

from psychcalc.engine.errors import DomainInvalidError
from psychcalc.engine.saturation import sat_press

# Ratio of molecular masses of water vapor and dry air
_EPSILON = 0.62198
# Same ratio as given in the 2009 Fundamentals, chapter 1, eq 20
_EPSILON_2009 = 0.621945

# Specific heats and latent heats [kJ/kg]
_CP_DRY_AIR = 1.006
_CP_VAPOR = 1.86
_HFG_0C = 2501.0

_R_DRY_AIR = 287.055  # J/(kg·K)

# Dew point fit, eq 39
_C14 = 6.54
_C15 = 14.526
_C16 = 0.7389
_C17 = 0.09486
_C18 = 0.4569


def part_press(P: float, W: float) -> float:
    """Partial vapor pressure [kPa] (eq 38)."""
    return P * W / (_EPSILON + W)


def hum_rat(Tdb: float, Twb: float, P: float) -> float:
    """
    Humidity ratio from dry-bulb and wet-bulb temperatures.

    Above freezing (Tdb >= 0) the wet-bulb energy balance over liquid water
    is used (eq 35); below freezing the one over ice (eq 37).
    """
    Pws = sat_press(Twb)
    Ws = _EPSILON * Pws / (P - Pws)  # eq 23
    if Tdb >= 0:
        return (
            ((2501.0 - 2.326 * Twb) * Ws - _CP_DRY_AIR * (Tdb - Twb))
            / (2501.0 + 1.86 * Tdb - 4.186 * Twb)
        )
    return (
        ((2830.0 - 0.24 * Twb) * Ws - _CP_DRY_AIR * (Tdb - Twb))
        / (2830.0 + 1.86 * Tdb - 2.1 * Twb)
    )


def hum_rat2(Tdb: float, RH: float, P: float) -> float:
    """Humidity ratio from dry-bulb temperature and relative humidity (eq 22, 24)."""
    Pws = sat_press(Tdb)
    return _EPSILON * RH * Pws / (P - RH * Pws)


def hum_rat_from_dew_point(Tdp: float, P: float) -> float:
    """Humidity ratio from dew point temperature."""
    Pw = sat_press(Tdp)
    return _EPSILON_2009 * Pw / (P - Pw)


def hum_rat_from_enthalpy(Tdb: float, h: float) -> float:
    """Humidity ratio from dry-bulb and enthalpy, eq 32 solved for W."""
    return (h - _CP_DRY_AIR * Tdb) / (_HFG_0C + _CP_VAPOR * Tdb)


def rel_hum(Tdb: float, Twb: float, P: float) -> float:
    """Relative humidity (0-1) from dry-bulb and wet-bulb temperatures."""
    W = hum_rat(Tdb, Twb, P)
    return part_press(P, W) / sat_press(Tdb)


def rel_hum2(Tdb: float, W: float, P: float) -> float:
    """Relative humidity (0-1) from dry-bulb temperature and humidity ratio."""
    return part_press(P, W) / sat_press(Tdb)


def enthalpy_air_h2o(Tdb: float, W: float) -> float:
    """Moist air enthalpy [kJ/kg dry air] (eq 32)."""
    return _CP_DRY_AIR * Tdb + W * (_HFG_0C + _CP_VAPOR * Tdb)


def dew_point(P: float, W: float) -> float:
    """
    Dew point temperature [°C] (eq 39 and 40). Valid below 93 °C.

    Both fits are evaluated and the first is returned when it is non-negative.
    Note the choice depends on the sign of the first fit, not on the
    physical regime; this mirrors the published procedure and is kept as-is.
    """
    Pw = part_press(P, W)
    if not Pw > 0:
        raise DomainInvalidError(
            f"Dew point is undefined for a non-positive vapor pressure (W={W})"
        )
    alpha = math.log(Pw)
    Tdp1 = (
        _C14 + _C15 * alpha + _C16 * alpha ** 2
        + _C17 * alpha ** 3 + _C18 * Pw ** 0.1984
    )
    Tdp2 = 6.09 + 12.608 * alpha + 0.4959 * alpha ** 2

    if Tdp1 >= 0:
        return Tdp1
    return Tdp2


def dry_air_density(P: float, Tdb: float, W: float) -> float:
    """
    Dry air density [kg dry air/m³] (eq 28).

    Total density of the air-water mixture is dry_air_density * (1 + W).
    """
    return 1000.0 * P / (_R_DRY_AIR * (273.15 + Tdb) * (1 + 1.6078 * W))


def std_press(elevation: float) -> float:
    """Standard atmospheric pressure [kPa] at elevation [m], -5000 m to 11000 m (eq 3)."""
    return 101.325 * (1 - 2.25577e-05 * elevation) ** 5.2559


def std_temp(elevation: float) -> float:
    """Standard atmospheric temperature [°C] at elevation [m] (eq 4)."""
    return 15.0 - 0.0065 * elevation
