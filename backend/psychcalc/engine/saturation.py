"""
Saturation vapor pressure of water.

ASHRAE Fundamentals handbook (2005) p 6.2, equations 5 (over ice) and 6
(over liquid water). Valid from -100 °C to 200 °C; values outside that range
are extrapolated without complaint.
"""

import math

_FREEZING_K = 273.15

# Over ice, -100 °C to 0 °C
_C1 = -5674.5359
_C2 = 6.3925247
_C3 = -0.009677843
_C4 = 0.00000062215701
_C5 = 2.0747825e-09
_C6 = -9.484024e-13
_C7 = 4.1635019

# Over liquid water, 0 °C to 200 °C
_C8 = -5800.2206
_C9 = 1.3914993
_C10 = -0.048640239
_C11 = 0.000041764768
_C12 = -0.000000014452093
_C13 = 6.5459673


def sat_press_ice(Tdb: float) -> float:
    """Saturation pressure over ice [kPa] at Tdb [°C]."""
    TK = Tdb + _FREEZING_K
    ln_pws = (
        _C1 / TK + _C2 + _C3 * TK + _C4 * TK ** 2
        + _C5 * TK ** 3 + _C6 * TK ** 4 + _C7 * math.log(TK)
    )
    return math.exp(ln_pws) / 1000.0


def sat_press_liquid(Tdb: float) -> float:
    """Saturation pressure over liquid water [kPa] at Tdb [°C]."""
    TK = Tdb + _FREEZING_K
    ln_pws = (
        _C8 / TK + _C9 + _C10 * TK + _C11 * TK ** 2
        + _C12 * TK ** 3 + _C13 * math.log(TK)
    )
    return math.exp(ln_pws) / 1000.0


def sat_press(Tdb: float) -> float:
    """
    Saturation vapor pressure [kPa] at dry-bulb temperature Tdb [°C].

    The ice correlation is used up to and including the freezing point,
    the liquid correlation above it. There is no blending across the seam.
    """
    if Tdb + _FREEZING_K <= _FREEZING_K:
        return sat_press_ice(Tdb)
    return sat_press_liquid(Tdb)
