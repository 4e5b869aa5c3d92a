"""
PsychCalc configuration and constants.
"""

from enum import Enum

from psychcalc.engine.errors import InvalidSelectorError


class UnitSystem(str, Enum):
    IP = "IP"  # Inch-Pound (°F, psia, BTU/lb, ft³/lb)
    SI = "SI"  # Metric (°C, kPa, kJ/kg, m³/kg)


class Property(str, Enum):
    """Psychrometric property selector used for both inputs and outputs."""

    WET_BULB = "Twb"
    DEW_POINT = "Tdp"
    RELATIVE_HUMIDITY = "RH"
    HUMIDITY_RATIO = "W"
    VAPOR_PRESSURE = "Pv"
    DEGREE_OF_SATURATION = "mu"
    ENTHALPY = "h"
    ENTROPY = "s"  # not implemented, always rejected
    SPECIFIC_VOLUME = "v"
    DENSITY = "rho"

    @classmethod
    def from_code(cls, code: int) -> "Property":
        """Look up a property by its legacy integer code (1-10)."""
        try:
            return _LEGACY_CODES[code]
        except (KeyError, TypeError):
            raise InvalidSelectorError(
                f"Unknown property code: {code!r}. Valid codes are 1-10."
            ) from None


_LEGACY_CODES: dict[int, Property] = {
    1: Property.WET_BULB,
    2: Property.DEW_POINT,
    3: Property.RELATIVE_HUMIDITY,
    4: Property.HUMIDITY_RATIO,
    5: Property.VAPOR_PRESSURE,
    6: Property.DEGREE_OF_SATURATION,
    7: Property.ENTHALPY,
    8: Property.ENTROPY,
    9: Property.SPECIFIC_VOLUME,
    10: Property.DENSITY,
}

# Properties that can be supplied alongside dry-bulb temperature.
INPUT_PROPERTIES: frozenset[Property] = frozenset({
    Property.WET_BULB,
    Property.DEW_POINT,
    Property.RELATIVE_HUMIDITY,
    Property.HUMIDITY_RATIO,
    Property.ENTHALPY,
})

# Outputs resolved through relative humidity rather than humidity ratio.
RH_RESOLVED_OUTPUTS: frozenset[Property] = frozenset({
    Property.RELATIVE_HUMIDITY,
    Property.WET_BULB,
})

# Default atmospheric pressure at sea level
DEFAULT_PRESSURE_IP = 14.696  # psia
DEFAULT_PRESSURE_SI = 101.325  # kPa


def default_pressure(unit_system: UnitSystem) -> float:
    """Sea-level pressure in the unit system's pressure units (psia or kPa)."""
    if unit_system == UnitSystem.IP:
        return DEFAULT_PRESSURE_IP
    return DEFAULT_PRESSURE_SI


# Unit conversion factors
LBF_TO_N = 4.4482216152605  # exact
INCH_TO_M = 0.0254  # exact
FOOT_TO_M = 12 * INCH_TO_M
LB_TO_KG = 0.45359237  # exact
BTU_TO_KJ = 1.055056  # ISO BTU
PSI_TO_KPA = LBF_TO_N / INCH_TO_M ** 2 / 1000.0

# Dry air at 0 °F has zero enthalpy in BTU/lb; dry air at 0 °C has zero in kJ/kg.
# This is the SI enthalpy of dry air at 0 °F.
ENTHALPY_ZERO_OFFSET_SI = 1.006 * 32.0 / 1.8  # kJ/kg ≈ 17.884444

# Documented validity ranges of the correlations (SI)
SAT_PRESS_TDB_RANGE = (-100.0, 200.0)  # °C
DEW_POINT_MAX = 93.0  # °C
STD_ATMOSPHERE_ELEVATION_RANGE = (-5000.0, 11000.0)  # m

# Wet-bulb Newton-Raphson solver
WET_BULB_REL_TOL = 1e-5  # 0.001% on humidity ratio
WET_BULB_STEP = 0.001  # °C, finite-difference step
WET_BULB_MAX_ITER = 100
WET_BULB_MIN_DERIVATIVE = 1e-12
WET_BULB_MIN_TARGET_W = 1e-10  # kg/kg

# Property units for display
PROPERTY_UNITS = {
    "IP": {
        "Tdb": "°F",
        "Twb": "°F",
        "Tdp": "°F",
        "RH": "",
        "W": "lb_w/lb_da",
        "Pv": "psi",
        "mu": "",
        "h": "BTU/lb_da",
        "v": "ft³/lb_da",
        "rho": "lb/ft³",
        "P": "psia",
    },
    "SI": {
        "Tdb": "°C",
        "Twb": "°C",
        "Tdp": "°C",
        "RH": "",
        "W": "kg_w/kg_da",
        "Pv": "Pa",
        "mu": "",
        "h": "kJ/kg_da",
        "v": "m³/kg_da",
        "rho": "kg/m³",
        "P": "kPa",
    },
}
