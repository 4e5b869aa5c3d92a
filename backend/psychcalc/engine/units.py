"""
Unit conversion between the caller's unit system and the SI units used
internally by the engine.

Internal units: °C, kPa, kJ/kg dry air, m³/kg dry air, kg/m³.
Vapor pressure is reported in Pa (SI) or psi (IP).

RH, humidity ratio and degree of saturation are dimensionless (or mass
ratios) and pass through unchanged.

output_to_si is not used by the engine itself. It is provided for callers
holding IP results that need them in SI, for example to compare against an
SI calculation of the same state.
"""

from psychcalc.config import (
    BTU_TO_KJ,
    ENTHALPY_ZERO_OFFSET_SI,
    FOOT_TO_M,
    LB_TO_KG,
    PSI_TO_KPA,
    Property,
    UnitSystem,
)

_TEMPERATURE_PROPERTIES = frozenset({Property.WET_BULB, Property.DEW_POINT})


def f_to_c(T: float) -> float:
    return (T - 32.0) / 1.8


def c_to_f(T: float) -> float:
    return 1.8 * T + 32.0


def psi_to_kpa(P: float) -> float:
    return P * PSI_TO_KPA


def kpa_to_psi(P: float) -> float:
    return P / PSI_TO_KPA


def ft_to_m(length: float) -> float:
    return length * FOOT_TO_M


def enthalpy_ip_to_si(h: float) -> float:
    """
    BTU/lb dry air → kJ/kg dry air.

    The IP scale is zero for dry air at 0 °F, the SI scale for dry air at
    0 °C, so the conversion carries an offset as well as a scale factor.
    """
    return h * BTU_TO_KJ / LB_TO_KG - ENTHALPY_ZERO_OFFSET_SI


def enthalpy_si_to_ip(h: float) -> float:
    """kJ/kg dry air → BTU/lb dry air (inverse of enthalpy_ip_to_si)."""
    return (h + ENTHALPY_ZERO_OFFSET_SI) * LB_TO_KG / BTU_TO_KJ


def to_si_pressure(P: float, unit_system: UnitSystem) -> float:
    """Barometric pressure in psia (IP) or kPa (SI) → kPa."""
    if unit_system == UnitSystem.IP:
        return psi_to_kpa(P)
    return P


def from_si_pressure(P: float, unit_system: UnitSystem) -> float:
    if unit_system == UnitSystem.IP:
        return kpa_to_psi(P)
    return P


def to_si_temperature(T: float, unit_system: UnitSystem) -> float:
    if unit_system == UnitSystem.IP:
        return f_to_c(T)
    return T


def from_si_temperature(T: float, unit_system: UnitSystem) -> float:
    if unit_system == UnitSystem.IP:
        return c_to_f(T)
    return T


def input_to_si(value: float, prop: Property, unit_system: UnitSystem) -> float:
    """Convert an input-capable property value into internal SI units."""
    if unit_system == UnitSystem.SI:
        return value
    if prop in _TEMPERATURE_PROPERTIES:
        return f_to_c(value)
    if prop == Property.ENTHALPY:
        return enthalpy_ip_to_si(value)
    return value


def output_from_si(value: float, prop: Property, unit_system: UnitSystem) -> float:
    """Convert a computed SI property value into the caller's unit system."""
    if unit_system == UnitSystem.SI:
        return value
    if prop in _TEMPERATURE_PROPERTIES:
        return c_to_f(value)
    if prop == Property.VAPOR_PRESSURE:
        # Pa → psi
        return kpa_to_psi(value / 1000.0)
    if prop == Property.ENTHALPY:
        return enthalpy_si_to_ip(value)
    if prop == Property.SPECIFIC_VOLUME:
        # m³/kg → ft³/lb
        return value * LB_TO_KG / FOOT_TO_M ** 3
    if prop == Property.DENSITY:
        # kg/m³ → lb/ft³
        return value * FOOT_TO_M ** 3 / LB_TO_KG
    return value


def output_to_si(value: float, prop: Property, unit_system: UnitSystem) -> float:
    """Inverse of output_from_si, for callers holding IP results."""
    if unit_system == UnitSystem.SI:
        return value
    if prop in _TEMPERATURE_PROPERTIES:
        return f_to_c(value)
    if prop == Property.VAPOR_PRESSURE:
        return psi_to_kpa(value) * 1000.0
    if prop == Property.ENTHALPY:
        return enthalpy_ip_to_si(value)
    if prop == Property.SPECIFIC_VOLUME:
        return value * FOOT_TO_M ** 3 / LB_TO_KG
    if prop == Property.DENSITY:
        return value * LB_TO_KG / FOOT_TO_M ** 3
    return value
