"""
Psychrometric conversion engine.

Given pressure, dry-bulb temperature and one more property (wet-bulb, dew
point, RH, humidity ratio or enthalpy), computes any other property in IP or
SI units.

Every request goes through the same pipeline:
  1. normalize inputs to SI (°C, kPa, kJ/kg)
  2. resolve the canonical state: RH when the output is RH or wet-bulb,
     humidity ratio otherwise
  3. compute the requested property from the canonical state
  4. convert the result back to the caller's unit system
"""

from typing import Callable, Union

from psychcalc.config import (
    INPUT_PROPERTIES,
    PROPERTY_UNITS,
    RH_RESOLVED_OUTPUTS,
    Property,
    UnitSystem,
)
from psychcalc.engine.domain import DomainChecker
from psychcalc.engine.errors import InvalidSelectorError, UnsupportedPropertyError
from psychcalc.engine.properties import (
    dew_point,
    dry_air_density,
    enthalpy_air_h2o,
    hum_rat,
    hum_rat2,
    hum_rat_from_dew_point,
    hum_rat_from_enthalpy,
    part_press,
    rel_hum,
    rel_hum2,
    std_press,
    std_temp,
)
from psychcalc.engine.saturation import sat_press
from psychcalc.engine.units import (
    ft_to_m,
    from_si_pressure,
    from_si_temperature,
    input_to_si,
    output_from_si,
    to_si_pressure,
    to_si_temperature,
)
from psychcalc.engine.wet_bulb import wet_bulb
from psychcalc.models.conversion import CanonicalState, ConversionResult
from psychcalc.models.state_point import StatePoint

PropertyLike = Union[Property, str, int]
UnitSystemLike = Union[UnitSystem, str]


# ---------------------------------------------------------------------------
# Selector handling
# ---------------------------------------------------------------------------

def _coerce_property(selector: PropertyLike) -> Property:
    """Accept a Property, its value ("Twb"), its name ("WET_BULB") or a legacy code."""
    if isinstance(selector, Property):
        return selector
    if isinstance(selector, int) and not isinstance(selector, bool):
        return Property.from_code(selector)
    if isinstance(selector, str):
        try:
            return Property(selector)
        except ValueError:
            pass
        try:
            return Property[selector.upper()]
        except KeyError:
            pass
    valid = ", ".join(p.value for p in Property)
    raise InvalidSelectorError(f"Unknown property: {selector!r}. Valid properties: {valid}")


def _coerce_unit_system(unit_system: UnitSystemLike) -> UnitSystem:
    try:
        return UnitSystem(unit_system)
    except ValueError:
        raise InvalidSelectorError(
            f"Unknown unit system: {unit_system!r}. Use 'IP' or 'SI'."
        ) from None


# ---------------------------------------------------------------------------
# Canonical state resolution (SI)
# ---------------------------------------------------------------------------

def _rh_from_enthalpy(P: float, Tdb: float, h: float) -> float:
    return rel_hum2(Tdb, hum_rat_from_enthalpy(Tdb, h), P)


_RH_RESOLVERS: dict[Property, Callable[[float, float, float], float]] = {
    Property.WET_BULB: lambda P, Tdb, Twb: rel_hum(Tdb, Twb, P),
    Property.DEW_POINT: lambda P, Tdb, Tdp: sat_press(Tdp) / sat_press(Tdb),
    Property.RELATIVE_HUMIDITY: lambda P, Tdb, RH: RH,
    Property.HUMIDITY_RATIO: lambda P, Tdb, W: rel_hum2(Tdb, W, P),
    Property.ENTHALPY: _rh_from_enthalpy,
}

_W_RESOLVERS: dict[Property, Callable[[float, float, float], float]] = {
    Property.WET_BULB: lambda P, Tdb, Twb: hum_rat(Tdb, Twb, P),
    Property.DEW_POINT: lambda P, Tdb, Tdp: hum_rat_from_dew_point(Tdp, P),
    Property.RELATIVE_HUMIDITY: lambda P, Tdb, RH: hum_rat2(Tdb, RH, P),
    Property.HUMIDITY_RATIO: lambda P, Tdb, W: W,
    Property.ENTHALPY: lambda P, Tdb, h: hum_rat_from_enthalpy(Tdb, h),
}


def resolve_canonical_state(
    P: float,
    Tdb: float,
    in_value: float,
    in_property: Property,
    out_property: Property,
) -> CanonicalState:
    """Resolve RH or W (SI) from the supplied property, whichever the output needs."""
    if in_property not in INPUT_PROPERTIES:
        raise InvalidSelectorError(
            f"{in_property.value} cannot be used as an input. "
            f"Supported inputs: {', '.join(sorted(p.value for p in INPUT_PROPERTIES))}"
        )
    if out_property in RH_RESOLVED_OUTPUTS:
        return CanonicalState(
            P=P, Tdb=Tdb, resolved_RH=_RH_RESOLVERS[in_property](P, Tdb, in_value)
        )
    return CanonicalState(
        P=P, Tdb=Tdb, resolved_W=_W_RESOLVERS[in_property](P, Tdb, in_value)
    )


# ---------------------------------------------------------------------------
# Output properties (SI)
# ---------------------------------------------------------------------------

def _entropy(state: CanonicalState) -> float:
    raise UnsupportedPropertyError("Entropy is not implemented")


_OUTPUTS: dict[Property, Callable[[CanonicalState], float]] = {
    Property.WET_BULB: lambda s: wet_bulb(s.Tdb, s.RH, s.P),
    Property.DEW_POINT: lambda s: dew_point(s.P, s.W),
    Property.RELATIVE_HUMIDITY: lambda s: s.RH,
    Property.HUMIDITY_RATIO: lambda s: s.W,
    Property.VAPOR_PRESSURE: lambda s: part_press(s.P, s.W) * 1000.0,  # Pa
    Property.DEGREE_OF_SATURATION: lambda s: s.W / hum_rat2(s.Tdb, 1.0, s.P),
    Property.ENTHALPY: lambda s: enthalpy_air_h2o(s.Tdb, s.W),
    Property.ENTROPY: _entropy,
    Property.SPECIFIC_VOLUME: lambda s: 1.0 / dry_air_density(s.P, s.Tdb, s.W),
    Property.DENSITY: lambda s: dry_air_density(s.P, s.Tdb, s.W) * (1 + s.W),
}

# Order in which a full state point is reported
STATE_POINT_PROPERTIES: tuple[Property, ...] = tuple(
    p for p in Property if p != Property.ENTROPY
)


def _check_input(checker: DomainChecker, prop: Property, value: float) -> None:
    if prop == Property.WET_BULB:
        checker.check_temperature("Twb", value)
    elif prop == Property.DEW_POINT:
        checker.check_dew_point(value)
    elif prop == Property.RELATIVE_HUMIDITY:
        checker.check_relative_humidity(value)
    elif prop == Property.HUMIDITY_RATIO:
        checker.check_humidity_ratio(value)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def convert_annotated(
    P: float,
    Tdb: float,
    in_value: float,
    in_property: PropertyLike,
    out_property: PropertyLike,
    unit_system: UnitSystemLike = UnitSystem.SI,
    strict: bool = False,
) -> ConversionResult:
    """
    Compute out_property from dry-bulb plus one other property.

    Args:
        P: Barometric pressure (psia for IP, kPa for SI)
        Tdb: Dry-bulb temperature (°F or °C)
        in_value: Value of in_property in the caller's units
        in_property: Twb, Tdp, RH (0-1), W or h
        out_property: Any Property except entropy
        unit_system: IP or SI
        strict: Raise DomainInvalidError for out-of-range values instead of
            recording a warning

    Returns:
        ConversionResult with the value in the caller's units and any
        range warnings.

    Raises:
        InvalidSelectorError: unknown selector or unsupported input property
        UnsupportedPropertyError: entropy requested
        ConvergenceError: wet-bulb iteration failed
        DomainInvalidError: non-positive pressure, or any range violation
            when strict
    """
    in_prop = _coerce_property(in_property)
    out_prop = _coerce_property(out_property)
    units = _coerce_unit_system(unit_system)

    if out_prop == Property.ENTROPY:
        raise UnsupportedPropertyError("Entropy is not implemented")

    checker = DomainChecker(strict=strict)

    # 1. Normalize to SI
    P_si = to_si_pressure(P, units)
    Tdb_si = to_si_temperature(Tdb, units)
    value_si = input_to_si(in_value, in_prop, units)
    checker.check_pressure(P_si)
    checker.check_temperature("Tdb", Tdb_si)
    _check_input(checker, in_prop, value_si)

    # 2. Canonical state
    state = resolve_canonical_state(P_si, Tdb_si, value_si, in_prop, out_prop)
    if state.resolved_W is not None:
        checker.check_humidity_ratio(state.resolved_W)
    if state.resolved_RH is not None:
        checker.check_relative_humidity(state.resolved_RH)

    # 3. Output property
    out_si = _OUTPUTS[out_prop](state)
    if out_prop == Property.DEW_POINT:
        checker.check_dew_point(out_si)

    # 4. Back to the caller's units
    value = output_from_si(out_si, out_prop, units)

    return ConversionResult(
        value=value,
        out_property=out_prop,
        unit_system=units,
        units=PROPERTY_UNITS[units.value][out_prop.value],
        warnings=checker.warnings,
    )


def convert(
    P: float,
    Tdb: float,
    in_value: float,
    in_property: PropertyLike,
    out_property: PropertyLike,
    unit_system: UnitSystemLike = UnitSystem.SI,
    strict: bool = False,
) -> float:
    """
    Main entry point. Same as convert_annotated but returns only the number.

    Range warnings are still logged.
    """
    return convert_annotated(
        P, Tdb, in_value, in_property, out_property, unit_system, strict
    ).value


def resolve_state_point(
    P: float,
    Tdb: float,
    in_value: float,
    in_property: PropertyLike,
    unit_system: UnitSystemLike = UnitSystem.SI,
    strict: bool = False,
) -> StatePoint:
    """
    Resolve every supported property of a state point at once.

    Runs the conversion engine once per property, so each value is exactly
    what convert() would return for it. Entropy is not included.
    """
    in_prop = _coerce_property(in_property)
    units = _coerce_unit_system(unit_system)

    props: dict[str, float] = {}
    warnings: list[str] = []
    for out_prop in STATE_POINT_PROPERTIES:
        result = convert_annotated(P, Tdb, in_value, in_prop, out_prop, units, strict)
        props[out_prop.value] = result.value
        for warning in result.warnings:
            if warning not in warnings:
                warnings.append(warning)

    return StatePoint(
        unit_system=units,
        pressure=P,
        in_property=in_prop,
        in_value=in_value,
        Tdb=Tdb,
        warnings=warnings,
        **props,
    )


def get_pressure_from_altitude(
    altitude: float, unit_system: UnitSystemLike = UnitSystem.SI, strict: bool = False
) -> float:
    """
    Standard atmospheric pressure at an altitude.

    Args:
        altitude: Altitude in feet (IP) or meters (SI)
        unit_system: IP or SI

    Returns:
        Atmospheric pressure in psia (IP) or kPa (SI)
    """
    units = _coerce_unit_system(unit_system)
    elevation = ft_to_m(altitude) if units == UnitSystem.IP else altitude
    DomainChecker(strict=strict).check_elevation(elevation)
    return from_si_pressure(std_press(elevation), units)


def get_temperature_from_altitude(
    altitude: float, unit_system: UnitSystemLike = UnitSystem.SI, strict: bool = False
) -> float:
    """Standard atmospheric temperature (°F or °C) at an altitude (ft or m)."""
    units = _coerce_unit_system(unit_system)
    elevation = ft_to_m(altitude) if units == UnitSystem.IP else altitude
    DomainChecker(strict=strict).check_elevation(elevation)
    return from_si_temperature(std_temp(elevation), units)
