"""
API routes for state point resolution and standard atmosphere lookups.
"""

from fastapi import APIRouter, HTTPException

from psychcalc.models.state_point import StatePointInput, StatePoint
from psychcalc.engine.converter import (
    resolve_state_point,
    get_pressure_from_altitude,
    get_temperature_from_altitude,
)
from psychcalc.config import UnitSystem

router = APIRouter(prefix="/api/v1", tags=["state-point"])


@router.post("/state-point", response_model=StatePoint)
async def create_state_point(data: StatePointInput) -> StatePoint:
    """
    Resolve a full psychrometric state point from dry-bulb plus one property.

    Accepts wet-bulb, dew point, RH, humidity ratio or enthalpy as the second
    property and returns every supported property.
    """
    try:
        return resolve_state_point(
            P=data.pressure,
            Tdb=data.Tdb,
            in_value=data.in_value,
            in_property=data.in_property,
            unit_system=data.unit_system,
            strict=data.strict,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.get("/pressure-from-altitude")
async def pressure_from_altitude(
    altitude: float, unit_system: UnitSystem = UnitSystem.SI
) -> dict:
    """
    Convert altitude to standard atmospheric pressure.

    Args:
        altitude: Altitude in feet (IP) or meters (SI)
        unit_system: IP or SI

    Returns:
        Atmospheric pressure in psia (IP) or kPa (SI)
    """
    try:
        pressure = get_pressure_from_altitude(altitude, unit_system)
        return {"altitude": altitude, "pressure": round(pressure, 6), "unit_system": unit_system}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.get("/temperature-from-altitude")
async def temperature_from_altitude(
    altitude: float, unit_system: UnitSystem = UnitSystem.SI
) -> dict:
    """Standard atmospheric temperature (°F or °C) at an altitude (ft or m)."""
    try:
        temperature = get_temperature_from_altitude(altitude, unit_system)
        return {"altitude": altitude, "temperature": round(temperature, 4), "unit_system": unit_system}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
