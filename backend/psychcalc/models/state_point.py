"""
Pydantic models for full state point input/output.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator
from psychcalc.config import UnitSystem, Property, default_pressure


class StatePointInput(BaseModel):
    """Input model for resolving a state point from dry-bulb plus one property."""

    pressure: Optional[float] = Field(
        default=None,
        description="Barometric pressure. IP: psia, SI: kPa. Defaults to sea level in the chosen unit system",
    )
    Tdb: float = Field(..., description="Dry-bulb temperature (°F or °C)")
    in_value: float = Field(..., description="Value of the second known property")
    in_property: Property = Field(
        ...,
        description="Which property in_value is: Twb, Tdp, RH, W or h",
        examples=["RH", "Twb"],
    )
    unit_system: UnitSystem = Field(
        default=UnitSystem.SI,
        description="Unit system: IP or SI",
    )
    strict: bool = Field(
        default=False,
        description="Reject inputs outside the documented ranges instead of warning",
    )

    @model_validator(mode="after")
    def _fill_pressure(self) -> "StatePointInput":
        if self.pressure is None:
            self.pressure = default_pressure(self.unit_system)
        return self


class StatePoint(BaseModel):
    """Full resolved state point with every supported psychrometric property."""

    # Input echo
    unit_system: UnitSystem = UnitSystem.SI
    pressure: float
    in_property: Property
    in_value: float

    # Resolved properties
    Tdb: float = Field(..., description="Dry-bulb temperature")
    Twb: float = Field(..., description="Wet-bulb temperature")
    Tdp: float = Field(..., description="Dew point temperature")
    RH: float = Field(..., description="Relative humidity (0-1)")
    W: float = Field(..., description="Humidity ratio (lb_w/lb_da or kg_w/kg_da)")
    Pv: float = Field(..., description="Partial vapor pressure (psi or Pa)")
    mu: float = Field(..., description="Degree of saturation (0-1)")
    h: float = Field(..., description="Specific enthalpy (BTU/lb_da or kJ/kg_da)")
    v: float = Field(..., description="Specific volume (ft³/lb_da or m³/kg_da)")
    rho: float = Field(..., description="Moist air density (lb/ft³ or kg/m³)")

    warnings: list[str] = Field(default_factory=list)
