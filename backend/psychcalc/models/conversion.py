"""
Pydantic models for single-property conversion requests and the engine's
internal canonical state.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from psychcalc.config import UnitSystem, Property, default_pressure
from psychcalc.engine.errors import InvalidSelectorError


class ConversionInput(BaseModel):
    """Dry-bulb plus one more property; asks for one output property."""

    pressure: Optional[float] = Field(
        default=None,
        description="Barometric pressure. IP: psia, SI: kPa. Defaults to sea level in the chosen unit system",
    )
    Tdb: float = Field(..., description="Dry-bulb temperature (°F or °C)")
    in_value: float = Field(..., description="Value of the second known property")
    in_property: Property = Field(
        ...,
        description="Which property in_value is: Twb, Tdp, RH, W or h",
        examples=["Twb", "RH"],
    )
    out_property: Property = Field(
        ...,
        description="Requested property",
        examples=["RH", "h"],
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
    def _fill_pressure(self) -> "ConversionInput":
        if self.pressure is None:
            self.pressure = default_pressure(self.unit_system)
        return self


class ConversionResult(BaseModel):
    """A single converted property value plus any range warnings."""

    value: float
    out_property: Property
    unit_system: UnitSystem
    units: str = ""
    warnings: list[str] = Field(default_factory=list)


class CanonicalState(BaseModel):
    """
    Moist-air state in SI units with exactly the member the request needs.

    Only one of RH or W is resolved per conversion. Reading the other one
    raises instead of returning a stale or made-up number.
    """

    model_config = ConfigDict(frozen=True)

    P: float  # kPa
    Tdb: float  # °C
    resolved_RH: Optional[float] = None
    resolved_W: Optional[float] = None

    @property
    def RH(self) -> float:
        if self.resolved_RH is None:
            raise InvalidSelectorError("Relative humidity is not resolved for this request")
        return self.resolved_RH

    @property
    def W(self) -> float:
        if self.resolved_W is None:
            raise InvalidSelectorError("Humidity ratio is not resolved for this request")
        return self.resolved_W
