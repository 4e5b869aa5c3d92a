"""
Validity-range checks for engine inputs and results.

The correlations extrapolate silently outside their documented ranges. By
default a violation is logged and recorded as a warning on the result; with
strict=True it raises DomainInvalidError instead. A non-positive pressure is
always an error.
"""

import logging
import math

from psychcalc.config import (
    DEW_POINT_MAX,
    SAT_PRESS_TDB_RANGE,
    STD_ATMOSPHERE_ELEVATION_RANGE,
)
from psychcalc.engine.errors import DomainInvalidError

logger = logging.getLogger(__name__)


class DomainChecker:
    """Collects range violations for a single calculation."""

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.warnings: list[str] = []

    def _violation(self, message: str) -> None:
        if self.strict:
            raise DomainInvalidError(message)
        logger.warning(message)
        self.warnings.append(message)

    def check_pressure(self, P: float) -> None:
        """Pressure [kPa] must be positive and finite."""
        if not (math.isfinite(P) and P > 0):
            raise DomainInvalidError(f"Pressure must be positive, got {P} kPa")

    def check_temperature(self, name: str, T: float) -> None:
        """Temperature [°C] within the saturation-pressure correlation range."""
        low, high = SAT_PRESS_TDB_RANGE
        if not low <= T <= high:
            self._violation(
                f"{name}={T:.4g} °C is outside the valid range "
                f"[{low:g}, {high:g}] °C; result is extrapolated"
            )

    def check_dew_point(self, Tdp: float) -> None:
        self.check_temperature("Tdp", Tdp)
        if Tdp > DEW_POINT_MAX:
            self._violation(
                f"Tdp={Tdp:.4g} °C is above the {DEW_POINT_MAX:g} °C limit "
                f"of the dew point correlation"
            )

    def check_relative_humidity(self, RH: float) -> None:
        if not 0.0 <= RH <= 1.0:
            self._violation(f"RH={RH:.4g} is outside [0, 1]")

    def check_humidity_ratio(self, W: float) -> None:
        if W < 0.0:
            self._violation(f"Humidity ratio W={W:.4g} is negative")

    def check_elevation(self, elevation: float) -> None:
        """Elevation [m] within the standard-atmosphere fit."""
        low, high = STD_ATMOSPHERE_ELEVATION_RANGE
        if not low <= elevation <= high:
            self._violation(
                f"Elevation {elevation:.6g} m is outside the standard "
                f"atmosphere range [{low:g}, {high:g}] m"
            )
