"""
Wet-bulb temperature solver.

Inverts hum_rat(Tdb, Twb, P) with Newton-Raphson, using a backward finite
difference for the derivative. Iteration starts at saturation (Twb = Tdb) and
stops once the humidity ratio matches within 0.001%.
"""

import logging
import math

from psychcalc.config import (
    WET_BULB_MAX_ITER,
    WET_BULB_MIN_DERIVATIVE,
    WET_BULB_MIN_TARGET_W,
    WET_BULB_REL_TOL,
    WET_BULB_STEP,
)
from psychcalc.engine.errors import ConvergenceError
from psychcalc.engine.properties import hum_rat, hum_rat2

logger = logging.getLogger(__name__)


def wet_bulb(
    Tdb: float,
    RH: float,
    P: float,
    max_iter: int = WET_BULB_MAX_ITER,
) -> float:
    """
    Wet-bulb temperature [°C] from dry-bulb [°C], RH (0-1) and pressure [kPa].

    Raises:
        ConvergenceError: if the target humidity ratio is too close to zero
            for a relative tolerance, the derivative vanishes, an iterate
            stops being finite, or max_iter steps are exceeded.
    """
    W_target = hum_rat2(Tdb, RH, P)
    if not math.isfinite(W_target) or W_target <= WET_BULB_MIN_TARGET_W:
        raise ConvergenceError(
            f"Target humidity ratio {W_target:.3g} is too small to solve "
            f"for wet-bulb (Tdb={Tdb}, RH={RH}, P={P})",
            last_estimate=Tdb,
        )

    Twb = Tdb  # saturation
    W_new = hum_rat(Tdb, Twb, P)
    iterations = 0

    while abs((W_new - W_target) / W_target) > WET_BULB_REL_TOL:
        if iterations >= max_iter:
            raise ConvergenceError(
                f"Wet-bulb did not converge in {max_iter} iterations "
                f"(Tdb={Tdb}, RH={RH}, P={P}, last Twb={Twb:.6g})",
                iterations=iterations,
                last_estimate=Twb,
            )

        W_low = _hum_rat_at(Tdb, Twb - WET_BULB_STEP, P, iterations)
        dW_dTwb = (W_new - W_low) / WET_BULB_STEP
        if not abs(dW_dTwb) > WET_BULB_MIN_DERIVATIVE:
            raise ConvergenceError(
                f"Wet-bulb derivative vanished at Twb={Twb:.6g} "
                f"(Tdb={Tdb}, RH={RH}, P={P})",
                iterations=iterations,
                last_estimate=Twb,
            )

        Twb = Twb - (W_new - W_target) / dW_dTwb
        W_new = _hum_rat_at(Tdb, Twb, P, iterations)
        iterations += 1

        if not (math.isfinite(Twb) and math.isfinite(W_new)):
            raise ConvergenceError(
                f"Wet-bulb iteration diverged (Tdb={Tdb}, RH={RH}, P={P})",
                iterations=iterations,
                last_estimate=Twb,
            )

    logger.debug("Wet-bulb converged in %d iterations: %.6f", iterations, Twb)
    return Twb


def _hum_rat_at(Tdb: float, Twb: float, P: float, iterations: int) -> float:
    """hum_rat for an iterate; math failures on a runaway guess end the solve."""
    try:
        return hum_rat(Tdb, Twb, P)
    except (OverflowError, ZeroDivisionError, ValueError) as e:
        raise ConvergenceError(
            f"Wet-bulb iteration left the valid range at Twb={Twb:.6g} "
            f"(Tdb={Tdb}, P={P}): {e}",
            iterations=iterations,
            last_estimate=Twb,
        ) from e
