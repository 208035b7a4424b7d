"""
Damping regime classification for m*ddx + c*dx + k*x = 0.

k = sqrt(stiffness / mass) is the natural frequency, b = c / (2*m) the decay
rate of the exponential envelope. The regime follows from comparing b with k.
"""

import math
from enum import Enum

from dampedosc.core.errors import InvalidParameter

# Relative tolerance of the b == k comparison (a few ulps).
CRITICAL_RTOL = 1e-12


class DampingRegime(str, Enum):
    """Qualitative response of a second-order linear oscillator."""

    UNDAMPED = "undamped"
    UNDERDAMPED = "underdamped"
    OVERDAMPED = "overdamped"
    CRITICALLY_DAMPED = "critically_damped"


def _check(mass: float, stiffness: float, damping_coeff: float = 0.0) -> None:
    for name, value in (("mass", mass), ("stiffness", stiffness), ("damping_coeff", damping_coeff)):
        if not math.isfinite(value):
            raise InvalidParameter(f"{name} must be finite, got {value}", name, value)
    if mass <= 0:
        raise InvalidParameter(f"mass must be > 0, got {mass}", "mass", mass)
    if stiffness <= 0:
        raise InvalidParameter(f"stiffness must be > 0, got {stiffness}", "stiffness", stiffness)
    if damping_coeff < 0:
        raise InvalidParameter(
            f"damping_coeff must be >= 0, got {damping_coeff}", "damping_coeff", damping_coeff
        )


def natural_frequency(mass: float, stiffness: float) -> float:
    """k = sqrt(stiffness / mass) (rad/s)."""
    _check(mass, stiffness)
    return math.sqrt(stiffness / mass)


def decay_rate(mass: float, damping_coeff: float) -> float:
    """b = damping_coeff / (2 * mass) (1/s)."""
    if not mass > 0:
        raise InvalidParameter(f"mass must be > 0, got {mass}", "mass", mass)
    return damping_coeff / (2.0 * mass)


def critical_damping(mass: float, stiffness: float) -> float:
    """Damping coefficient at the critical boundary: c = 2 * sqrt(m * k)."""
    _check(mass, stiffness)
    return 2.0 * math.sqrt(mass * stiffness)


def damping_ratio(mass: float, stiffness: float, damping_coeff: float) -> float:
    """zeta = c / (2 * sqrt(m * k)); 1 at critical damping."""
    _check(mass, stiffness, damping_coeff)
    return damping_coeff / critical_damping(mass, stiffness)


def classify(mass: float, stiffness: float, damping_coeff: float) -> DampingRegime:
    """
    Classify the damping regime.

    Exact zero damping is UNDAMPED regardless of floating-point comparisons;
    otherwise b < k, b > k and b == k give under-, over- and critically damped.
    b == k is tested up to CRITICAL_RTOL so that c = 2*sqrt(m*k) computed in a
    different order still lands on the boundary.

    Raises:
        InvalidParameter: mass <= 0, stiffness <= 0 or damping_coeff < 0.
    """
    _check(mass, stiffness, damping_coeff)
    if damping_coeff == 0:
        return DampingRegime.UNDAMPED
    k = natural_frequency(mass, stiffness)
    b = decay_rate(mass, damping_coeff)
    if math.isclose(b, k, rel_tol=CRITICAL_RTOL, abs_tol=0.0):
        return DampingRegime.CRITICALLY_DAMPED
    if b < k:
        return DampingRegime.UNDERDAMPED
    return DampingRegime.OVERDAMPED
