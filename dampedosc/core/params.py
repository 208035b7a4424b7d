"""Physical parameters and simulation window (value objects with validation)."""

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from dampedosc.core.errors import InvalidParameter


def _finite(name: str, value: Any) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a number, got {value!r}", name, value) from None
    if not math.isfinite(out):
        raise InvalidParameter(f"{name} must be finite, got {value!r}", name, value)
    return out


def _count(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}", name, value)
    number = _finite(name, value)
    if not number.is_integer():
        raise InvalidParameter(f"{name} must be an integer, got {value!r}", name, value)
    return int(number)


@dataclass(frozen=True)
class PhysicalParameters:
    """
    Mass-spring-damper: m*ddx + c*dx + k*x = 0.

    Args:
        x0: initial position (m)
        v0: initial velocity (m/s)
        mass: mass m > 0 (kg)
        stiffness: spring constant k > 0 (N/m)
        damping_coeff: viscous damping c >= 0 (N*s/m)
        phase: phase shift of the mode arguments (rad)
    """

    x0: float = 1.0
    v0: float = 0.0
    mass: float = 1.0
    stiffness: float = 1.0
    damping_coeff: float = 0.0
    phase: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _finite(f.name, getattr(self, f.name)))
        if self.mass <= 0:
            raise InvalidParameter(f"mass must be > 0, got {self.mass}", "mass", self.mass)
        if self.stiffness <= 0:
            raise InvalidParameter(
                f"stiffness must be > 0, got {self.stiffness}", "stiffness", self.stiffness
            )
        if self.damping_coeff < 0:
            raise InvalidParameter(
                f"damping_coeff must be >= 0, got {self.damping_coeff}",
                "damping_coeff",
                self.damping_coeff,
            )

    def replace(self, **changes: Any) -> "PhysicalParameters":
        """New validated instance with some fields changed."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class SimulationWindow:
    """
    Time window and playback rate.

    duration: simulated time span (s), > 0.
    sample_count: number of samples across the window; 0 gives an empty trajectory.
    speed_factor: wall-clock multiplier per tick (higher = slower playback), > 0.
    """

    duration: float = 20.0
    sample_count: int = 100
    speed_factor: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "duration", _finite("duration", self.duration))
        object.__setattr__(self, "sample_count", _count("sample_count", self.sample_count))
        object.__setattr__(self, "speed_factor", _finite("speed_factor", self.speed_factor))
        if self.duration <= 0:
            raise InvalidParameter(
                f"duration must be > 0, got {self.duration}", "duration", self.duration
            )
        if self.sample_count < 0:
            raise InvalidParameter(
                f"sample_count must be >= 0, got {self.sample_count}",
                "sample_count",
                self.sample_count,
            )
        if self.speed_factor <= 0:
            raise InvalidParameter(
                f"speed_factor must be > 0, got {self.speed_factor}",
                "speed_factor",
                self.speed_factor,
            )

    @property
    def step(self) -> float:
        """Time between consecutive samples (0.0 for an empty window)."""
        if self.sample_count == 0:
            return 0.0
        return self.duration / self.sample_count

    @property
    def tick_period(self) -> float:
        """Wall-clock seconds per cursor advance."""
        return self.step * self.speed_factor

    def replace(self, **changes: Any) -> "SimulationWindow":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
