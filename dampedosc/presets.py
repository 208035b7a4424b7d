"""
Named parameter sets for quick comparison of the damping regimes.

Applying a preset is a bulk update of PhysicalParameters: window and
playback settings are left as they are.
"""

import math
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Preset:
    """Display name and parameter values of a preset."""

    name: str
    params: Dict[str, float] = field(default_factory=dict)


def _params(**overrides: float) -> Dict[str, float]:
    base = {"x0": 1.0, "v0": 0.0, "mass": 1.0, "stiffness": 1.0, "damping_coeff": 0.0, "phase": 0.0}
    base.update(overrides)
    return base


PRESETS: Dict[str, Preset] = {
    "undamped": Preset("Undamped", _params()),
    "weak_damping": Preset("Weak damping", _params(damping_coeff=0.1)),
    "strong_damping": Preset("Strong damping", _params(damping_coeff=4.0)),
    "critical_damping": Preset("Critical damping", _params(damping_coeff=2.0)),
    "high_frequency": Preset("High frequency", _params(stiffness=10.0, damping_coeff=0.5)),
    "low_frequency": Preset("Low frequency", _params(mass=10.0, damping_coeff=0.5)),
    "high_initial_velocity": Preset(
        "High initial velocity", _params(x0=0.0, v0=5.0, damping_coeff=0.1)
    ),
    "shifted_initial_phase": Preset(
        "Shifted initial phase", _params(damping_coeff=0.1, phase=math.pi / 2)
    ),
}


def _normalize(key: str) -> str:
    return key.strip().lower().replace(" ", "_").replace("-", "_")


def get_preset(key: str) -> Preset:
    """
    Look up a preset by key ("weak_damping") or display name ("Weak damping"),
    case insensitive.

    Raises:
        KeyError: unknown preset.
    """
    wanted = _normalize(key)
    if wanted in PRESETS:
        return PRESETS[wanted]
    for preset in PRESETS.values():
        if _normalize(preset.name) == wanted:
            return preset
    raise KeyError(f"Unknown preset {key!r}; available: {', '.join(PRESETS)}")
