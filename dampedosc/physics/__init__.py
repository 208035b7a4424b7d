"""
Physics of the damped oscillator.

Hierarchy:
  - regimes: damping regime classification (classify, natural_frequency, decay_rate)
  - solutions: closed-form x(t), v(t) per regime
  - sampler: trajectory over a simulation window (sample, amplitude_bound)
"""

# --- Regimes ---
from dampedosc.physics.regimes import (
    DampingRegime,
    classify,
    critical_damping,
    damping_ratio,
    decay_rate,
    natural_frequency,
)

# --- Closed-form solutions ---
from dampedosc.physics.solutions import (
    ClosedFormSolution,
    CriticallyDampedSolution,
    OverdampedSolution,
    UndampedSolution,
    UnderdampedSolution,
    solution_for,
)

# --- Sampler ---
from dampedosc.physics.sampler import amplitude_bound, normalized_position, sample, sample_times

__all__ = [
    # Regimi
    "DampingRegime",
    "classify",
    "natural_frequency",
    "decay_rate",
    "critical_damping",
    "damping_ratio",
    # Soluzioni
    "ClosedFormSolution",
    "UndampedSolution",
    "UnderdampedSolution",
    "OverdampedSolution",
    "CriticallyDampedSolution",
    "solution_for",
    # Sampler
    "sample",
    "sample_times",
    "amplitude_bound",
    "normalized_position",
]
